from typing import Any, Dict, NoReturn, Optional

from fastapi import HTTPException

from txsecure.domain.crypto.errors import (
    ConfigurationError,
    EnvelopeError,
    TamperDetected,
)

TAMPER_MESSAGE = "Integrity check failed: Data may have been tampered with"


def raise_txsecure_error(
    code: str,
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> NoReturn:
    """Raise a standardized TxSecure HTTPException.

    Args:
        code: Error code (TAMPER_DETECTED, VALIDATION_FAILED, etc.)
        status_code: HTTP Status Code (400, 422, etc.)
        message: Human readable message
        details: Optional extra details
    """
    error_body: Dict[str, Any] = {
        "code": code,
        "message": message
    }
    if details:
        error_body["details"] = details

    raise HTTPException(status_code=status_code, detail={"error": error_body})


def raise_envelope_error(exc: EnvelopeError) -> NoReturn:
    """Map an envelope failure onto its HTTP status.

    Tampering (either AES-GCM layer, or an inconsistent DEK) is reported as a
    single 422 so that callers cannot tell which layer failed.
    """
    if isinstance(exc, TamperDetected):
        raise_txsecure_error(TamperDetected.code, 422, TAMPER_MESSAGE)
    if isinstance(exc, ConfigurationError):
        raise_txsecure_error(exc.code, 500, exc.message)
    raise_txsecure_error(exc.code, 400, exc.message)
