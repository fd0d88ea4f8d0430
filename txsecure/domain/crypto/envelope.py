"""Envelope encryption of transaction payloads.

Each payload is sealed under a fresh data encryption key (DEK); the DEK is
then sealed under the master key and only its wrapped form is kept in the
record. Decryption succeeds only if both layers authenticate.
"""
import json
import logging
from typing import Any, Mapping, Union

from txsecure.domain.crypto.aead import Aes256Gcm
from txsecure.domain.crypto.codec import decode_record, to_hex
from txsecure.domain.crypto.errors import (
    AuthenticationFailure,
    FormatError,
    IntegrityError,
)
from txsecure.domain.crypto.keys import (
    KEY_SIZE,
    generate_dek,
    generate_nonce,
    validate_master_key,
)
from txsecure.domain.crypto.models import TxSecureRecord

logger = logging.getLogger(__name__)


def _serialize_payload(payload: Any) -> bytes:
    try:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise FormatError(f"payload is not JSON-serializable: {e}") from e
    return text.encode("utf-8")


def _parse_payload(plaintext: bytes) -> Any:
    try:
        return json.loads(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FormatError("failed to parse decrypted payload as JSON") from e


def encrypt_payload(payload: Any, party_id: str, master_key_hex: str) -> TxSecureRecord:
    """Encrypt ``payload`` for ``party_id`` under a fresh DEK wrapped by the master key.

    Args:
        payload: Any JSON-serializable value.
        party_id: Opaque caller label, stored as-is.
        master_key_hex: 64 hex chars (32 bytes).

    Returns:
        A new immutable TxSecureRecord.

    Raises:
        ValidationError: If the master key is malformed.
        FormatError: If the payload cannot be serialized.
    """
    master_key = validate_master_key(master_key_hex)
    plaintext = _serialize_payload(payload)

    dek = generate_dek()
    payload_nonce = generate_nonce()
    payload_ct, payload_tag = Aes256Gcm(dek).seal(payload_nonce, plaintext)

    dek_wrap_nonce = generate_nonce()
    dek_wrapped, dek_wrap_tag = Aes256Gcm(master_key).seal(dek_wrap_nonce, dek)

    record = TxSecureRecord(
        party_id=party_id,
        payload_nonce=to_hex(payload_nonce),
        payload_ct=to_hex(payload_ct),
        payload_tag=to_hex(payload_tag),
        dek_wrap_nonce=to_hex(dek_wrap_nonce),
        dek_wrapped=to_hex(dek_wrapped),
        dek_wrap_tag=to_hex(dek_wrap_tag),
    )
    logger.debug("Encrypted record %s (%d payload bytes)", record.id, len(plaintext))
    return record


def decrypt_record(record: Union[TxSecureRecord, Mapping[str, Any]], master_key_hex: str) -> Any:
    """Authenticate and decrypt ``record``, returning the parsed payload.

    ``record`` may be a TxSecureRecord or its flat wire mapping. It is never
    modified.

    Raises:
        ValidationError: Malformed record field or master key.
        AuthenticationFailure: Either AES-GCM layer failed verification.
        IntegrityError: The unwrapped DEK has the wrong length.
        FormatError: The recovered bytes are not JSON.
    """
    if not isinstance(record, TxSecureRecord):
        record = TxSecureRecord.from_wire(record)
    decoded = decode_record(record)
    master_key = validate_master_key(master_key_hex)

    try:
        dek = Aes256Gcm(master_key).open(decoded.dek_wrap_nonce, decoded.dek_wrapped, decoded.dek_wrap_tag)
    except AuthenticationFailure as e:
        raise AuthenticationFailure("failed to unwrap DEK: authentication failed or corrupted data") from e

    if len(dek) != KEY_SIZE:
        raise IntegrityError("invalid DEK length after unwrap")

    try:
        plaintext = Aes256Gcm(dek).open(decoded.payload_nonce, decoded.payload_ct, decoded.payload_tag)
    except AuthenticationFailure as e:
        raise AuthenticationFailure("failed to decrypt payload: authentication failed or corrupted data") from e

    return _parse_payload(plaintext)
