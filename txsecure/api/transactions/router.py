"""Transactions API Router - encrypt, fetch and decrypt transaction records.

The master key is read from configuration on every request and passed into
the crypto core explicitly; nothing key-related is cached here.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from txsecure.dependencies import get_master_key, get_record_store
from txsecure.domain.crypto.envelope import decrypt_record, encrypt_payload
from txsecure.domain.crypto.errors import EnvelopeError, TamperDetected
from txsecure.domain.interfaces import RecordStore
from txsecure.errors import raise_envelope_error, raise_txsecure_error

router = APIRouter()
logger = logging.getLogger(__name__)


class EncryptRequest(BaseModel):
    party_id: str = Field(..., alias="partyId")
    payload: Dict[str, Any]

    model_config = ConfigDict(populate_by_name=True)


def _load_record(record_id: str, store: RecordStore) -> Dict[str, Any]:
    data = store.get_record(record_id)
    if data is None:
        raise_txsecure_error("NOT_FOUND", 404, "not found")
    return data


@router.post("/tx/encrypt")
def encrypt_transaction(body: EncryptRequest, store: RecordStore = Depends(get_record_store)):
    """Encrypt a payload and store the resulting record."""
    try:
        master_key = get_master_key()
        record = encrypt_payload(body.payload, body.party_id, master_key)
    except EnvelopeError as e:
        logger.warning("Encrypt rejected: %s", e.code)
        raise_envelope_error(e)

    stored = store.put_record(record.to_wire())
    logger.info("Created record %s", record.id)
    return stored


@router.get("/tx/{record_id}")
def get_transaction(record_id: str, store: RecordStore = Depends(get_record_store)):
    """Return the stored (still encrypted) record."""
    return _load_record(record_id, store)


@router.post("/tx/{record_id}/decrypt")
def decrypt_transaction(record_id: str, store: RecordStore = Depends(get_record_store)):
    """Decrypt a stored record. Tampering is reported as 422."""
    data = _load_record(record_id, store)
    try:
        master_key = get_master_key()
        payload = decrypt_record(data, master_key)
    except TamperDetected as e:
        logger.warning("Tamper detected for record %s: %s", record_id, e.code)
        raise_envelope_error(e)
    except EnvelopeError as e:
        logger.warning("Decrypt rejected for record %s: %s", record_id, e.message)
        raise_envelope_error(e)

    return {"payload": payload}
