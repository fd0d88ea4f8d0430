import os

import pytest

from txsecure.domain.crypto.aead import Aes256Gcm
from txsecure.domain.crypto.codec import to_hex
from txsecure.domain.crypto.models import TxSecureRecord

ZERO_KEY = "0" * 64


def flip_bit(hex_value: str, bit: int) -> str:
    """Return ``hex_value`` with a single bit inverted."""
    data = bytearray(bytes.fromhex(hex_value))
    data[bit // 8] ^= 1 << (bit % 8)
    return data.hex()


def tamper(record: TxSecureRecord, field: str, bit: int = 0) -> TxSecureRecord:
    return record.model_copy(update={field: flip_bit(getattr(record, field), bit)})


def sealed_record(master_key: str, dek: bytes, plaintext: bytes) -> TxSecureRecord:
    """Build a record by hand so the inner layers can hold arbitrary content."""
    payload_nonce, wrap_nonce = os.urandom(12), os.urandom(12)
    payload_key = dek if len(dek) == 32 else os.urandom(32)
    payload_ct, payload_tag = Aes256Gcm(payload_key).seal(payload_nonce, plaintext)
    dek_wrapped, dek_wrap_tag = Aes256Gcm(bytes.fromhex(master_key)).seal(wrap_nonce, dek)
    return TxSecureRecord(
        party_id="party_123",
        payload_nonce=to_hex(payload_nonce),
        payload_ct=to_hex(payload_ct),
        payload_tag=to_hex(payload_tag),
        dek_wrap_nonce=to_hex(wrap_nonce),
        dek_wrapped=to_hex(dek_wrapped),
        dek_wrap_tag=to_hex(dek_wrap_tag),
    )


@pytest.fixture
def master_key() -> str:
    return os.urandom(32).hex()


@pytest.fixture
def payload() -> dict:
    return {"amount": 100, "currency": "AED"}
