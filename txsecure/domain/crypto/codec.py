"""Record codec: hex encoding of binary fields and structural validation.

Decoding never touches a cryptographic primitive; every malformed field is
reported as a ValidationError before any key is used.
"""
import re
from dataclasses import dataclass
from typing import Optional

from txsecure.domain.crypto.aead import ALGORITHM_AES_256_GCM, TAG_SIZE
from txsecure.domain.crypto.errors import ValidationError
from txsecure.domain.crypto.keys import NONCE_SIZE
from txsecure.domain.crypto.models import MK_VERSION_V1, TxSecureRecord

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


@dataclass(frozen=True)
class DecodedRecord:
    """Binary view of the authenticated material of a record."""

    payload_nonce: bytes
    payload_ct: bytes
    payload_tag: bytes
    dek_wrap_nonce: bytes
    dek_wrapped: bytes
    dek_wrap_tag: bytes


def to_hex(data: bytes) -> str:
    return data.hex()


def from_hex(value: str, name: str, expected_len: Optional[int] = None) -> bytes:
    """Decode a hex field, optionally enforcing its byte length.

    Raises:
        ValidationError: If ``value`` is not non-empty, even-length hex or has
            the wrong decoded length.
    """
    if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
        raise ValidationError(f"validation failed: {name} contains non-hex characters")
    if len(value) % 2:
        raise ValidationError(f"validation failed: {name} has odd hex length")
    if expected_len is not None and len(value) != expected_len * 2:
        raise ValidationError(f"validation failed: {name} has invalid length")
    return bytes.fromhex(value)


def decode_record(record: TxSecureRecord) -> DecodedRecord:
    """Validate every hex field of ``record`` and return the raw bytes."""
    if record.alg != ALGORITHM_AES_256_GCM:
        raise ValidationError(f"validation failed: unsupported algorithm {record.alg!r}")
    if record.mk_version != MK_VERSION_V1:
        raise ValidationError(f"validation failed: unsupported mk_version {record.mk_version!r}")

    payload_nonce = from_hex(record.payload_nonce, "payloadNonce", NONCE_SIZE)
    payload_tag = from_hex(record.payload_tag, "payloadTag", TAG_SIZE)
    dek_wrap_nonce = from_hex(record.dek_wrap_nonce, "dekWrapNonce", NONCE_SIZE)
    dek_wrap_tag = from_hex(record.dek_wrap_tag, "dekWrapTag", TAG_SIZE)
    payload_ct = from_hex(record.payload_ct, "payloadCt")
    dek_wrapped = from_hex(record.dek_wrapped, "dekWrapped")

    return DecodedRecord(
        payload_nonce=payload_nonce,
        payload_ct=payload_ct,
        payload_tag=payload_tag,
        dek_wrap_nonce=dek_wrap_nonce,
        dek_wrapped=dek_wrapped,
        dek_wrap_tag=dek_wrap_tag,
    )
