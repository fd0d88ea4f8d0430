"""Key material helpers: master key validation and fresh randomness."""
import os
import re

from txsecure.domain.crypto.errors import ValidationError

KEY_SIZE = 32    # AES-256
NONCE_SIZE = 12  # 96-bit GCM nonce

_MASTER_KEY_RE = re.compile(r"^[0-9a-fA-F]{64}$")


def validate_master_key(master_key_hex: str) -> bytes:
    """Check that ``master_key_hex`` encodes exactly 32 bytes and decode it.

    Raises:
        ValidationError: On a non-string, wrong length or non-hex character.
    """
    if not isinstance(master_key_hex, str):
        raise ValidationError("master key must be a hex string")
    if not _MASTER_KEY_RE.fullmatch(master_key_hex):
        raise ValidationError(f"master key must be {KEY_SIZE} bytes ({KEY_SIZE * 2} hex chars)")
    return bytes.fromhex(master_key_hex)


def generate_dek() -> bytes:
    """Return a fresh 256-bit data encryption key."""
    return os.urandom(KEY_SIZE)


def generate_nonce() -> bytes:
    return os.urandom(NONCE_SIZE)
