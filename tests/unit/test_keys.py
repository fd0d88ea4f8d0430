"""Tests for master key validation and key/nonce generation."""
import pytest

from txsecure.domain.crypto.errors import ValidationError
from txsecure.domain.crypto.keys import (
    generate_dek,
    generate_nonce,
    validate_master_key,
)


def test_valid_master_key_decodes_to_32_bytes():
    key = validate_master_key("ab" * 32)
    assert key == bytes([0xAB]) * 32


def test_uppercase_master_key_is_accepted():
    assert validate_master_key("AB" * 32) == bytes([0xAB]) * 32


@pytest.mark.parametrize("bad_key", [
    "00" * 31,          # 31 bytes
    "00" * 33,          # 33 bytes
    "0" * 63,           # odd length
    "0" * 63 + "g",     # non-hex character
    " " + "0" * 63,
    "0" * 64 + "\n",   # trailing newline
    "0" * 63 + "\n",
    "",
])
def test_malformed_master_key_rejected(bad_key):
    with pytest.raises(ValidationError, match="master key must be 32 bytes"):
        validate_master_key(bad_key)


def test_non_string_master_key_rejected():
    with pytest.raises(ValidationError, match="must be a hex string"):
        validate_master_key(b"\x00" * 32)  # type: ignore[arg-type]


def test_generate_dek_is_fresh_256_bit():
    keys = {generate_dek() for _ in range(64)}
    assert len(keys) == 64
    assert all(len(k) == 32 for k in keys)


def test_generate_nonce_is_96_bit():
    assert len(generate_nonce()) == 12
    assert generate_nonce() != generate_nonce()
