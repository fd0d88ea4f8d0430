"""AES-256-GCM primitive with a detached authentication tag.

``AESGCM`` appends the 16-byte tag to the ciphertext; the record format stores
the two separately, so this wrapper splits on seal and rejoins on open.
"""
import logging
from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from txsecure.domain.crypto.errors import AuthenticationFailure
from txsecure.domain.crypto.keys import KEY_SIZE, NONCE_SIZE

logger = logging.getLogger(__name__)

TAG_SIZE = 16
ALGORITHM_AES_256_GCM = "AES-256-GCM"


class Aes256Gcm:
    """AEAD cipher bound to a single 32-byte key."""

    def __init__(self, key: bytes):
        if len(key) != KEY_SIZE:
            raise ValueError(f"key must be exactly {KEY_SIZE} bytes")
        self._aesgcm = AESGCM(key)

    def seal(self, nonce: bytes, plaintext: bytes) -> Tuple[bytes, bytes]:
        """Encrypt ``plaintext`` and return ``(ciphertext, tag)``.

        The caller guarantees ``nonce`` is never reused with this key.
        """
        _check_nonce(nonce)
        ct_and_tag = self._aesgcm.encrypt(nonce, plaintext, None)
        return ct_and_tag[:-TAG_SIZE], ct_and_tag[-TAG_SIZE:]

    def open(self, nonce: bytes, ciphertext: bytes, tag: bytes) -> bytes:
        """Verify ``tag`` and return the plaintext.

        Raises:
            AuthenticationFailure: If the tag does not verify. No plaintext
                is released in that case.
        """
        _check_nonce(nonce)
        if len(tag) != TAG_SIZE:
            raise ValueError(f"tag must be exactly {TAG_SIZE} bytes")
        try:
            return self._aesgcm.decrypt(nonce, ciphertext + tag, None)
        except InvalidTag as e:
            logger.debug("GCM tag verification failed")
            raise AuthenticationFailure("authentication tag mismatch or key mismatch") from e


def _check_nonce(nonce: bytes) -> None:
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be exactly {NONCE_SIZE} bytes")
