"""XChaCha20-Poly1305 sealing with a random nonce framed ahead of the ciphertext."""

from __future__ import annotations

import os
import struct
from typing import Callable, Optional

from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_ABYTES,
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
    crypto_aead_xchacha20poly1305_ietf_KEYBYTES,
    crypto_aead_xchacha20poly1305_ietf_NPUBBYTES,
)
from nacl.exceptions import CryptoError

from ..errors import CiphertextTooShortError, IntegrityError, InvalidKeyError

RandomSource = Callable[[int], bytes]

KEY_SIZE = crypto_aead_xchacha20poly1305_ietf_KEYBYTES
NONCE_SIZE = crypto_aead_xchacha20poly1305_ietf_NPUBBYTES
TAG_SIZE = crypto_aead_xchacha20poly1305_ietf_ABYTES


def encode_additional(additional: int) -> bytes:
    """Return the 2-byte little-endian associated data for a metadata value."""
    return struct.pack("<H", additional)


class XChaCha20Poly1305:
    """AEAD with a 192-bit nonce, wide enough for purely random nonces."""

    nonce_size = NONCE_SIZE
    overhead = TAG_SIZE

    def __init__(self, key: bytes, *, random_source: Optional[RandomSource] = None) -> None:
        if len(key) != KEY_SIZE:
            raise InvalidKeyError(f"invalid key size: expected {KEY_SIZE} bytes, got {len(key)}")
        self._key = bytes(key)
        self._random = random_source or os.urandom

    def encrypt(self, nonce: bytes, plaintext: bytes, aad: bytes) -> bytes:
        """Return ``ciphertext || tag`` for an explicit nonce."""
        return crypto_aead_xchacha20poly1305_ietf_encrypt(plaintext, aad, nonce, self._key)

    def seal(self, additional: int, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` and return ``nonce || ciphertext || tag``."""
        nonce = self._random(NONCE_SIZE)
        if len(nonce) != NONCE_SIZE:
            raise RuntimeError(f"random source returned {len(nonce)} bytes, expected {NONCE_SIZE}")
        return nonce + self.encrypt(nonce, plaintext, encode_additional(additional))

    def open(self, additional: int, framed: bytes) -> bytes:
        """Authenticate and decrypt a buffer produced by :meth:`seal`."""
        if len(framed) < NONCE_SIZE + TAG_SIZE:
            raise CiphertextTooShortError("ciphertext too short")
        nonce, ciphertext = framed[:NONCE_SIZE], framed[NONCE_SIZE:]
        try:
            return crypto_aead_xchacha20poly1305_ietf_decrypt(
                ciphertext, encode_additional(additional), nonce, self._key
            )
        except CryptoError:
            raise IntegrityError("invalid token") from None
