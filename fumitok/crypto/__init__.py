"""Cryptographic building blocks: AEAD framing and the CRC-64 checksum."""

from .aead import NONCE_SIZE, TAG_SIZE, RandomSource, XChaCha20Poly1305
from .checksum import ECMA, Crc64Table

__all__ = [
    "NONCE_SIZE",
    "TAG_SIZE",
    "RandomSource",
    "XChaCha20Poly1305",
    "ECMA",
    "Crc64Table",
]
