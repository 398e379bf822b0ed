"""Fixed byte layouts for the sealed plaintext and the outer token frame."""

from __future__ import annotations

import struct
from typing import Tuple

from ..crypto.aead import NONCE_SIZE, TAG_SIZE
from ..crypto.checksum import Crc64Table
from ..errors import FormatError, IntegrityError

METADATA_SIZE = 2
PLAINTEXT_SIZE = 24
RAW_TOKEN_SIZE = METADATA_SIZE + NONCE_SIZE + PLAINTEXT_SIZE + TAG_SIZE

UINT16_MAX = 0xFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF

# expiry ms (int64 LE), subject id (uint64 LE); the CRC follows big-endian.
_FIELDS = struct.Struct("<qQ")
_CHECKSUM = struct.Struct(">Q")
_METADATA = struct.Struct("<H")


def pack_plaintext(table: Crc64Table, expire_ms: int, subject_id: int) -> bytes:
    """Lay out expiry and subject id, followed by their checksum."""
    fields = _FIELDS.pack(expire_ms, subject_id)
    return fields + _CHECKSUM.pack(table.checksum(fields))


def unpack_plaintext(table: Crc64Table, plaintext: bytes) -> Tuple[int, int]:
    """Verify the embedded checksum and return ``(expire_ms, subject_id)``."""
    if len(plaintext) != PLAINTEXT_SIZE:
        raise IntegrityError("invalid token")
    fields = plaintext[: _FIELDS.size]
    (expected,) = _CHECKSUM.unpack(plaintext[_FIELDS.size :])
    if table.checksum(fields) != expected:
        raise IntegrityError("invalid token")
    return _FIELDS.unpack(fields)


def pack_frame(metadata: int, framed: bytes) -> bytes:
    """Prefix the sealed buffer with the cleartext metadata."""
    return _METADATA.pack(metadata) + framed


def split_frame(raw: bytes) -> Tuple[int, bytes]:
    """Return ``(metadata, framed_ciphertext)`` from a decoded token."""
    if len(raw) < METADATA_SIZE:
        raise FormatError("token frame too short")
    (metadata,) = _METADATA.unpack(raw[:METADATA_SIZE])
    return metadata, raw[METADATA_SIZE:]
