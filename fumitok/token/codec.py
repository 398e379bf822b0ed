"""Text encoding of raw token frames as padded URL-safe base64."""

from __future__ import annotations

import base64
import binascii
import re

from ..errors import FormatError, TokenLengthError
from .layout import RAW_TOKEN_SIZE

_URLSAFE_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encoded_length(raw_size: int) -> int:
    """Return the padded base64 length for ``raw_size`` bytes."""
    return 4 * ((raw_size + 2) // 3)


TOKEN_LENGTH = encoded_length(RAW_TOKEN_SIZE)


def encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode(token: str) -> bytes:
    """Decode a token string after checking its exact length and alphabet."""
    if len(token) != TOKEN_LENGTH:
        raise TokenLengthError(TOKEN_LENGTH, len(token))
    if not _URLSAFE_RE.fullmatch(token):
        raise FormatError("token contains characters outside the url-safe base64 alphabet")
    try:
        raw = base64.urlsafe_b64decode(token.encode("ascii"))
    except (binascii.Error, ValueError):
        raise FormatError("token is not valid base64") from None
    if len(raw) != RAW_TOKEN_SIZE:
        raise FormatError("token has the wrong decoded size")
    return raw
