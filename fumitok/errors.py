"""Error taxonomy for token generation and verification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .token.types import Claims


class TokenError(Exception):
    """Base exception for all tokenizer failures."""

    code = "token_error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.code.replace("_", " ")
        super().__init__(self.message)


class InvalidKeyError(TokenError):
    """Key material is not valid hex or has the wrong decoded length."""

    code = "invalid_key"


class FormatError(TokenError):
    """Token text or framing cannot be decoded."""

    code = "malformed_token"


class TokenLengthError(FormatError):
    """Encoded token does not have the fixed expected length."""

    code = "invalid_token_length"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid token length: expected {expected}, got {actual}")


class CiphertextTooShortError(FormatError):
    """Framed ciphertext cannot hold a nonce and an authentication tag."""

    code = "ciphertext_too_short"


class IntegrityError(TokenError):
    """Authentication tag or embedded checksum did not verify."""

    code = "invalid_token"


class ExpiredError(TokenError):
    """Token is authentic but past its expiry; claims are still attached."""

    code = "expired_token"

    def __init__(self, claims: "Claims", message: Optional[str] = None) -> None:
        self.claims = claims
        super().__init__(message)


class PredicateError(TokenError):
    """A caller-supplied metadata check rejected the token."""

    code = "rejected_token"

    def __init__(self, metadata: int, message: Optional[str] = None) -> None:
        self.metadata = metadata
        super().__init__(message or f"metadata 0x{metadata:04x} rejected")
