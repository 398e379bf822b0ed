"""fumitok package.

Compact, stateless authentication tokens: a subject id and an expiry sealed
with XChaCha20-Poly1305, plus 16 bits of authenticated cleartext metadata.
"""

from .config import TokenizerConfig
from .errors import (
    CiphertextTooShortError,
    ExpiredError,
    FormatError,
    IntegrityError,
    InvalidKeyError,
    PredicateError,
    TokenError,
    TokenLengthError,
)
from .token import TOKEN_LENGTH, Claims, TokenState, Tokenizer, VerificationResult, generate_key

__all__ = [
    "TOKEN_LENGTH",
    "Tokenizer",
    "TokenizerConfig",
    "Claims",
    "TokenState",
    "VerificationResult",
    "generate_key",
    "TokenError",
    "InvalidKeyError",
    "FormatError",
    "TokenLengthError",
    "CiphertextTooShortError",
    "IntegrityError",
    "ExpiredError",
    "PredicateError",
]
