"""Token layout, encoding and the tokenizer itself."""

from .codec import TOKEN_LENGTH
from .tokenizer import Tokenizer, generate_key
from .types import Check, Claims, TokenState, VerificationResult

__all__ = ["TOKEN_LENGTH", "Tokenizer", "generate_key", "Check", "Claims", "TokenState", "VerificationResult"]
