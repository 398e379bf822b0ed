"""Environment-driven configuration for tokenizer construction."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

from .errors import InvalidKeyError

DEFAULT_TTL_SECONDS = 3600
DEFAULT_REFRESH_WINDOW_SECONDS = 86400


@dataclass(frozen=True)
class TokenizerConfig:
    """Key material and issuance defaults."""

    hex_key: str
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    refresh_window_seconds: int = DEFAULT_REFRESH_WINDOW_SECONDS
    mask: int = 0

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if self.refresh_window_seconds < 0:
            raise ValueError("refresh_window_seconds must not be negative")
        if not 0 <= self.mask <= 0xFFFF:
            raise ValueError("mask must fit in 16 bits")

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)

    @property
    def refresh_window(self) -> timedelta:
        return timedelta(seconds=self.refresh_window_seconds)

    @classmethod
    def from_env(cls, prefix: str = "FUMITOK_") -> "TokenizerConfig":
        """Build config from ``<prefix>KEY`` and optional TTL, window and mask variables."""
        hex_key = os.getenv(f"{prefix}KEY", "").strip()
        if not hex_key:
            raise InvalidKeyError(f"{prefix}KEY is not set")
        return cls(
            hex_key=hex_key,
            ttl_seconds=int(os.getenv(f"{prefix}TTL_SECONDS", str(DEFAULT_TTL_SECONDS))),
            refresh_window_seconds=int(
                os.getenv(f"{prefix}REFRESH_WINDOW_SECONDS", str(DEFAULT_REFRESH_WINDOW_SECONDS))
            ),
            mask=int(os.getenv(f"{prefix}MASK", "0"), 0),
        )
