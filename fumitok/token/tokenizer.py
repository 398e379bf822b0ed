"""Generate, validate and refresh sealed subject tokens."""

from __future__ import annotations

import binascii
import os
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Sequence

from ..crypto.aead import KEY_SIZE, RandomSource, XChaCha20Poly1305
from ..crypto.checksum import Crc64Table
from ..errors import (
    ExpiredError,
    FormatError,
    IntegrityError,
    InvalidKeyError,
    PredicateError,
    TokenError,
)
from ..logging import get_logger
from ..utils.time import from_unix_ms, to_unix_ms, utc_now
from .codec import decode, encode
from .layout import UINT16_MAX, UINT64_MAX, pack_frame, pack_plaintext, split_frame, unpack_plaintext
from .types import Check, Claims, TokenState, VerificationResult

if TYPE_CHECKING:
    from ..config import TokenizerConfig

Clock = Callable[[], datetime]

DEFAULT_TTL = timedelta(hours=1)

logger = get_logger("fumitok.tokenizer")


def generate_key(random_source: Optional[RandomSource] = None) -> str:
    """Return a fresh hex-encoded key of the size the tokenizer expects."""
    return (random_source or os.urandom)(KEY_SIZE).hex()


def _check_range(name: str, value: int, upper: int) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be in [0, {upper:#x}], got {value}")


class Tokenizer:
    """Symmetric token codec bound to a single XChaCha20-Poly1305 key.

    Tokens carry a 16-bit metadata field in the clear. Bits selected by
    ``mask`` are caller-defined; the rest are random noise. The metadata is
    authenticated as associated data, so it can be filtered on with
    ``checks`` before any decryption happens.
    """

    __slots__ = ("_aead", "_table", "_random", "_clock", "_config")

    def __init__(
        self,
        hex_key: str,
        *,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
        config: Optional["TokenizerConfig"] = None,
    ) -> None:
        try:
            key = binascii.unhexlify(hex_key)
        except (ValueError, TypeError):
            raise InvalidKeyError("key is not valid hex") from None
        self._random = random_source or os.urandom
        self._aead = XChaCha20Poly1305(key, random_source=self._random_bytes)
        self._table = Crc64Table.ecma()
        self._clock = clock or utc_now
        self._config = config

    @classmethod
    def from_config(cls, config: "TokenizerConfig", **kwargs) -> "Tokenizer":
        return cls(config.hex_key, config=config, **kwargs)

    def _random_bytes(self, size: int) -> bytes:
        try:
            return self._random(size)
        except Exception:
            logger.critical("random_source_failed", size=size)
            raise

    @contextmanager
    def _logged(self, operation: str) -> Iterator[None]:
        try:
            yield
        except TokenError as exc:
            logger.debug("token_rejected", operation=operation, code=exc.code)
            raise

    def generate(self, subject_id: int, expire_at: datetime, addt: int = 0, mask: int = 0) -> str:
        """Seal ``subject_id`` and ``expire_at`` into a new token string."""
        _check_range("subject_id", subject_id, UINT64_MAX)
        _check_range("addt", addt, UINT16_MAX)
        _check_range("mask", mask, UINT16_MAX)
        plaintext = pack_plaintext(self._table, to_unix_ms(expire_at), subject_id)
        noise = int.from_bytes(self._random_bytes(2), "little")
        metadata = (addt & mask) | (noise & ~mask & UINT16_MAX)
        return encode(pack_frame(metadata, self._aead.seal(metadata, plaintext)))

    def issue(
        self,
        subject_id: int,
        addt: int = 0,
        *,
        ttl: Optional[timedelta] = None,
        mask: Optional[int] = None,
    ) -> str:
        """Generate a token expiring ``ttl`` from now, with defaults from config."""
        if ttl is None:
            ttl = self._config.ttl if self._config else DEFAULT_TTL
        if mask is None:
            mask = self._config.mask if self._config else 0
        return self.generate(subject_id, self._clock() + ttl, addt, mask)

    def _open(self, token: str, mask: int, checks: Sequence[Check]) -> Claims:
        metadata, framed = split_frame(decode(token))
        masked = metadata & mask
        for check in checks:
            result = check(masked)
            if result is not None and not result:
                raise PredicateError(masked)
        plaintext = self._aead.open(metadata, framed)
        expire_ms, subject_id = unpack_plaintext(self._table, plaintext)
        return Claims(subject_id=subject_id, metadata=masked, expire_at=from_unix_ms(expire_ms))

    def validate(self, token: str, mask: int = 0, checks: Sequence[Check] = ()) -> Claims:
        """Verify ``token`` and return its claims.

        Raises :class:`ExpiredError` with the decoded claims attached when the
        token is authentic but past its expiry.
        """
        with self._logged("validate"):
            claims = self._open(token, mask, checks)
            if self._clock() > claims.expire_at:
                raise ExpiredError(claims)
            return claims

    def refresh(
        self,
        token: str,
        expire_at: datetime,
        valid_after: timedelta,
        mask: int = 0,
        checks: Sequence[Check] = (),
    ) -> str:
        """Mint a replacement for a live token or one expired less than ``valid_after`` ago."""
        with self._logged("refresh"):
            claims = self._open(token, mask, checks)
            if self._clock() - valid_after > claims.expire_at:
                raise ExpiredError(claims, "token expired beyond the refresh window")
        return self.generate(claims.subject_id, expire_at, claims.metadata, mask)

    def inspect(
        self,
        token: str,
        valid_after: timedelta = timedelta(0),
        mask: int = 0,
        checks: Sequence[Check] = (),
    ) -> VerificationResult:
        """Classify ``token`` without raising for token failures."""
        try:
            claims = self._open(token, mask, checks)
        except FormatError as exc:
            return VerificationResult(TokenState.MALFORMED, exc.code)
        except PredicateError as exc:
            return VerificationResult(TokenState.REJECTED, exc.code)
        except IntegrityError as exc:
            return VerificationResult(TokenState.TAMPERED, exc.code)

        now = self._clock()
        if now <= claims.expire_at:
            return VerificationResult(TokenState.LIVE, "ok", claims)
        if now - valid_after <= claims.expire_at:
            return VerificationResult(TokenState.GRACE_EXPIRED, ExpiredError.code, claims)
        return VerificationResult(TokenState.DEAD, ExpiredError.code, claims)
