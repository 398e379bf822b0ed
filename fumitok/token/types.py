"""Token claim and verification datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

# A check receives the masked metadata. It rejects by raising or by returning a
# falsy value other than None; None and truthy values pass.
Check = Callable[[int], Optional[object]]


@dataclass(frozen=True)
class Claims:
    subject_id: int
    metadata: int
    expire_at: datetime


class TokenState(str, Enum):
    """Where a token stands relative to now and the refresh window."""

    MALFORMED = "malformed"
    REJECTED = "rejected"
    TAMPERED = "tampered"
    LIVE = "live"
    GRACE_EXPIRED = "grace_expired"
    DEAD = "dead"

    @property
    def refreshable(self) -> bool:
        return self in (TokenState.LIVE, TokenState.GRACE_EXPIRED)


@dataclass(frozen=True)
class VerificationResult:
    state: TokenState
    reason: str
    claims: Optional[Claims] = None

    @property
    def valid(self) -> bool:
        return self.state is TokenState.LIVE
