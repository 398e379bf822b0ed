from datetime import datetime, timedelta, timezone
import random

import pytest


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def _seeded_source(seed: int):
    rng = random.Random(seed)
    return lambda size: bytes(rng.getrandbits(8) for _ in range(size))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def seeded_source():
    return _seeded_source
