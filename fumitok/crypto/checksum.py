"""Table-driven CRC-64 used as an in-payload tamper detector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# ECMA-182 polynomial, bit-reversed.
ECMA = 0xC96C5795D7870F42

_MASK64 = 0xFFFFFFFFFFFFFFFF


def make_table(poly: int) -> Tuple[int, ...]:
    """Build the 256-entry lookup table for a reflected 64-bit polynomial."""
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


@dataclass(frozen=True)
class Crc64Table:
    """Immutable CRC-64 lookup table with an initial and final inversion."""

    poly: int
    entries: Tuple[int, ...]

    @classmethod
    def ecma(cls) -> "Crc64Table":
        return cls(poly=ECMA, entries=make_table(ECMA))

    def update(self, crc: int, data: bytes) -> int:
        """Continue a checksum over ``data``, starting from a finished ``crc``."""
        entries = self.entries
        crc = ~crc & _MASK64
        for byte in data:
            crc = entries[(crc ^ byte) & 0xFF] ^ (crc >> 8)
        return ~crc & _MASK64

    def checksum(self, data: bytes) -> int:
        """Return the CRC-64 of ``data``."""
        return self.update(0, data)
