"""Deterministic linear congruential random numbers and helpers."""

from __future__ import annotations

import itertools
import time
from collections.abc import Iterable, Sequence

_MASK32 = 0xFFFFFFFF


def count_until_zero(values: Iterable[int] | None) -> int:
    """Count the leading items of ``values`` that come before the first zero."""
    if values is None:
        return 0
    return sum(1 for _ in itertools.takewhile(bool, values))


class Rng:
    """A 15-bit linear congruential generator."""

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK32

    def seed(self, value: int | None = None) -> None:
        """Reseed; without a value the current tick count is used."""
        if value is None:
            value = time.monotonic_ns() // 1_000_000
        self._state = value & _MASK32

    def rand(self) -> int:
        """Return the next number in 0..32767."""
        self._state = (self._state * 214013 + 2531011) & _MASK32
        return (self._state >> 16) & 0x7FFF

    def choice(self, values: Sequence[int] | None) -> int:
        """Pick one of the values before the first zero, or 0 if there are none."""
        count = count_until_zero(values)
        if not count:
            return 0
        return values[self.rand() % count]

    def d100(self) -> int:
        """Roll a percentile die: 0..99."""
        return self.rand() % 100