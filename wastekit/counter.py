"""Millisecond interval counter."""

from __future__ import annotations

import time
from collections.abc import Callable

_MASK32 = 0xFFFFFFFF


def _ticks() -> int:
    return (time.monotonic_ns() // 1_000_000) & _MASK32


class Counter:
    """Reports when more than a given number of milliseconds has elapsed."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _ticks
        self.frame = 0
        self.tick = self._clock()

    def passed(self, milliseconds: int) -> bool:
        """True, and restart the interval, once more than ``milliseconds`` went by."""
        now = self._clock()
        if ((now - self.tick) & _MASK32) > milliseconds:
            self.tick = now
            return True
        return False