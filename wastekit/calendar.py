"""Game time kept in minutes ("rounds") and conversions to calendar dates."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MINUTES_PER_DAY = 1440


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def round_from_date(year: int, month: int, day: int) -> int:
    """Minutes from the game epoch to the start of the given date."""
    m = _cdiv(month - 14, 12)
    days = (
        _cdiv(1461 * (year - 1600 + m), 4)
        + _cdiv(367 * (month - 2 - 12 * m), 12)
        - _cdiv(3 * _cdiv(year - 1600 + 100 + m, 100), 4)
        + day
        - 32075
    )
    return (days * _MINUTES_PER_DAY) & _MASK32


def _decompose(rounds: int) -> tuple[int, int, int]:
    rounds &= _MASK32
    ell = rounds // _MINUTES_PER_DAY + 68569
    n = (4 * ell) // 146097
    ell = (ell - (146097 * n + 3) // 4) & _MASK32
    i = (4000 * (ell + 1)) // 1461001
    ell = (ell - (1461 * i) // 4 + 31) & _MASK32
    j = (80 * ell) // 2447
    day = (ell - (2447 * j) // 80) & _MASK32
    ell = j // 11
    month = (j + 2 - 12 * ell) & _MASK32
    year = (100 * (n - 49) + i + ell + 6400) & _MASK32
    return _signed(year), _signed(month), _signed(day)


def _signed(value: int) -> int:
    return value - (1 << 32) if value & 0x80000000 else value


def year_of(rounds: int) -> int:
    return _decompose(rounds)[0]


def month_of(rounds: int) -> int:
    return _decompose(rounds)[1]


def day_of(rounds: int) -> int:
    return _decompose(rounds)[2]


def hour_of(rounds: int) -> int:
    return ((rounds & _MASK32) // 60) % 24


@dataclass
class World:
    """The current game time."""

    rounds: int = 0

    def reset(self) -> None:
        """Set the clock to the start of a new game."""
        self.rounds = round_from_date(2200, 1, 15)

    def year(self) -> int:
        return year_of(self.rounds)

    def month(self) -> int:
        return month_of(self.rounds)

    def day(self) -> int:
        return day_of(self.rounds)