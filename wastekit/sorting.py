"""In-place quicksort and binary search driven by a three-way compare function."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_CUTOFF = 8

Compare = Callable[[Any, Any], int]


def _shortsort(items: MutableSequence[T], lo: int, hi: int, compare: Compare) -> None:
    while hi > lo:
        top = lo
        for p in range(lo + 1, hi + 1):
            if compare(items[p], items[top]) > 0:
                top = p
        items[top], items[hi] = items[hi], items[top]
        hi -= 1


def xsort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place; ``compare(a, b)`` returns <0, 0 or >0."""
    if len(items) < 2:
        return
    pending: list[tuple[int, int]] = []
    lo, hi = 0, len(items) - 1

    def swap(i: int, j: int) -> None:
        if i != j:
            items[i], items[j] = items[j], items[i]

    while True:
        size = hi - lo + 1
        if size <= _CUTOFF:
            _shortsort(items, lo, hi, compare)
        else:
            mid = lo + size // 2
            if compare(items[lo], items[mid]) > 0:
                swap(lo, mid)
            if compare(items[lo], items[hi]) > 0:
                swap(lo, hi)
            if compare(items[mid], items[hi]) > 0:
                swap(mid, hi)

            loguy, higuy = lo, hi
            while True:
                if mid > loguy:
                    loguy += 1
                    while loguy < mid and compare(items[loguy], items[mid]) <= 0:
                        loguy += 1
                if mid <= loguy:
                    loguy += 1
                    while loguy <= hi and compare(items[loguy], items[mid]) <= 0:
                        loguy += 1
                higuy -= 1
                while higuy > mid and compare(items[higuy], items[mid]) > 0:
                    higuy -= 1
                if higuy < loguy:
                    break
                swap(loguy, higuy)
                if mid == higuy:
                    mid = loguy

            higuy += 1
            if mid < higuy:
                higuy -= 1
                while higuy > mid and compare(items[higuy], items[mid]) == 0:
                    higuy -= 1
            if mid >= higuy:
                higuy -= 1
                while higuy > lo and compare(items[higuy], items[mid]) == 0:
                    higuy -= 1

            if higuy - lo >= hi - loguy:
                if lo < higuy:
                    pending.append((lo, higuy))
                if loguy < hi:
                    lo = loguy
                    continue
            else:
                if loguy < hi:
                    pending.append((loguy, hi))
                if lo < higuy:
                    hi = higuy
                    continue

        if not pending:
            return
        lo, hi = pending.pop()


def xfind(key: Any, items: Sequence[T], compare: Compare) -> T | None:
    """Binary search a sorted sequence; ``compare(key, item)`` orders the key."""
    base = 0
    lim = len(items)
    while lim:
        probe = base + (lim >> 1)
        cmp = compare(key, items[probe])
        if cmp == 0:
            return items[probe]
        if cmp > 0:
            base = probe + 1
            lim -= 1
        lim >>= 1
    return None