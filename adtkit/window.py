"""Sums over a sliding window of fixed width."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from adtkit.fifo import BoundedQueue


def sliding_sums(values: Sequence[int], k: int) -> list[int]:
    """Return the sum of every run of k consecutive values, or [] if k is out of range."""
    if k <= 0 or k > len(values):
        return []
    window = BoundedQueue()
    current = 0
    for value in values[:k]:
        window.enqueue(value)
        current += value
    sums = [current]
    for value in values[k:]:
        current += value - window.dequeue()
        window.enqueue(value)
        sums.append(current)
    return sums


def main(argv: list[str] | None = None) -> int:
    """Read n, k and n integers from stdin; print the window sums."""
    words = sys.stdin.read().split()
    try:
        count, width = int(words[0]), int(words[1])
        values = [int(word) for word in words[2 : 2 + max(count, 0)]]
    except (IndexError, ValueError):
        return 0
    sums = sliding_sums(values, width)
    if sums:
        print(" ".join(map(str, sums)))
    return 0