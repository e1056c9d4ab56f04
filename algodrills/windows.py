"""Sliding-window problems over sequences."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def sliding_window_maximums(values: Iterable[int], k: int) -> list[int]:
    """Return the maximum of every window of k consecutive values."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k must be between 1 and the number of values")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(items):
        while window and window[0] <= i - k:
            window.popleft()
        while window and value >= items[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def smallest_subarray_exceeding(values: Iterable[int], limit: int) -> int | None:
    """Return the shortest length of a run of non-negative values summing above limit, or None."""
    items = list(values)
    best: int | None = None
    start = 0
    total = 0
    for end, value in enumerate(items, 1):
        total += value
        while start < end and total > limit:
            length = end - start
            if best is None or length < best:
                best = length
            total -= items[start]
            start += 1
    return best