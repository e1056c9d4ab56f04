"""Assorted array problems: products, profits, windows, merges, jumps and patterns."""

from __future__ import annotations

from itertools import accumulate, cycle, islice
from typing import Iterable


def _non_empty(values: Iterable[int], name: str = "values") -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{name} must not be empty")
    return items


def max_product_subarray(values: Iterable[int]) -> int:
    """Return the largest product of a non-empty contiguous run of values."""
    items = _non_empty(values)
    best = high = low = items[0]
    for value in items[1:]:
        candidates = (value, high * value, low * value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def max_profit_two_transactions(prices: Iterable[int]) -> int:
    """Return the best profit from at most two non-overlapping buy/sell transactions."""
    items = _non_empty(prices, "prices")

    # best profit of one transaction that sells on or before each day
    sell_by: list[int] = []
    lowest = items[0]
    best = 0
    for price in items:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
        sell_by.append(best)

    # best profit of one transaction that buys on or after each day
    buy_from: list[int] = []
    highest = items[-1]
    best = 0
    for price in reversed(items):
        highest = max(highest, price)
        best = max(best, highest - price)
        buy_from.append(best)
    buy_from.reverse()

    return max(0, max(s + b for s, b in zip(sell_by, buy_from)))


def max_two_window_sum(values: Iterable[int], k: int) -> int:
    """Return the largest total of two non-overlapping runs of exactly k values."""
    items = list(values)
    if k < 1 or 2 * k > len(items):
        raise ValueError("k must be at least 1 and two windows must fit in the values")
    prefix = [0, *accumulate(items)]
    sums = [prefix[start + k] - prefix[start] for start in range(len(items) - k + 1)]
    best_left = list(accumulate(sums, max))
    best_right = list(accumulate(reversed(sums), max))[::-1]
    return max(
        best_left[split] + best_right[split + k]
        for split in range(len(items) - 2 * k + 1)
    )


def min_merges_to_palindrome(values: Iterable[int]) -> int:
    """Return the fewest merges of adjacent values needed to make the sequence a palindrome."""
    items = list(values)
    merges = 0
    i, j = 0, len(items) - 1
    while i < j:
        if items[i] == items[j]:
            i += 1
            j -= 1
        elif items[i] > items[j]:
            j -= 1
            items[j] += items[j + 1]
            merges += 1
        else:
            i += 1
            items[i] += items[i - 1]
            merges += 1
    return merges


def min_jumps(values: Iterable[int]) -> int | None:
    """Return the fewest jumps from the first to the last index, or None if unreachable.

    Each value is the longest jump allowed from its position.
    """
    items = list(values)
    last = len(items) - 1
    if last <= 0:
        return 0
    if items[0] == 0:
        return None
    max_reach = items[0]
    steps = items[0]
    jumps = 1
    for i in range(1, len(items)):
        if i == last:
            return jumps
        max_reach = max(max_reach, i + items[i])
        steps -= 1
        if steps == 0:
            jumps += 1
            if i >= max_reach:
                return None
            steps = max_reach - i
    return None


def number_pattern(n: int) -> list[list[int]]:
    """Return n rows where row i holds 2**i digits cycling through 1..9."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = cycle(range(1, 10))
    return [list(islice(digits, 2**row)) for row in range(n)]