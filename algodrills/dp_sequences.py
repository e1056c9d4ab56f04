"""Dynamic-programming problems over number sequences."""

from __future__ import annotations

from bisect import bisect_left
from itertools import pairwise
from typing import Iterable


def _non_empty(values: Iterable[int], name: str = "values") -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{name} must not be empty")
    return items


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values."""
    items = _non_empty(values)
    best = current = items[0]
    for value in items[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_profit_single(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sell (never negative)."""
    items = _non_empty(prices, "prices")
    lowest = items[0]
    best = 0
    for price in items[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Iterable[int]) -> int:
    """Return the best profit when any number of buy/sell transactions is allowed."""
    items = _non_empty(prices, "prices")
    return sum(max(0, later - earlier) for earlier, later in pairwise(items))


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def longest_difference_one_subsequence(values: Iterable[int]) -> int:
    """Return the longest subsequence whose neighbours differ by exactly one."""
    items = list(values)
    lengths: list[int] = []
    for i, value in enumerate(items):
        linked = [lengths[j] for j in range(i) if abs(value - items[j]) == 1]
        lengths.append(1 + max(linked, default=0))
    return max(lengths, default=0)


def max_sum_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence, or 0 if all are negative."""
    items = list(values)
    sums: list[int] = []
    for i, value in enumerate(items):
        previous = [sums[j] for j in range(i) if value > items[j]]
        sums.append(max([value, *(s + value for s in previous)]))
    return max(0, max(sums, default=0))


def max_nested_envelopes(heights: Iterable[int], widths: Iterable[int]) -> int:
    """Return how many envelopes can be nested, each strictly larger in both sides."""
    hs = list(heights)
    ws = list(widths)
    if len(hs) != len(ws):
        raise ValueError("heights and widths must have the same length")
    ordered = sorted(zip(hs, ws), key=lambda hw: (hw[0], -hw[1]))
    return longest_increasing_subsequence(width for _, width in ordered)


def count_subsequences_product_at_most(values: Iterable[int], k: int) -> int:
    """Count non-empty subsequences whose product does not exceed k."""
    products: list[int] = []
    for value in values:
        extended = [value, *(product * value for product in products)]
        products.extend(extended)
    return sum(1 for product in products if product <= k)