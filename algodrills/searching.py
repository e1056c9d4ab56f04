"""Problems solved by binary search or by placing values at their own index."""

from __future__ import annotations

from typing import Iterable, Sequence


def _wood_collected(heights: Sequence[int], cut: int) -> int:
    return sum(height - cut for height in heights if height >= cut)


def max_cut_height(heights: Iterable[int], required: int) -> int:
    """Return the highest saw height that still yields at least `required` wood, or -1."""
    items = list(heights)
    low, high = 0, max(items, default=-1)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if _wood_collected(items, mid) >= required:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def find_repeating_and_missing(values: Iterable[int]) -> tuple[int, int]:
    """Given 1..n with one value repeated and one missing, return (repeated, missing)."""
    items = list(values)
    n = len(items)
    if any(not 1 <= value <= n for value in items):
        raise ValueError(f"values must lie between 1 and {n}")
    for i in range(n):
        while items[items[i] - 1] != items[i]:
            j = items[i] - 1
            items[i], items[j] = items[j], items[i]
    for index, value in enumerate(items, 1):
        if value != index:
            return value, index
    raise ValueError("values are a permutation: nothing is repeated or missing")


def _halve_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the median of two sorted sequences; an even count averages, truncating."""
    if len(first) > len(second):
        first, second = second, first
    n1, n2 = len(first), len(second)
    if n1 + n2 == 0:
        raise ValueError("both sequences are empty")
    half = (n1 + n2) // 2
    low, high = max(0, half - n2), min(half, n1)
    neg_inf, pos_inf = float("-inf"), float("inf")
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        l1 = first[cut1 - 1] if cut1 else neg_inf
        l2 = second[cut2 - 1] if cut2 else neg_inf
        r1 = first[cut1] if cut1 < n1 else pos_inf
        r2 = second[cut2] if cut2 < n2 else pos_inf
        if l1 <= r2 and l2 <= r1:
            if (n1 + n2) % 2:
                return int(min(r1, r2))
            return _halve_toward_zero(int(max(l1, l2)) + int(min(r1, r2)))
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("sequences must be sorted")