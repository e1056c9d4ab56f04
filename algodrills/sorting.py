"""Sorting routines and in-place array rearrangements."""

from __future__ import annotations

from bisect import insort_left
from itertools import pairwise
from typing import Iterable


def move_negatives_first(values: Iterable[int]) -> list[int]:
    """Return values with every non-positive value moved before the positives, order kept."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        if current > 0:
            continue
        j = i - 1
        while j >= 0 and items[j] > 0:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[int], right: list[int]) -> tuple[list[int], int]:
    """Merge two sorted lists, counting pairs where a left value exceeds a right one."""
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return list(items), 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged, split_count = _merge(left, right)
    return merged, left_count + right_count + split_count


def count_inversions(values: Iterable[int]) -> int:
    """Return the number of pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values))[1]


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of values using merge sort."""
    return _sort_and_count(list(values))[0]


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for i in range(low, high):
        if items[i] <= pivot:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[high], items[store] = items[store], items[high]
    return store


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of values using quick sort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def merge_sorted_in_place(first: list[int], second: list[int]) -> None:
    """Rearrange two sorted lists so first holds the smallest values, both staying sorted."""
    for name, items in (("first", first), ("second", second)):
        if any(a > b for a, b in pairwise(items)):
            raise ValueError(f"{name} must be sorted")
    for i, value in enumerate(first):
        if second and second[0] < value:
            first[i] = second.pop(0)
            insort_left(second, value)