"""Dynamic-programming optimisation problems: knapsack, chains, partitions, scheduling."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Job:
    """A job occupying [start, finish) that earns weight."""

    start: int
    finish: int
    weight: int


def knapsack_max_profit(capacity: int, times: Sequence[int], profits: Sequence[int]) -> int:
    """Return the best total profit of items whose times fit within capacity."""
    if len(times) != len(profits):
        raise ValueError("times and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(t < 0 for t in times):
        raise ValueError("times must be non-negative")
    best = [0] * (capacity + 1)
    for time, profit in zip(times, profits):
        for room in range(capacity, time - 1, -1):
            best[room] = max(best[room], best[room - time] + profit)
    return best[capacity]


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications for the chain whose sizes are dims."""
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")
    count = len(dims) - 1

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i >= j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i] * dims[k + 1] * dims[j + 1]
            for k in range(i, j)
        )

    return cost(0, count - 1)


def subset_sum_exists(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the non-negative values sums to target."""
    items = list(values)
    if target < 0 or any(v < 0 for v in items):
        raise ValueError("values and target must be non-negative")
    reachable = [True] + [False] * target
    for value in items:
        for total in range(target, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable[target]


def can_partition_equal(values: Iterable[int]) -> bool:
    """Tell whether values split into two groups of equal sum."""
    items = list(values)
    total = sum(items)
    if total % 2:
        return False
    reachable = {0}
    for value in items:
        reachable |= {r + value for r in reachable}
    return total // 2 in reachable


def can_partition_k(values: Iterable[int], k: int) -> bool:
    """Tell whether values split into k groups of equal, non-zero sum."""
    if k <= 0:
        raise ValueError("k must be positive")
    items = sorted(values, reverse=True)
    total = sum(items)
    if total % k:
        return False
    target = total // k
    if target == 0:
        return False
    non_negative = not items or items[-1] >= 0
    buckets = [0] * k

    def place(index: int) -> bool:
        if index == len(items):
            return all(b == target for b in buckets)
        value = items[index]
        tried: set[int] = set()
        for slot, current in enumerate(buckets):
            if current in tried:
                continue
            tried.add(current)
            if non_negative and current + value > target:
                continue
            buckets[slot] += value
            if place(index + 1):
                return True
            buckets[slot] -= value
        return False

    return place(0)


def max_weighted_jobs(jobs: Iterable[Job]) -> int:
    """Return the largest total weight of jobs that do not overlap."""
    ordered = sorted(jobs, key=lambda job: job.finish)
    for job in ordered:
        if job.finish <= job.start:
            raise ValueError(f"job must finish after it starts: {job}")
    finishes = [job.finish for job in ordered]
    best = [0]
    for i, job in enumerate(ordered):
        earlier = bisect_right(finishes, job.start, 0, i)
        included = job.weight + best[earlier]
        best.append(included if i == 0 else max(included, best[-1]))
    return best[-1]