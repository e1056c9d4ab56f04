"""Counting problems solved by recurrences."""

from __future__ import annotations

from functools import lru_cache

MOD = 1_000_000_007

Matrix = tuple[tuple[int, int], tuple[int, int]]

_STEP: Matrix = ((1, 1), (1, 0))


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    return (
        (a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]),
        (a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]),
    )


def _power(exponent: int) -> Matrix:
    """Return the step matrix raised to exponent (exponent >= 1)."""
    if exponent == 1:
        return _STEP
    half = _power(exponent // 2)
    result = _multiply(half, half)
    if exponent % 2 == 1:
        result = _multiply(result, _STEP)
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by matrix power; fibonacci(0) is 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    if n == 1:
        return 1
    return _power(n - 1)[0][0]


def count_dice_ways(dice: int, faces: int, target: int) -> int:
    """Count ordered throws of `dice` dice with `faces` faces summing to target, mod 1e9+7."""
    if dice < 0 or target < 0:
        raise ValueError("dice and target must be non-negative")
    # ways[t] holds the count for the current number of dice summing to t
    ways = [1] + [0] * target
    for _ in range(dice):
        ways = [0] + [
            sum(ways[total - face] for face in range(1, faces + 1) if total >= face) % MOD
            for total in range(1, target + 1)
        ]
    return ways[target]


def count_dice_ways_recursive(dice: int, faces: int, target: int) -> int:
    """Count ordered throws summing to target by direct recursion (no modulus)."""
    if dice < 0:
        raise ValueError("dice must be non-negative")

    @lru_cache(maxsize=None)
    def ways(left: int, remaining: int) -> int:
        if left == 0 and remaining == 0:
            return 1
        if left <= 0 or remaining <= 0:
            return 0
        return sum(ways(left - 1, remaining - face) for face in range(1, faces + 1))

    return ways(dice, target)


def fence_painting_ways(n: int, k: int) -> int:
    """Count paintings of n posts with k colours, no three adjacent alike, mod 1e9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return k
    same = k % MOD
    different = (k % MOD) * ((k - 1) % MOD) % MOD
    total = (same + different) % MOD
    for _ in range(3, n + 1):
        same, different = different, total * ((k - 1) % MOD) % MOD
        total = (same + different) % MOD
    return total