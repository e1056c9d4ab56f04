from itertools import product

import pytest

from algodrills.dp_counting import (
    MOD,
    count_dice_ways,
    count_dice_ways_recursive,
    fence_painting_ways,
    fibonacci,
)


def test_fibonacci_base_values():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


@pytest.mark.parametrize("n", range(3, 60))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_large_exact():
    assert fibonacci(200) == fibonacci(199) + fibonacci(198)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("dice,faces,target", list(product(range(0, 4), range(1, 5), range(0, 13))))
def test_dice_dp_matches_recursive(dice, faces, target):
    assert count_dice_ways(dice, faces, target) == count_dice_ways_recursive(dice, faces, target)


@pytest.mark.parametrize("dice,faces", [(1, 6), (2, 6), (3, 4), (4, 3)])
def test_dice_total_outcomes(dice, faces):
    total = sum(count_dice_ways(dice, faces, t) for t in range(dice * faces + 1))
    assert total == faces**dice


def test_dice_zero_dice():
    assert count_dice_ways(0, 6, 0) == 1
    assert count_dice_ways(0, 6, 3) == 0
    assert count_dice_ways(2, 6, 0) == 0


def test_dice_result_is_reduced():
    assert 0 <= count_dice_ways(30, 20, 300) < MOD


def test_dice_negative():
    with pytest.raises(ValueError):
        count_dice_ways(-1, 6, 3)
    with pytest.raises(ValueError):
        count_dice_ways_recursive(-1, 6, 3)


def _brute_fence(n, k):
    count = 0
    for colours in product(range(k), repeat=n):
        if all(not (colours[i] == colours[i + 1] == colours[i + 2]) for i in range(n - 2)):
            count += 1
    return count


@pytest.mark.parametrize("n,k", list(product(range(1, 6), range(1, 4))))
def test_fence_matches_enumeration(n, k):
    assert fence_painting_ways(n, k) == _brute_fence(n, k)


def test_fence_single_post_returns_k():
    assert fence_painting_ways(1, 7) == 7


def test_fence_two_posts_any_pair():
    assert fence_painting_ways(2, 5) == 5 * 5


def test_fence_large_is_reduced():
    assert 0 <= fence_painting_ways(1000, 10**9) < MOD


def test_fence_invalid_n():
    with pytest.raises(ValueError):
        fence_painting_ways(0, 3)