import pytest

from algodrills.dp_sequences import (
    count_subsequences_product_at_most,
    longest_difference_one_subsequence,
    longest_increasing_subsequence,
    max_nested_envelopes,
    max_profit_single,
    max_profit_unlimited,
    max_subarray_sum,
    max_sum_increasing_subsequence,
)


def test_max_subarray_all_positive_is_total():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_all_negative_is_largest():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_is_a_slice_sum_and_bounds_all_slices():
    values = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    result = max_subarray_sum(values)
    n = len(values)
    slices = [sum(values[i:j]) for i in range(n) for j in range(i + 1, n + 1)]
    assert result in slices
    assert all(result >= s for s in slices)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_profit_single_decreasing_prices_gives_nothing():
    assert max_profit_single([9, 7, 5, 3, 1]) == 0


def test_profit_single_increasing_is_spread():
    prices = [2, 4, 7, 11]
    assert max_profit_single(prices) == prices[-1] - prices[0]


def test_profit_single_bounded_by_spread():
    prices = [7, 1, 5, 3, 6, 4]
    result = max_profit_single(prices)
    assert 0 <= result <= max(prices) - min(prices)


def test_profit_single_empty_raises():
    with pytest.raises(ValueError):
        max_profit_single([])


def test_profit_unlimited_sums_separate_runs():
    first = [1, 3, 8]
    second = [2, 6, 9]
    expected = (first[-1] - first[0]) + (second[-1] - second[0])
    assert max_profit_unlimited(first + second) == expected


@pytest.mark.parametrize(
    "prices", [[7, 1, 5, 3, 6, 4], [1, 2, 3, 4, 5], [5, 4, 3], [3, 3, 5, 0, 0, 3, 1, 4]]
)
def test_profit_unlimited_at_least_single(prices):
    assert max_profit_unlimited(prices) >= max_profit_single(prices)


def test_profit_unlimited_empty_raises():
    with pytest.raises(ValueError):
        max_profit_unlimited([])


def test_lis_known_example():
    assert longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4


def test_lis_sorted_distinct_is_full_length():
    values = [1, 4, 6, 9, 12]
    assert longest_increasing_subsequence(values) == len(values)


def test_lis_duplicates_are_not_increasing():
    base = [2, 5, 8, 13]
    doubled = [v for v in base for _ in range(2)]
    assert longest_increasing_subsequence(doubled) == len(base)


@pytest.mark.parametrize("values", [list(range(6)), list(range(6))[::-1]])
def test_difference_one_consecutive_runs(values):
    assert longest_difference_one_subsequence(values) == len(values)


def test_difference_one_ignores_unrelated_values():
    values = [1, 2, 3, 2, 3, 7, 2, 1]
    base = longest_difference_one_subsequence(values)
    assert longest_difference_one_subsequence(values + [100, 200]) == base
    assert base <= len(values)


def test_max_sum_increasing_full_run():
    values = [1, 3, 6, 10]
    assert max_sum_increasing_subsequence(values) == sum(values)


def test_max_sum_increasing_decreasing_picks_largest():
    values = [9, 7, 4, 2]
    assert max_sum_increasing_subsequence(values) == max(values)


def test_max_sum_increasing_all_negative_matches_empty():
    assert max_sum_increasing_subsequence([-4, -2, -9]) == max_sum_increasing_subsequence([])


def test_envelopes_strictly_growing_all_nest():
    heights = [1, 2, 3, 4]
    widths = [2, 3, 5, 8]
    assert max_nested_envelopes(heights, widths) == len(heights)


def test_envelopes_equal_heights_cannot_nest():
    assert max_nested_envelopes([5, 5, 5, 5], [1, 2, 3, 4]) == 1


def test_envelopes_order_does_not_matter():
    heights = [5, 6, 6, 2]
    widths = [4, 4, 7, 3]
    forward = max_nested_envelopes(heights, widths)
    assert max_nested_envelopes(heights[::-1], widths[::-1]) == forward


def test_envelopes_length_mismatch_raises():
    with pytest.raises(ValueError):
        max_nested_envelopes([1, 2], [1])


def test_count_product_large_k_counts_every_subsequence():
    values = [2, 3, 4, 5]
    assert count_subsequences_product_at_most(values, 10**9) == 2 ** len(values) - 1


def test_count_product_monotone_in_k():
    values = [1, 2, 3, 4]
    counts = [count_subsequences_product_at_most(values, k) for k in range(0, 30)]
    assert counts == sorted(counts)
    assert counts[-1] <= 2 ** len(values) - 1