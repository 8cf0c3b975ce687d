import pytest

from algoset.subarrays import (
    MOD,
    count_odd_sum_subarrays,
    count_subarrays_with_k_distinct,
    count_subarrays_with_sum,
)


def test_subarrays_with_sum_worked_example():
    assert count_subarrays_with_sum([1, 0, 1, 0, 1], 2) == 4


def test_subarrays_with_sum_all_zeros():
    assert count_subarrays_with_sum([0, 0, 0, 0, 0], 0) == 15


@pytest.mark.parametrize("nums", [[1, 0, 1, 0, 1], [0, 0, 1], [1, 1, 1, 0], [1]])
def test_subarrays_with_sum_partition_all_subarrays(nums):
    n = len(nums)
    total = sum(count_subarrays_with_sum(nums, goal) for goal in range(sum(nums) + 1))
    assert total == n * (n + 1) // 2


def test_subarrays_with_sum_goal_too_large():
    nums = [1, 0, 1]
    assert count_subarrays_with_sum(nums, sum(nums) + 1) == 0


def test_k_distinct_worked_example():
    assert count_subarrays_with_k_distinct([1, 2, 1, 2, 3], 2) == 7


@pytest.mark.parametrize("nums", [[1, 2, 1, 2, 3], [1, 2, 1, 3, 4], [5, 5, 5], [1, 2, 3, 4]])
def test_k_distinct_partition_all_subarrays(nums):
    n = len(nums)
    total = sum(count_subarrays_with_k_distinct(nums, k) for k in range(1, n + 1))
    assert total == n * (n + 1) // 2


def test_k_distinct_all_distinct_whole_array():
    nums = [4, 7, 1, 9]
    assert count_subarrays_with_k_distinct(nums, len(nums)) == 1


def test_k_distinct_more_than_available():
    nums = [1, 1, 2]
    assert count_subarrays_with_k_distinct(nums, len(set(nums)) + 1) == 0


def test_odd_sum_worked_example():
    assert count_odd_sum_subarrays([1, 3, 5]) == 4


def test_odd_sum_all_even():
    assert count_odd_sum_subarrays([2, 4, 6, 8]) == 0


@pytest.mark.parametrize("arr", [[1, 2, 3, 4, 5, 6, 7], [2, 4, 6], [7], [1, 1, 2, 3]])
def test_odd_sum_symmetric_and_bounded(arr):
    n = len(arr)
    result = count_odd_sum_subarrays(arr)
    assert result == count_odd_sum_subarrays(list(reversed(arr)))
    assert 0 <= result <= n * (n + 1) // 2


def test_odd_sum_single_odd_element():
    assert count_odd_sum_subarrays([7]) == len([7])


def test_odd_sum_is_reduced_modulo():
    result = count_odd_sum_subarrays([1] * 200_000)
    assert 0 <= result < MOD