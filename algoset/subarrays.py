"""Counting contiguous subarrays with sum, parity and distinctness constraints."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7


def count_subarrays_with_sum(nums: Iterable[int], goal: int) -> int:
    """Return the number of non-empty subarrays whose elements sum to ``goal``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - goal]
        seen[total] += 1
    return count


def _at_most_distinct(nums: Sequence[int], k: int) -> int:
    if k < 0:
        return 0
    counts: defaultdict[int, int] = defaultdict(int)
    left = 0
    result = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            dropped = nums[left]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            left += 1
        result += right - left + 1
    return result


def count_subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Return the number of subarrays holding exactly ``k`` distinct values."""
    values = list(nums)
    return _at_most_distinct(values, k) - _at_most_distinct(values, k - 1)


def count_odd_sum_subarrays(arr: Iterable[int]) -> int:
    """Return the number of subarrays with an odd sum, modulo ``10**9 + 7``."""
    even_prefixes, odd_prefixes = 1, 0
    total = 0
    count = 0
    for value in arr:
        total += value
        if total % 2 == 0:
            count = (count + odd_prefixes) % MOD
            even_prefixes += 1
        else:
            count = (count + even_prefixes) % MOD
            odd_prefixes += 1
    return count