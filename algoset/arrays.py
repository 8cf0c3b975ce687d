"""Greedy, two-pointer and counting algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or ``[]``.

    The index of the smaller value comes first.
    """
    ranked = sorted((value, index) for index, value in enumerate(nums))
    lo, hi = 0, len(ranked) - 1
    while lo < hi:
        total = ranked[lo][0] + ranked[hi][0]
        if total == target:
            return [ranked[lo][1], ranked[hi][1]]
        if total > target:
            hi -= 1
        else:
            lo += 1
    return []


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last position.

    Raises ValueError if ``nums`` is empty or the end cannot be reached.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    last = len(nums) - 1
    jumps = 0
    left = right = 0
    while right < last:
        farthest = max(
            0,
            max(index + step for index, step in enumerate(nums[left : right + 1], start=left)),
        )
        if farthest <= right:
            raise ValueError("the last position cannot be reached")
        left, right = right + 1, farthest
        jumps += 1
    return jumps


def can_jump(nums: Iterable[int]) -> bool:
    """Return whether the last position is reachable from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def distribute_candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that higher-rated neighbours get more."""
    n = len(ratings)
    counts = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            counts[i] = max(counts[i], counts[i - 1] + 1)
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def content_children(greed: Iterable[int], sizes: Iterable[int]) -> int:
    """Return how many children can get a cookie at least as big as their greed."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if size >= children[content]:
            content += 1
    return content


def lemonade_change(bills: Iterable[int]) -> bool:
    """Return whether every customer paying 5, 10 or 20 can get change for a 5 sale."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives > 2:
            fives -= 3
        else:
            return False
    return True


def longest_fib_subsequence(arr: Sequence[int]) -> int:
    """Return the length of the longest Fibonacci-like subsequence, or 0 if none."""
    position = {value: index for index, value in enumerate(arr)}
    lengths: dict[tuple[int, int], int] = {}
    best = 0
    n = len(arr)
    for j in range(1, n):
        for k in range(j + 1, n):
            i = position.get(arr[k] - arr[j])
            if i is not None and i < j:
                lengths[j, k] = lengths.get((i, j), 2) + 1
            best = max(best, lengths.get((j, k), 2))
    return best if best >= 3 else 0


def tuple_same_product(nums: Iterable[int]) -> int:
    """Return the number of tuples (a, b, c, d) with a*b == c*d over distinct elements."""
    products = Counter(a * b for a, b in combinations(nums, 2))
    return 8 * sum(count * (count - 1) // 2 for count in products.values())


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Return the largest absolute sum of any non-empty subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    current_high = best_high = nums[0]
    current_low = best_low = nums[0]
    for value in nums[1:]:
        current_high = max(value, current_high + value)
        best_high = max(best_high, current_high)
        current_low = min(value, current_low + value)
        best_low = min(best_low, current_low)
    return max(best_high, abs(best_low))


def pivot_array(nums: Iterable[int], pivot: int) -> list[int]:
    """Stably reorder: values below ``pivot``, then equal, then above."""
    values = list(nums)
    return (
        [value for value in values if value < pivot]
        + [value for value in values if value == pivot]
        + [value for value in values if value > pivot]
    )


def count_bad_pairs(nums: Iterable[int]) -> int:
    """Return the number of pairs i < j with j - i != nums[j] - nums[i]."""
    keys = Counter(value - index for index, value in enumerate(nums))
    n = sum(keys.values())
    good = sum(count * (count - 1) // 2 for count in keys.values())
    return n * (n - 1) // 2 - good


def apply_operations(nums: Iterable[int]) -> list[int]:
    """Double equal neighbours left to right, then move zeros to the end."""
    result = list(nums)
    for i in range(len(result) - 1):
        if result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
    nonzero = [value for value in result if value != 0]
    return nonzero + [0] * (len(result) - len(nonzero))


def merge_id_values(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Merge two id-sorted lists of ``[id, value]`` pairs, summing values of equal ids."""
    result: list[list[int]] = []
    i = j = 0
    while i < len(first) and j < len(second):
        left_id, left_value = first[i]
        right_id, right_value = second[j]
        if left_id < right_id:
            result.append([left_id, left_value])
            i += 1
        elif left_id > right_id:
            result.append([right_id, right_value])
            j += 1
        else:
            result.append([left_id, left_value + right_value])
            i += 1
            j += 1
    result.extend([pair[0], pair[1]] for pair in first[i:])
    result.extend([pair[0], pair[1]] for pair in second[j:])
    return result


def colored_cells(n: int) -> int:
    """Return the number of coloured cells after ``n`` minutes of diamond growth."""
    return 1 + 2 * n * (n - 1)


def divide_array(nums: Iterable[int], k: int) -> list[list[int]]:
    """Split into triples whose spread is at most ``k``; ``[]`` if impossible."""
    ordered = sorted(nums)
    if len(ordered) % 3:
        raise ValueError("the number of elements must be a multiple of 3")
    groups = [ordered[start : start + 3] for start in range(0, len(ordered), 3)]
    if any(group[2] - group[0] > k for group in groups):
        return []
    return groups