"""Routines over integer sequences: subarrays, subsequences and searches."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from heapq import merge
from itertools import groupby, pairwise


def _require_items(nums: Sequence, what: str = "nums") -> None:
    if not nums:
        raise ValueError(f"{what} must not be empty")


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous non-empty subarray."""
    _require_items(nums)
    best = nums[0]
    left = right = 0
    for a, b in zip(nums, reversed(nums)):
        left = (left or 1) * a
        right = (right or 1) * b
        best = max(best, left, right)
    return best


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated sorted sequence that may hold duplicates."""
    _require_items(nums)
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        elif nums[mid] < nums[low]:
            high = mid
            low += 1
        else:
            high -= 1
    return nums[low]


def longest_ones_after_deletion(nums: Sequence[int]) -> int:
    """Return the longest run of ones left after deleting exactly one element."""
    zeros = 0
    start = 0
    longest = 0
    for i, value in enumerate(nums):
        zeros += value == 0
        while zeros > 1:
            zeros -= nums[start] == 0
            start += 1
        longest = max(longest, i - start)
    return longest


def max_alternating_sum(nums: Sequence[int]) -> int:
    """Return the largest alternating sum of a subsequence."""
    _require_items(nums)
    first = nums[0]
    even, odd = max(-first, 0), max(first, 0)
    for value in nums[1:]:
        even, odd = max(odd - value, even), max(even + value, odd)
    return max(even, odd)


def _rob_line(houses: Sequence[int]) -> int:
    before, best = 0, houses[0]
    for value in houses[1:]:
        before, best = best, max(before + value, best)
    return best


def rob_circular(nums: Sequence[int]) -> int:
    """Return the most loot from houses in a circle without robbing two neighbours."""
    _require_items(nums)
    if len(nums) == 1:
        return nums[0]
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    return any(a == b for a, b in pairwise(sorted(nums)))


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence (at least 1)."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        lengths.append(
            max(
                (length + 1 for length, earlier in zip(lengths, nums[:i]) if earlier < value),
                default=1,
            )
        )
    return max(lengths, default=1)


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first < len(nums) and nums[first] == target:
        return first, bisect_right(nums, target) - 1
    return -1, -1


def find_longest_chain(pairs: Sequence[Sequence[int]]) -> int:
    """Return the longest chain of pairs where each ends before the next starts (at least 1)."""
    ordered = sorted(tuple(pair) for pair in pairs)
    lengths: list[int] = []
    for i, (start, _) in enumerate(ordered):
        lengths.append(
            max(
                (length + 1 for length, earlier in zip(lengths, ordered[:i]) if earlier[1] < start),
                default=1,
            )
        )
    return max(lengths, default=1)


def max_valid_parity_length(nums: Sequence[int]) -> int:
    """Return the longest subsequence whose adjacent pair sums all share one parity."""
    best = 0
    for pattern in ((0, 0), (0, 1), (1, 0), (1, 1)):
        count = 0
        for value in nums:
            if value % 2 == pattern[count % 2]:
                count += 1
        best = max(best, count)
    return best


def max_valid_mod_length(nums: Sequence[int], k: int) -> int:
    """Return the longest subsequence whose adjacent pair sums are all equal modulo ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    table = [[0] * k for _ in range(k)]
    best = 0
    for value in nums:
        residue = value % k
        for prev in range(k):
            table[prev][residue] = table[residue][prev] + 1
            best = max(best, table[prev][residue])
    return best


def longest_max_and_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest subarray with the maximum bitwise AND."""
    top = 0
    best = streak = 0
    for value in nums:
        if top < value:
            top = value
            best = streak = 0
        streak = streak + 1 if value == top else 0
        best = max(best, streak)
    return best


def count_hill_valley(nums: Sequence[int]) -> int:
    """Count hills and valleys, treating runs of equal neighbours as one."""
    levels = [key for key, _ in groupby(nums)]
    return sum(
        1
        for left, mid, right in zip(levels, levels[1:], levels[2:])
        if (left < mid > right) or (left > mid < right)
    )


def find_error_nums(nums: Sequence[int]) -> tuple[int, int]:
    """Return the (repeated, missing) values of a broken permutation of 1..n."""
    counts = Counter(nums)
    missing = repeating = -1
    for value in range(1, len(nums) + 1):
        if counts[value] == 2:
            repeating = value
        elif counts[value] == 0:
            missing = value
        if missing != -1 and repeating != -1:
            break
    return repeating, missing


def max_unique_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of distinct values keepable after deletions."""
    _require_items(nums)
    positives = {value for value in nums if value > 0}
    return sum(positives) if positives else max(nums)


def _sort_and_count(nums: list[int]) -> tuple[list[int], int]:
    if len(nums) <= 1:
        return nums, 0
    mid = (len(nums) + 1) // 2
    left, left_count = _sort_and_count(nums[:mid])
    right, right_count = _sort_and_count(nums[mid:])
    doubled = [2 * value for value in right]
    cross = sum(bisect_left(doubled, value) for value in left)
    return list(merge(left, right)), left_count + right_count + cross


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count index pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count(list(nums))[1]