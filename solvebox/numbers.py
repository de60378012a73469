"""Integer and bitwise routines: powers, OR-subsets and digit tricks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

MOD = 1_000_000_007
_BITS = 31


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """Count the subsets (the empty one included) whose OR equals the OR of all values."""
    target = 0
    for value in nums:
        target |= value
    counts: Counter[int] = Counter({0: 1})
    for value in nums:
        extended = Counter(counts)
        for accumulated, ways in counts.items():
            extended[accumulated | value] += ways
        counts = extended
    return counts[target]


def smallest_subarrays(nums: Sequence[int]) -> list[int]:
    """For each start, return the shortest subarray length reaching the suffix's maximum OR."""
    last_seen = [-1] * _BITS
    lengths: list[int] = []
    for i in range(len(nums) - 1, -1, -1):
        value = nums[i]
        reach = i
        for bit, seen in enumerate(last_seen):
            if value >> bit & 1:
                last_seen[bit] = i
            elif seen != -1:
                reach = max(reach, seen)
        lengths.append(reach - i + 1)
    lengths.reverse()
    return lengths


def subarray_bitwise_ors(arr: Sequence[int]) -> int:
    """Return how many distinct values the ORs of all non-empty subarrays take."""
    seen: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {value} | {acc | value for acc in ending_here}
        seen |= ending_here
    return len(seen)


def product_queries(n: int, queries: Sequence[Sequence[int]]) -> list[int]:
    """Answer range-product queries over the powers of two that sum to ``n``, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    powers = [1 << bit for bit in range(n.bit_length()) if n >> bit & 1]
    answers: list[int] = []
    for left, right in queries:
        if not (0 <= left < len(powers) and 0 <= right < len(powers)):
            raise IndexError(f"query ({left}, {right}) is out of range")
        product = 1 if left <= right else 0
        for power in powers[left:right + 1]:
            product = product * power % MOD
        answers.append(product)
    return answers


def _is_power_of(n: int, base: int) -> bool:
    if n <= 0:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two."""
    return _is_power_of(n, 2)


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is a power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a power of four."""
    return _is_power_of(n, 4)


def reordered_power_of_2(n: int) -> bool:
    """Tell whether the digits of ``n`` can be reordered into a power of two below 2**31."""
    target = sorted(str(n))
    return any(sorted(str(1 << exponent)) == target for exponent in range(_BITS))


def maximum_69_number(num: int) -> int:
    """Return the largest number reachable by turning at most one 6 into a 9."""
    return int(str(num).replace("6", "9", 1))


def ways_as_sum_of_powers(n: int, x: int) -> int:
    """Count the ways to write ``n`` as a sum of distinct ``x``-th powers, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1] + [0] * n
    for base in range(1, n + 1):
        power = base**x
        if power > n:
            break
        for total in range(n, power - 1, -1):
            ways[total] = (ways[total] + ways[total - power]) % MOD
    return ways[n]