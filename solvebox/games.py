"""Probability and search routines for small games and tournaments."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterator, Sequence
from functools import lru_cache
from itertools import permutations

_EPS = 1e-6


def soup_servings(n: int) -> float:
    """Return P(soup A empties first) plus half P(both empty together) for ``n`` ml each."""
    m = math.ceil(n / 25)
    table: defaultdict[tuple[int, int], float] = defaultdict(float)

    def step(i: int, j: int) -> float:
        return (
            table[max(0, i - 4), j]
            + table[max(0, i - 3), j - 1]
            + table[max(0, i - 2), max(0, j - 2)]
            + table[i - 1, max(0, j - 3)]
        ) / 4

    table[0, 0] = 0.5
    for k in range(1, m + 1):
        table[0, k] = 1.0
        table[k, 0] = 0.0
        for j in range(1, k + 1):
            table[j, k] = step(j, k)
            table[k, j] = step(k, j)
        if table[k, k] > 1 - 1e-5:
            return 1.0
    return table[m, m]


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Return the probability of stopping with at most ``n`` points when drawing until ``k``."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    if max_pts < 1:
        raise ValueError("max_pts must be positive")
    probs = [1.0] + [0.0] * n
    window = 1.0 if k > 0 else 0.0
    for i in range(1, n + 1):
        probs[i] = window / max_pts
        if i < k:
            window += probs[i]
        if 0 <= i - max_pts < k:
            window -= probs[i - max_pts]
    return sum(probs[k:])


def _combine(a: float, b: float) -> Iterator[float]:
    yield a + b
    yield a - b
    yield b - a
    yield a * b
    if abs(b) > _EPS:
        yield a / b
    if abs(a) > _EPS:
        yield b / a


def _reaches_24(nums: list[float]) -> bool:
    if len(nums) == 1:
        return abs(nums[0] - 24.0) < _EPS
    for i, j in permutations(range(len(nums)), 2):
        rest = [value for index, value in enumerate(nums) if index not in (i, j)]
        if any(_reaches_24(rest + [value]) for value in _combine(nums[i], nums[j])):
            return True
    return False


def judge_point24(cards: Sequence[int]) -> bool:
    """Tell whether the cards combine with + - * / into 24."""
    return _reaches_24([float(card) for card in cards])


@lru_cache(maxsize=None)
def _rounds(n: int, first: int, second: int) -> tuple[int, int]:
    if first + second == n + 1:
        return 1, 1
    if first + second > n + 1:
        return _rounds(n, n + 1 - second, n + 1 - first)
    half = (n + 1) // 2
    if second <= half:
        outcomes = [
            _rounds(half, i + 1, i + j + 2) for i in range(first) for j in range(second - first)
        ]
    else:
        mirrored = n + 1 - second
        middle = (n - 2 * mirrored + 1) // 2
        outcomes = [
            _rounds(half, i + 1, i + j + middle + 2)
            for i in range(first)
            for j in range(mirrored - first)
        ]
    return min(e for e, _ in outcomes) + 1, max(last for _, last in outcomes) + 1


def earliest_and_latest(n: int, first_player: int, second_player: int) -> tuple[int, int]:
    """Return the earliest and latest rounds in which the two players can meet."""
    if first_player == second_player:
        raise ValueError("the two players must differ")
    if not (1 <= first_player <= n and 1 <= second_player <= n):
        raise ValueError("players must be numbered from 1 to n")
    first, second = sorted((first_player, second_player))
    return _rounds(n, first, second)