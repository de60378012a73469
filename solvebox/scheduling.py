"""Scheduling and assignment routines: events, meeting rooms, baskets and partitions."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, chain


def _require_same_length(start_time: Sequence[int], end_time: Sequence[int]) -> None:
    if len(start_time) != len(end_time):
        raise ValueError("start_time and end_time must have the same length")


def max_event_value(events: Sequence[Sequence[int]], k: int) -> int:
    """Return the largest total value of at most ``k`` non-overlapping events.

    Each event is ``(start, end, value)``; an event may begin only after the
    previous attended one has ended (ends are inclusive).
    """
    if k < 0:
        raise ValueError("k must not be negative")
    ordered = sorted(tuple(event) for event in events)
    starts = [start for start, _, _ in ordered]
    following = [bisect_right(starts, end, i + 1) for i, (_, end, _) in enumerate(ordered)]
    previous = [0] * (len(ordered) + 1)
    for _ in range(k):
        current = [0] * (len(ordered) + 1)
        for i in range(len(ordered) - 1, -1, -1):
            current[i] = max(current[i + 1], ordered[i][2] + previous[following[i]])
        previous = current
    return previous[0]


def most_booked(n: int, meetings: Sequence[Sequence[int]]) -> int:
    """Return the room that hosts the most meetings; ties go to the lowest room number.

    Meetings take the lowest-numbered free room; when none is free they wait
    for the room that frees up first and keep their duration.
    """
    if n < 1:
        raise ValueError("there must be at least one room")
    free = list(range(n))
    busy: list[tuple[int, int]] = []
    counts = [0] * n
    for start, end in sorted(tuple(meeting) for meeting in meetings):
        while busy and busy[0][0] <= start:
            _, room = heapq.heappop(busy)
            heapq.heappush(free, room)
        if free:
            room = heapq.heappop(free)
            heapq.heappush(busy, (end, room))
        else:
            available, room = heapq.heappop(busy)
            heapq.heappush(busy, (available + end - start, room))
        counts[room] += 1
    return max(range(n), key=counts.__getitem__)


def max_free_time_rearrange(
    event_time: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Return the longest free stretch after moving at most one meeting anywhere."""
    _require_same_length(start_time, end_time)
    n = len(start_time)
    if n == 0:
        return event_time
    gaps = (
        [start_time[0]]
        + [start - end for start, end in zip(start_time[1:], end_time)]
        + [event_time - end_time[-1]]
    )
    largest_right = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        largest_right[i] = max(largest_right[i + 1], gaps[i + 1])

    best = 0
    largest_left = 0
    for i in range(1, n + 1):
        duration = end_time[i - 1] - start_time[i - 1]
        joined = gaps[i - 1] + gaps[i]
        if largest_left >= duration or largest_right[i] >= duration:
            best = max(best, joined + duration)
        best = max(best, joined)
        largest_left = max(largest_left, gaps[i - 1])
    return best


def max_free_time(
    event_time: int, k: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Return the longest free stretch after shifting up to ``k`` meetings, keeping their order."""
    _require_same_length(start_time, end_time)
    if k < 1:
        raise ValueError("k must be positive")
    n = len(start_time)
    busy = list(accumulate((end - start for start, end in zip(start_time, end_time)), initial=0))
    best = 0
    for i in range(k - 1, n):
        right = event_time if i == n - 1 else start_time[i + 1]
        left = 0 if i == k - 1 else end_time[i - k]
        best = max(best, right - left - (busy[i + 1] - busy[i - k + 1]))
    return best


def max_total_fruits(fruits: Sequence[Sequence[int]], start_pos: int, k: int) -> int:
    """Return the most fruit gathered walking at most ``k`` steps from ``start_pos``.

    ``fruits`` holds ``(position, amount)`` pairs sorted by position.
    """
    positions = [position for position, _ in fruits]
    totals = list(accumulate((amount for _, amount in fruits), initial=0))

    def harvest(left: int, right: int) -> int:
        return totals[bisect_right(positions, right)] - totals[bisect_left(positions, left)]

    best = 0
    for back in range(k // 2 + 1):
        onward = k - 2 * back
        best = max(
            best,
            harvest(start_pos - back, start_pos + onward),
            harvest(start_pos - onward, start_pos + back),
        )
    return best


def match_players_and_trainers(players: Sequence[int], trainers: Sequence[int]) -> int:
    """Return the most players matched to distinct trainers of at least their ability."""
    remaining = iter(sorted(trainers))
    matched = 0
    for ability in sorted(players):
        for capacity in remaining:
            if capacity >= ability:
                matched += 1
                break
        else:
            break
    return matched


def unplaced_fruits(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Count fruits left over when each takes the leftmost unused basket big enough."""
    capacities = list(baskets)
    unplaced = 0
    for fruit in fruits:
        for i, capacity in enumerate(capacities):
            if fruit <= capacity:
                capacities[i] = 0
                break
        else:
            unplaced += 1
    return unplaced


def unplaced_fruits_fast(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Same result as :func:`unplaced_fruits`, using square-root blocks of baskets."""
    capacities = list(baskets)
    if not capacities:
        return len(fruits)
    size = max(1, math.isqrt(len(capacities)))
    block_starts = range(0, len(capacities), size)
    block_max = [max(capacities[start:start + size]) for start in block_starts]
    unplaced = 0
    for fruit in fruits:
        for block, top in enumerate(block_max):
            if top < fruit:
                continue
            start = block * size
            stop = min(start + size, len(capacities))
            chosen = next(i for i in range(start, stop) if capacities[i] >= fruit)
            capacities[chosen] = 0
            block_max[block] = max(capacities[start:stop])
            break
        else:
            unplaced += 1
    return unplaced


def max_subarrays(n: int, conflicting_pairs: Sequence[Sequence[int]]) -> int:
    """Return the most subarrays of 1..n free of conflicts after removing one conflicting pair."""
    if n < 1:
        raise ValueError("n must be positive")
    nearest = [math.inf] * (n + 1)
    second = [math.inf] * (n + 1)
    for pair in conflicting_pairs:
        a, b = sorted(pair)
        if a < 1 or b > n:
            raise ValueError(f"pair {tuple(pair)} lies outside 1..{n}")
        if nearest[a] > b:
            second[a] = nearest[a]
            nearest[a] = b
        elif second[a] > b:
            second[a] = b

    total = 0
    owner = n
    runner_up = math.inf
    gain = [0] * (n + 1)
    for i in range(n, 0, -1):
        if nearest[owner] > nearest[i]:
            runner_up = min(runner_up, nearest[owner])
            owner = i
        else:
            runner_up = min(runner_up, nearest[i])
        bound = min(nearest[owner], n + 1)
        total += bound - i
        gain[owner] += min(runner_up, second[owner], n + 1) - bound
    return int(total + max(gain))


def minimum_difference(nums: Sequence[int]) -> int:
    """Remove n of 3n values to minimise (sum of first n kept) - (sum of last n kept)."""
    size = len(nums)
    if size == 0 or size % 3:
        raise ValueError("nums must hold 3n values with n >= 1")
    n = size // 3

    largest_first: list[int] = []
    running = 0
    left_sums: list[int] = []
    for i, value in enumerate(nums[:2 * n]):
        heapq.heappush(largest_first, -value)
        running += value
        if len(largest_first) > n:
            running += heapq.heappop(largest_first)
        if i >= n - 1:
            left_sums.append(running)

    smallest_first: list[int] = []
    running = 0
    right_sums: list[int] = []
    for i in range(size - 1, n - 1, -1):
        heapq.heappush(smallest_first, nums[i])
        running += nums[i]
        if len(smallest_first) > n:
            running -= heapq.heappop(smallest_first)
        if i <= 2 * n:
            right_sums.append(running)
    right_sums.reverse()

    return min(left - right for left, right in zip(left_sums, right_sums))


def min_swap_cost(basket1: Sequence[int], basket2: Sequence[int]) -> int:
    """Return the least cost to make both baskets equal by swaps, or -1 if impossible.

    A swap costs the smaller of the two values exchanged.
    """
    counts = Counter(basket1)
    counts.subtract(basket2)
    if any(count % 2 for count in counts.values()):
        return -1
    cheapest = min(chain(basket1, basket2), default=0)
    surplus = sorted(value for value, count in counts.items() for _ in range(abs(count) // 2))
    return sum(min(2 * cheapest, value) for value in surplus[:len(surplus) // 2])