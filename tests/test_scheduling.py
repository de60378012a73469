import pytest
from hypothesis import given
from hypothesis import strategies as st

from solvebox.scheduling import (
    match_players_and_trainers,
    max_event_value,
    max_free_time,
    max_free_time_rearrange,
    max_subarrays,
    max_total_fruits,
    min_swap_cost,
    minimum_difference,
    most_booked,
    unplaced_fruits,
    unplaced_fruits_fast,
)

points = st.lists(st.integers(0, 60), unique=True, min_size=2, max_size=16).map(sorted)


def _intervals(sorted_points):
    usable = sorted_points[: len(sorted_points) // 2 * 2]
    return list(zip(usable[::2], usable[1::2]))


# max_event_value


def test_max_event_value_example():
    assert max_event_value([[1, 2, 4], [3, 4, 3], [2, 3, 1]], 2) == 7


@given(points, st.lists(st.integers(1, 20), min_size=8, max_size=8))
def test_max_event_value_disjoint_events_all_attended(pts, values):
    events = [[s, e, v] for (s, e), v in zip(_intervals(pts), values)]
    assert max_event_value(events, len(events)) == sum(e[2] for e in events)


@given(points, st.lists(st.integers(1, 20), min_size=8, max_size=8))
def test_max_event_value_single_pick_is_largest(pts, values):
    events = [[s, e, v] for (s, e), v in zip(_intervals(pts), values)]
    assert max_event_value(events, 1) == max(e[2] for e in events)
    assert max_event_value(events, 0) == 0


def test_max_event_value_monotone_in_k():
    events = [[1, 5, 3], [1, 5, 1], [6, 6, 5], [2, 3, 4], [4, 6, 2]]
    results = [max_event_value(events, k) for k in range(5)]
    assert results == sorted(results)


# most_booked


def test_most_booked_example():
    assert most_booked(3, [[1, 20], [2, 10], [3, 5], [4, 9], [6, 8]]) == 1


def test_most_booked_single_room():
    assert most_booked(1, [[0, 3], [1, 2]]) == 0


@given(st.integers(1, 5), st.lists(st.tuples(st.integers(0, 30), st.integers(1, 10)), max_size=15))
def test_most_booked_returns_a_room(n, spans):
    starts = sorted({s for s, _ in spans})
    meetings = [[s, s + d] for s, (_, d) in zip(starts, spans)]
    assert 0 <= most_booked(n, meetings) < n


def test_most_booked_needs_a_room():
    with pytest.raises(ValueError):
        most_booked(0, [[0, 1]])


# free time


def test_max_free_time_example():
    assert max_free_time(5, 1, [1, 3], [2, 5]) == 2


@given(points)
def test_max_free_time_all_moved_frees_everything_else(pts):
    meetings = _intervals(pts)
    starts = [s for s, _ in meetings]
    ends = [e for _, e in meetings]
    busy = sum(e - s for s, e in meetings)
    assert max_free_time(61, len(meetings), starts, ends) == 61 - busy


@given(points)
def test_rearranging_beats_shifting_one(pts):
    meetings = _intervals(pts)
    starts = [s for s, _ in meetings]
    ends = [e for _, e in meetings]
    assert max_free_time_rearrange(61, starts, ends) >= max_free_time(61, 1, starts, ends)


def test_max_free_time_rearrange_without_meetings():
    assert max_free_time_rearrange(12, [], []) == 12


@given(points)
def test_max_free_time_rearrange_bounded_by_free_total(pts):
    meetings = _intervals(pts)
    starts = [s for s, _ in meetings]
    ends = [e for _, e in meetings]
    free_total = 61 - sum(e - s for s, e in meetings)
    assert max_free_time_rearrange(61, starts, ends) <= free_total


def test_max_free_time_mismatched_lengths():
    with pytest.raises(ValueError):
        max_free_time(10, 1, [1, 2], [3])


# max_total_fruits


def test_max_total_fruits_example():
    assert max_total_fruits([[2, 8], [6, 3], [8, 6]], 5, 4) == 9


@given(st.lists(st.integers(0, 40), unique=True, min_size=1, max_size=10).map(sorted), st.data())
def test_max_total_fruits_invariants(positions, data):
    amounts = data.draw(st.lists(st.integers(1, 9), min_size=len(positions), max_size=len(positions)))
    fruits = [[p, a] for p, a in zip(positions, amounts)]
    start = data.draw(st.integers(0, 40))
    at_start = sum(a for p, a in fruits if p == start)
    assert max_total_fruits(fruits, start, 0) == at_start
    assert max_total_fruits(fruits, start, 200) == sum(amounts)
    results = [max_total_fruits(fruits, start, k) for k in range(0, 20, 3)]
    assert results == sorted(results)


# match_players_and_trainers


@given(st.lists(st.integers(1, 20), max_size=10), st.lists(st.integers(1, 20), max_size=10))
def test_matching_bounds_and_symmetry(players, trainers):
    matched = match_players_and_trainers(players, trainers)
    assert 0 <= matched <= min(len(players), len(trainers))
    assert matched == match_players_and_trainers(list(reversed(players)), trainers[::-1])


@given(st.lists(st.integers(1, 20), max_size=10))
def test_matching_strong_trainers_take_everyone(players):
    assert match_players_and_trainers(players, [100] * len(players)) == len(players)
    assert match_players_and_trainers(players, []) == 0


# fruits into baskets


@given(st.lists(st.integers(1, 30), max_size=25), st.lists(st.integers(1, 30), max_size=25))
def test_unplaced_fast_agrees_with_simple(fruits, baskets):
    assert unplaced_fruits_fast(fruits, baskets) == unplaced_fruits(fruits, baskets)


@given(st.lists(st.integers(1, 30), max_size=25), st.lists(st.integers(1, 30), max_size=25))
def test_unplaced_counts_at_least_the_surplus(fruits, baskets):
    assert unplaced_fruits(fruits, baskets) >= max(0, len(fruits) - len(baskets))


def test_unplaced_leaves_input_alone():
    baskets = [3, 5, 4]
    unplaced_fruits([4, 2, 5], baskets)
    unplaced_fruits_fast([4, 2, 5], baskets)
    assert baskets == [3, 5, 4]


def test_unplaced_without_baskets():
    assert unplaced_fruits_fast([1, 2, 3], []) == unplaced_fruits([1, 2, 3], []) == 3


# max_subarrays


def test_max_subarrays_example():
    assert max_subarrays(4, [[2, 3], [1, 4]]) == 9


@given(st.integers(2, 12), st.data())
def test_max_subarrays_never_exceeds_all(n, data):
    pairs = data.draw(
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)).filter(lambda p: p[0] != p[1]), min_size=1, max_size=6)
    )
    assert 1 <= max_subarrays(n, [list(p) for p in pairs]) <= n * (n + 1) // 2


def test_max_subarrays_rejects_out_of_range():
    with pytest.raises(ValueError):
        max_subarrays(3, [[1, 5]])


# minimum_difference


def test_minimum_difference_example():
    assert minimum_difference([7, 9, 5, 8, 1, 3]) == 1


@given(st.integers(1, 6), st.integers(-50, 50))
def test_minimum_difference_constant(n, value):
    assert minimum_difference([value] * (3 * n)) == 0


@given(st.integers(1, 4).flatmap(lambda n: st.lists(st.integers(-20, 20), min_size=3 * n, max_size=3 * n)))
def test_minimum_difference_sorted_ascending_bound(nums):
    n = len(nums) // 3
    ordered = sorted(nums)
    assert minimum_difference(ordered) == sum(ordered[:n]) - sum(ordered[-n:])


def test_minimum_difference_bad_length():
    with pytest.raises(ValueError):
        minimum_difference([1, 2, 3, 4])


# min_swap_cost


@given(st.lists(st.integers(1, 20), max_size=10))
def test_min_swap_cost_equal_baskets(basket):
    assert min_swap_cost(basket, list(reversed(basket))) == 0


def test_min_swap_cost_impossible():
    assert min_swap_cost([8, 4, 2], [1, 2, 2]) == -1


@given(st.lists(st.integers(1, 6), min_size=1, max_size=8), st.lists(st.integers(1, 6), min_size=1, max_size=8))
def test_min_swap_cost_symmetric(basket1, basket2):
    assert min_swap_cost(basket1, basket2) == min_swap_cost(basket2, basket1)