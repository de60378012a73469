# solvebox

Small, dependency-free implementations of well-known algorithmic problems,
grouped by theme. Every function takes plain Python values (ints, strings,
lists, tuples) and returns plain Python values. Functions do not modify the
sequences passed to them.

## Installation

```
pip install solvebox
```

To run the test suite:

```
pip install "solvebox[test]"
pytest
```

## Modules

- `solvebox.grids`: `pascal_triangle`, `minimum_total`, `count_squares`,
  `count_submatrices`, `minimum_area`, `unique_paths`,
  `unique_paths_with_obstacles`, `min_path_sum`, `max_collected_fruits`
- `solvebox.sequences`: `max_product`, `find_min_rotated`,
  `longest_ones_after_deletion`, `max_alternating_sum`, `rob_circular`,
  `contains_duplicate`, `length_of_lis`, `search_range`,
  `find_longest_chain`, `max_valid_parity_length`, `max_valid_mod_length`,
  `longest_max_and_subarray`, `count_hill_valley`, `find_error_nums`,
  `max_unique_sum`, `reverse_pairs`
- `solvebox.numbers`: `count_max_or_subsets`, `smallest_subarrays`,
  `subarray_bitwise_ors`, `product_queries`, `is_power_of_two`,
  `is_power_of_three`, `is_power_of_four`, `reordered_power_of_2`,
  `maximum_69_number`, `ways_as_sum_of_powers`
- `solvebox.strings`: `make_fancy_string`, `maximum_gain`,
  `largest_good_integer`, `is_valid_word`
- `solvebox.folders`: `remove_subfolders`, `delete_duplicate_folders`
- `solvebox.graphs`: `find_the_city`, `minimum_score`
- `solvebox.games`: `soup_servings`, `new21_game`, `judge_point24`,
  `earliest_and_latest`
- `solvebox.scheduling`: `max_event_value`, `most_booked`,
  `max_free_time_rearrange`, `max_free_time`, `max_total_fruits`,
  `match_players_and_trainers`, `unplaced_fruits`, `unplaced_fruits_fast`,
  `max_subarrays`, `minimum_difference`, `min_swap_cost`

## Examples

```python
from solvebox.grids import pascal_triangle, unique_paths
from solvebox.sequences import search_range, find_error_nums
from solvebox.strings import make_fancy_string
from solvebox.games import judge_point24, earliest_and_latest

pascal_triangle(4)                      # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
unique_paths(3, 7)                      # 28
search_range([5, 7, 7, 8, 8, 10], 8)    # (3, 4)
search_range([5, 7, 7, 8, 8, 10], 6)    # (-1, -1)
find_error_nums([1, 2, 2, 4])           # (2, 3)  -> (repeated, missing)
make_fancy_string("leeetcode")          # "leetcode"
judge_point24([4, 1, 8, 7])             # True
```

## Results and errors

- Pairs of results (`search_range`, `find_error_nums`, `earliest_and_latest`)
  are returned as tuples.
- Counts taken modulo a large prime (`product_queries`,
  `ways_as_sum_of_powers`) use `solvebox.numbers.MOD`, which is
  `1_000_000_007`.
- `min_swap_cost` returns `-1` when the baskets cannot be made equal.
- Input that a function cannot work with, such as an empty grid, an empty
  sequence where one value is needed, a non-positive `k` or mismatched
  start and end lists, raises `ValueError`; an out-of-range query in
  `product_queries` raises `IndexError`.

## What it does not do

`solvebox` is a library only. It has no command-line program, reads no
files and keeps no state between calls: you import a function and call it
with your data.