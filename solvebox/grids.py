"""Dynamic-programming routines over triangles and rectangular grids."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate

Grid = Sequence[Sequence[int]]


def _require_grid(grid: Grid, what: str) -> None:
    if not grid or not grid[0]:
        raise ValueError(f"{what} must have at least one row and one column")


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if rows:
            prev = rows[-1]
            rows.append([1] + [a + b for a, b in zip(prev, prev[1:])] + [1])
        else:
            rows.append([1])
    return rows


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the minimum top-to-bottom path sum of a number triangle."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(below, right) for value, below, right in zip(row, best, best[1:])]
    return best[0]


def count_squares(matrix: Grid) -> int:
    """Count the square submatrices made only of ones."""
    _require_grid(matrix, "matrix")
    prev = [0] * (len(matrix[0]) + 1)
    total = 0
    for row in matrix:
        current = [0]
        for j, cell in enumerate(row):
            size = min(prev[j + 1], current[j], prev[j]) + 1 if cell == 1 else 0
            current.append(size)
            total += size
        prev = current
    return total


def count_submatrices(mat: Grid) -> int:
    """Count the rectangular submatrices made only of ones."""
    _require_grid(mat, "mat")
    runs: list[list[int]] = []
    total = 0
    for row in mat:
        run: list[int] = []
        for j, cell in enumerate(row):
            run.append(cell if j == 0 else (0 if cell == 0 else run[-1] + 1))
        runs.append(run)
        for j, width in enumerate(run):
            for above in reversed(runs):
                width = min(width, above[j])
                if width == 0:
                    break
                total += width
    return total


def minimum_area(grid: Grid) -> int:
    """Return the area of the smallest axis-aligned rectangle covering every one."""
    _require_grid(grid, "grid")
    ones = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 1]
    if not ones:
        raise ValueError("grid contains no ones")
    rows = [i for i, _ in ones]
    cols = [j for _, j in ones]
    return (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1)


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Grid) -> int:
    """Count right/down paths from the top-left to the bottom-right avoiding obstacles."""
    _require_grid(grid, "grid")
    if grid[0][0] == 1 or grid[-1][-1] == 1:
        return 0
    ways = [1] + [0] * (len(grid[0]) - 1)
    for row in grid:
        for j, cell in enumerate(row):
            if cell == 1:
                ways[j] = 0
            elif j > 0:
                ways[j] += ways[j - 1]
    return ways[-1]


def min_path_sum(grid: Grid) -> int:
    """Return the minimum right/down path sum from the top-left to the bottom-right."""
    _require_grid(grid, "grid")
    best: list[float] = [math.inf] * len(grid[0])
    for i, row in enumerate(grid):
        left = math.inf
        for j, cell in enumerate(row):
            if i == 0 and j == 0:
                left = cell
            else:
                left = cell + min(best[j], left)
            best[j] = left
    return int(best[-1])


def _corner_child_harvest(fruits: Grid) -> int:
    """Best harvest of the child starting in the top-right corner."""
    n = len(fruits)
    prev: list[float] = [-math.inf] * n
    prev[n - 1] = fruits[0][n - 1]
    for i in range(1, n - 1):
        current: list[float] = [-math.inf] * n
        for j in range(max(n - 1 - i, i + 1), n):
            best = max(prev[max(j - 1, 0):j + 2])
            current[j] = best + fruits[i][j]
        prev = current
    return int(prev[n - 1])


def max_collected_fruits(fruits: Grid) -> int:
    """Return the most fruit three children collect moving from the corners of a square grid."""
    _require_grid(fruits, "fruits")
    total = sum(row[i] for i, row in enumerate(fruits))
    total += _corner_child_harvest(fruits)
    transposed = [list(column) for column in zip(*fruits)]
    total += _corner_child_harvest(transposed)
    return total