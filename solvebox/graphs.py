"""Graph routines: threshold reachability and tree partition scoring."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from heapq import heappop, heappush
from itertools import combinations
from operator import xor

_UNREACHABLE = 10**8


def _distances(adjacency: list[list[tuple[int, int]]], source: int) -> list[int]:
    dist = [_UNREACHABLE] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heappush(heap, (candidate, neighbour))
    return dist


def find_the_city(n: int, edges: Sequence[Sequence[int]], distance_threshold: int) -> int:
    """Return the city reaching the fewest cities within the threshold; ties go to the largest."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    best_city, fewest = -1, n
    for city in range(n):
        reachable = sum(1 for d in _distances(adjacency, city) if d <= distance_threshold)
        if reachable <= fewest:
            best_city, fewest = city, reachable
    return best_city


def minimum_score(nums: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Cut two tree edges to minimise the spread between the three components' XORs."""
    n = len(nums)
    if n < 3:
        raise ValueError("the tree needs at least three nodes")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    subtree = list(nums)
    entry = [-1] * n
    last = [0] * n
    clock = 0
    stack = [(0, -1, False)]
    while stack:
        node, parent, finished = stack.pop()
        if finished:
            last[node] = clock - 1
            if parent >= 0:
                subtree[parent] ^= subtree[node]
            continue
        entry[node] = clock
        clock += 1
        stack.append((node, parent, True))
        stack.extend((child, node, False) for child in adjacency[node] if child != parent)
    if clock != n:
        raise ValueError("edges do not form a connected tree")

    def is_ancestor(a: int, b: int) -> bool:
        return entry[a] < entry[b] <= last[a]

    total = reduce(xor, nums)
    best: int | None = None
    for a, b in combinations(range(1, n), 2):
        if is_ancestor(a, b):
            parts = (subtree[b], subtree[a] ^ subtree[b], total ^ subtree[a])
        elif is_ancestor(b, a):
            parts = (subtree[a], subtree[b] ^ subtree[a], total ^ subtree[b])
        else:
            parts = (subtree[a], subtree[b], total ^ subtree[a] ^ subtree[b])
        score = max(parts) - min(parts)
        best = score if best is None else min(best, score)
    assert best is not None
    return best