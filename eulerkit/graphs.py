"""Shortest paths through a grid and minimal spanning networks."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def min_path_four_ways(grid: Sequence[Sequence[int]]) -> int:
    """Least sum from the top-left to the bottom-right cell moving in all four directions."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows differ in length")
    height = len(rows)
    target = (height - 1, width - 1)
    best = {(0, 0): rows[0][0]}
    queue = [(rows[0][0], 0, 0)]
    while queue:
        cost, y, x = heapq.heappop(queue)
        if (y, x) == target:
            return cost
        if cost > best[(y, x)]:
            continue
        for dy, dx in _MOVES:
            ny, nx = y + dy, x + dx
            if not (0 <= ny < height and 0 <= nx < width):
                continue
            candidate = cost + rows[ny][nx]
            if candidate < best.get((ny, nx), candidate + 1):
                best[(ny, nx)] = candidate
                heapq.heappush(queue, (candidate, ny, nx))
    return best[target]


def minimal_network(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning tree over nodes 1 to ``n``.

    Edges are (u, v, weight); a later edge between the same nodes replaces
    an earlier one. A network that cannot be connected raises ValueError.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    weights: dict[int, dict[int, int]] = {node: {} for node in range(1, n + 1)}
    for u, v, weight in edges:
        if u not in weights or v not in weights:
            raise ValueError(f"edge ({u}, {v}) names a node outside 1..{n}")
        weights[u][v] = weight
        weights[v][u] = weight
    if n == 0:
        return 0
    visited: set[int] = set()
    queue = [(0, 1)]
    total = 0
    while queue and len(visited) < n:
        weight, node = heapq.heappop(queue)
        if node in visited:
            continue
        visited.add(node)
        total += weight
        for neighbour, cost in weights[node].items():
            if neighbour not in visited:
                heapq.heappush(queue, (cost, neighbour))
    if len(visited) < n:
        raise ValueError("the network is not connected")
    return total