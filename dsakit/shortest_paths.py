"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Optional


def _check(size: int, source: int) -> None:
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is outside the graph")


def _matrix_search(
    matrix: Sequence[Sequence[int]], source: int
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    _check(size, source)
    dist: list[Optional[int]] = [None] * size
    pred: list[Optional[int]] = [None] * size
    done = [False] * size
    dist[source] = 0
    while True:
        candidates = [v for v in range(size) if not done[v] and dist[v] is not None]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not done[v]:
                through = dist[u] + weight
                if dist[v] is None or through < dist[v]:
                    dist[v] = through
                    pred[v] = u
    return dist, pred


def dijkstra_matrix(
    matrix: Sequence[Sequence[int]], source: int
) -> list[Optional[int]]:
    """Distances from source over an adjacency matrix (0 = no edge).

    Unreachable vertices get None.
    """
    return _matrix_search(matrix, source)[0]


def shortest_path_tree(
    matrix: Sequence[Sequence[int]], start: int
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    """Distances and predecessors from start over an adjacency matrix.

    The predecessor of start and of unreachable vertices is None.
    """
    return _matrix_search(matrix, start)


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int
) -> list[Optional[int]]:
    """Distances from source over adjacency lists of (neighbour, weight)
    pairs, using a binary heap. Unreachable vertices get None."""
    _check(len(adjacency), source)
    dist: list[Optional[int]] = [None] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            through = distance + weight
            if dist[neighbour] is None or through < dist[neighbour]:
                dist[neighbour] = through
                heapq.heappush(heap, (through, neighbour))
    return dist