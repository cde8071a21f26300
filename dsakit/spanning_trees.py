"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from dsakit.disjoint_set import DisjointSet


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices u and v."""

    u: int
    v: int
    weight: int


def _check_square(matrix: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("adjacency matrix must be square")


def kruskal(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning forest of a weighted adjacency matrix (0 = no edge).

    Edges are read from the lower triangle and accepted in ascending
    weight order; the accepted edges are returned in that order.
    """
    _check_square(matrix)
    size = len(matrix)
    edges = [
        Edge(i, j, matrix[i][j])
        for i in range(1, size)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    edges.sort(key=attrgetter("weight"))
    components = DisjointSet(size)
    return [edge for edge in edges if components.union(edge.u, edge.v)]


def prim(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning tree grown from vertex 0 over an adjacency matrix.

    Returns one edge (parent, vertex, weight) for every vertex but 0, in
    vertex order. Raises ValueError when the graph is not connected.
    """
    _check_square(matrix)
    size = len(matrix)
    if size == 0:
        return []
    key: list[int | None] = [None] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] is not None]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and (key[v] is None or weight < key[v]):
                parent[v] = u
                key[v] = weight
    if any(parent[v] is None for v in range(1, size)):
        raise ValueError("graph is not connected")
    return [Edge(parent[v], v, matrix[v][parent[v]]) for v in range(1, size)]


def spanning_tree_weight(adjacency: Sequence[Iterable[tuple[int, int]]]) -> int:
    """Total weight of a minimum spanning tree given adjacency lists of
    (neighbour, weight) pairs, found with a heap-based Prim's algorithm."""
    size = len(adjacency)
    if size == 0:
        return 0
    key: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    heap = [(0, 0)]
    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and (key[v] is None or weight < key[v]):
                key[v] = weight
                heapq.heappush(heap, (weight, v))
    if any(k is None for k in key):
        raise ValueError("graph is not connected")
    return sum(key)


def total_weight(edges: Iterable[Edge]) -> int:
    """Sum of the weights of the given edges."""
    return sum(edge.weight for edge in edges)