"""Graph traversals over adjacency matrices and adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_start(matrix: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(matrix):
        raise ValueError(f"start vertex {start} is outside the graph")


def bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visiting order from start over an adjacency matrix."""
    _check_start(matrix, start)
    visited = [False] * len(matrix)
    visited[start] = True
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, edge in enumerate(matrix[node]):
            if edge == 1 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs_iterative(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first visiting order from start using an explicit stack.

    Neighbours are pushed in ascending order, so the highest is visited first.
    """
    _check_start(matrix, start)
    visited = [False] * len(matrix)
    order = []
    stack = [start]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        stack.extend(
            neighbour
            for neighbour, edge in enumerate(matrix[node])
            if edge == 1 and not visited[neighbour]
        )
    return order


def dfs_recursive(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first visiting order from start, descending into the lowest
    unvisited neighbour first."""
    _check_start(matrix, start)
    visited = [False] * len(matrix)
    visited[start] = True
    order = [start]
    stack = [iter(enumerate(matrix[start]))]
    while stack:
        for neighbour, edge in stack[-1]:
            if edge == 1 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(enumerate(matrix[neighbour])))
                break
        else:
            stack.pop()
    return order


def has_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """True when the directed graph given as adjacency lists has a cycle."""
    unvisited, on_path, finished = 0, 1, 2
    state = [unvisited] * len(adjacency)
    for root in range(len(adjacency)):
        if state[root] != unvisited:
            continue
        state[root] = on_path
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == on_path:
                    return True
                if state[neighbour] == unvisited:
                    state[neighbour] = on_path
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = finished
                stack.pop()
    return False


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Vertices of a directed acyclic graph in topological order, found by
    reversing depth-first finishing order."""
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def find_bridges(adjacency: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Bridges of an undirected graph, as (parent, child) pairs of the
    depth-first tree, in the order they are found."""
    size = len(adjacency)
    entry = [-1] * size
    low = [0] * size
    timer = 0
    bridges: list[tuple[int, int]] = []
    for root in range(size):
        if entry[root] != -1:
            continue
        entry[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if entry[neighbour] == -1:
                    entry[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                low[node] = min(low[node], entry[neighbour])
            else:
                stack.pop()
                if stack:
                    up = stack[-1][0]
                    low[up] = min(low[up], low[node])
                    if low[node] > entry[up]:
                        bridges.append((up, node))
    return bridges


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with each value followed by two spaces, one row per line."""
    return "".join("".join(f"{value}  " for value in row) + "\n" for row in matrix)