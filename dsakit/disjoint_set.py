"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Partition of the integers ``0 .. size - 1`` into disjoint components."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise ValueError(f"node {node} is outside the set")

    def find(self, node: int) -> int:
        """Return the representative of the component holding node."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the components of u and v; False if they were already one."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            u, v = v, u
        self._parent[v] = u
        if self._rank[u] == self._rank[v]:
            self._rank[u] += 1
        return True

    def connected(self, u: int, v: int) -> bool:
        """True when u and v lie in the same component."""
        return self.find(u) == self.find(v)