"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Partition of the integers ``0 .. size - 1`` into disjoint sets."""

    __slots__ = ("_parent", "_rank")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if they were already one."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_y] < self._rank[root_x]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True