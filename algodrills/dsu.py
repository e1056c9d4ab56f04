"""A disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Partition of the items 0..size-1 into disjoint groups."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise ValueError(f"item {item} is outside 0..{len(self._parent) - 1}")

    def find(self, item: int) -> int:
        """Return the representative of the group holding item."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the groups of first and second; return False if they were already one group."""
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return False
        rank_first = self._rank[root_first]
        rank_second = self._rank[root_second]
        if rank_first < rank_second:
            self._parent[root_first] = root_second
        elif rank_first > rank_second:
            self._parent[root_second] = root_first
        else:
            self._parent[root_first] = root_second
            self._rank[root_second] += 1
        return True