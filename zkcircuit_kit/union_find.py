"""Disjoint-set forest with union by rank and path compression."""

from typing import Iterable


class UnionFind:
    """Disjoint sets over integers, created on first use.

    When ``track_representatives`` is set, ``representatives`` holds the
    current roots of all sets.
    """

    def __init__(self, track_representatives: bool = False):
        # A negative value marks a root; more negative means higher rank.
        self._parent: dict[int, int] = {}
        self.representatives: set[int] | None = set() if track_representatives else None

    def find(self, idx: int) -> int:
        """Return the root of the set holding ``idx``."""
        if idx not in self._parent:
            self._parent[idx] = -1
            if self.representatives is not None:
                self.representatives.add(idx)
            return idx
        path = []
        root = idx
        while self._parent[root] >= 0:
            path.append(root)
            root = self._parent[root]
        for node in path:
            self._parent[node] = root
        return root

    def union(self, idxs: Iterable[int]) -> None:
        """Merge the sets holding every element of ``idxs``."""
        roots = sorted({self.find(idx) for idx in idxs})
        if not roots:
            return
        roots.sort(key=self._parent.__getitem__)
        head, *rest = roots
        if rest and self._parent[head] == self._parent[rest[0]]:
            self._parent[head] -= 1
        for root in rest:
            if self.representatives is not None:
                self.representatives.discard(root)
            self._parent[root] = head

    def components(self) -> list[list[int]]:
        """Return every set as a list of its elements."""
        groups: dict[int, list[int]] = {}
        for element in list(self._parent):
            groups.setdefault(self.find(element), []).append(element)
        return list(groups.values())