"""
disjoint_set.py — Union-Find
============================
Tracks which nodes already share a component while Kruskal grows its
forest.  `find` walks to the root iteratively and compresses the path
on the way back; roots are nodes that are their own parent.
"""

from typing import Dict, Iterable


class DisjointSet:

    def __init__(self, items: Iterable[str] = ()):
        self.parent: Dict[str, str] = {}
        for item in items:
            self.add(item)

    def add(self, item: str) -> None:
        self.parent.setdefault(item, item)

    def find(self, item: str) -> str:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_a] = root_b
        return True

    def same(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)
