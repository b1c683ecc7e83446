"""Directed union-find used to track cycle lengths of a random permutation."""

from __future__ import annotations

import numpy as np


class DisjointSet:
    """Partitions of ``0..n-1`` with size accounting at the roots.

    ``find`` walks parent links without path compression, so ``size`` at the
    true root is always the authoritative partition size.  ``union`` is
    directed: the root of ``a`` is attached under the root of ``b``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            x = parent[x]
        return int(x)

    def union(self, a: int, b: int) -> bool:
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        self.parent[ra] = rb
        self.size[rb] += self.size[ra]
        return True

    def component_size(self, x: int) -> int:
        return int(self.size[self.find(x)])


__all__ = ["DisjointSet"]
