"""Index-based adjacency storage for Digraph.

Out-edges of vertex v live in ``_out[v]``, a dict used as an ordered
set: iteration follows insertion order and a (v, w) pair is stored at
most once.  A parallel ``_in_deg`` list keeps in-degrees so in_degree
lookups are O(1) instead of requiring a scan of every out-edge set.

Only Digraph mutates an AdjacencyStore.  It works purely on integer
indices; mapping indices back to vertices is VertexIndex's job.
"""
from __future__ import annotations

from typing import Iterator


class AdjacencyStore:
    """Ordered, de-duplicated out-edge sets plus in-degree counters."""

    __slots__ = ("_out", "_in_deg")

    def __init__(self) -> None:
        self._out: list[dict[int, None]] = []
        self._in_deg: list[int] = []

    # ---- mutation --------------------------------------------------------

    def grow(self, size: int) -> None:
        """Make room for indices 0..size-1."""
        while len(self._out) < size:
            self._out.append({})
            self._in_deg.append(0)

    def add(self, v: int, w: int) -> bool:
        """Add edge v -> w.  Returns False if it was already present."""
        edges = self._out[v]
        if w in edges:
            return False
        edges[w] = None
        self._in_deg[w] += 1
        return True

    # ---- queries ---------------------------------------------------------

    def successors(self, v: int) -> Iterator[int]:
        return iter(self._out[v])

    def has(self, v: int, w: int) -> bool:
        return w in self._out[v]

    def out_degree(self, v: int) -> int:
        return len(self._out[v])

    def in_degree(self, w: int) -> int:
        return self._in_deg[w]

    def copy(self) -> AdjacencyStore:
        clone = AdjacencyStore()
        clone._out = [dict(edges) for edges in self._out]
        clone._in_deg = list(self._in_deg)
        return clone

    def __len__(self) -> int:
        return len(self._out)
