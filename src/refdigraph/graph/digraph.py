"""Generic directed graph with cached cycle detection and topological order.

Vertices can be any hashable value.  Each vertex is assigned a dense
integer index the first time it is seen (VertexIndex) and edges are
stored between indices (AdjacencyStore).  Self-loops are accepted.
Adding the same (from, to) pair twice is a no-op, so the graph never
holds parallel edges.

The DFS result and the canonical adjacency used for equality are
derived lazily and cached in LazyCell instances.  Every accepted edge
and every key rebinding marks them stale; reads recompute on demand.

A Digraph is not thread-safe.  One thread must drive all mutations and
reads of an instance, or the caller must synchronize externally.
"""
from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from refdigraph.errors import (
    IllegalStateError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from refdigraph.graph.adjacency import AdjacencyStore
from refdigraph.graph.cache import LazyCell
from refdigraph.graph.dfs import DfsResult, depth_first
from refdigraph.graph.index import VertexIndex

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

Canonical = frozenset  # frozenset[tuple[vertex, frozenset[vertex]]]


class Digraph(Generic[T]):
    """Directed graph over hashable vertices.

    Usage:
        g = Digraph()
        g.add_edge("a", "b")
        g.add_edge("b", "c")
        g.topological_order()   # ["a", "b", "c"]
        g.add_edge("c", "a")
        g.cycle()               # ["c", "b", "a", "c"]
    """

    __slots__ = ("_index", "_adj", "_edge_targets", "_dfs", "_canonical")

    def __init__(self) -> None:
        self._index: VertexIndex[T] = VertexIndex()
        self._adj = AdjacencyStore()
        self._edge_targets: list[int] = []
        self._dfs: LazyCell[DfsResult] = LazyCell(self._run_dfs)
        self._canonical: LazyCell[Canonical] = LazyCell(self._build_canonical)

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[T, T]], vertices: Iterable[T] = ()
    ) -> Digraph[T]:
        """Build a graph from (from, to) pairs plus optional isolated vertices."""
        graph: Digraph[T] = cls()
        for src, dst in edges:
            graph.add_edge(src, dst)
        for vertex in vertices:
            graph.add_vertex(vertex)
        return graph

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: T) -> bool:
        """Add *vertex* if absent.  Returns True if the graph changed."""
        if vertex is None:
            raise InvalidArgumentError("vertex must not be None")
        return self._index_create(vertex)[1]

    def add_edge(self, src: T, dst: T | None) -> bool:
        """Add a directed edge src -> dst.

        A None *dst* only adds *src* as a vertex.  Returns True if the
        out-edge set of *src* grew; re-adding an existing edge returns
        False and leaves the graph (and its cached results) untouched.
        """
        if src is None:
            raise InvalidArgumentError("from vertex must not be None")
        if dst is None:
            return self.add_vertex(src)
        v = self._index_create(src)[0]
        w = self._index_create(dst)[0]
        return self._add_index_edge(v, w)

    def _index_create(self, vertex: T) -> tuple[int, bool]:
        index, created = self._index.get_or_create(vertex)
        if created:
            self._adj.grow(index + 1)
        return index, created

    def _add_index_edge(self, v: int, w: int) -> bool:
        if not self._adj.add(v, w):
            return False
        self._edge_targets.append(w)
        self._invalidate()
        return True

    def rebind_key(self, old_key: T, new_key: T) -> int:
        """Let *new_key* take over the index (and edges) of *old_key*.

        *old_key* disappears from the graph; every edge into or out of it
        now belongs to *new_key*.  Returns the shared index.  Raises
        InvalidArgumentError if *old_key* is unknown or *new_key* is
        already a vertex.  ReferenceResolver uses this to promote a
        reference key to the real vertex.
        """
        index = self._index.rebind(old_key, new_key)
        self._invalidate()
        return index

    def _invalidate(self) -> None:
        self._dfs.invalidate()
        self._canonical.invalidate()

    # ---- queries ---------------------------------------------------------

    def _index_fail(self, vertex: T) -> int:
        index = self._index.index_of(vertex)
        if index is None:
            raise VertexNotFoundError(vertex)
        return index

    def in_degree(self, vertex: T) -> int:
        return self._adj.in_degree(self._index_fail(vertex))

    def out_degree(self, vertex: T) -> int:
        return self._adj.out_degree(self._index_fail(vertex))

    def successors(self, vertex: T) -> list[T]:
        """Direct successors of *vertex* in insertion order."""
        at = self._index.vertex_at
        return [at(w) for w in self._adj.successors(self._index_fail(vertex))]

    def has_edge(self, src: T, dst: T) -> bool:
        v = self._index.index_of(src)
        w = self._index.index_of(dst)
        return v is not None and w is not None and self._adj.has(v, w)

    def vertices(self) -> Iterator[T]:
        """Vertices in index (first-seen) order."""
        return iter(self._index)

    def edges(self) -> Iterator[tuple[T, T]]:
        """(from, to) pairs, grouped by source in index order."""
        at = self._index.vertex_at
        for v in range(len(self._adj)):
            src = at(v)
            for w in self._adj.successors(v):
                yield src, at(w)

    def edge_targets(self) -> list[T]:
        """Target of every accepted edge, in the order edges were added."""
        at = self._index.vertex_at
        return [at(w) for w in self._edge_targets]

    @property
    def vertex_count(self) -> int:
        return len(self._index)

    @property
    def edge_count(self) -> int:
        return len(self._edge_targets)

    # ---- cycle / topological order ---------------------------------------

    def _run_dfs(self) -> DfsResult:
        result = depth_first(len(self._adj), self._adj.successors)
        log.debug(
            "DFS over %d vertices: %s",
            len(self._adj),
            "cycle found" if result.cycle is not None else "acyclic",
        )
        return result

    def cycle(self) -> list[T] | None:
        """A cycle as a closed walk [v0, ..., v0], or None.

        Self-loops are not reported.
        """
        indices = self._dfs.get().cycle
        if indices is None:
            return None
        at = self._index.vertex_at
        return [at(i) for i in indices]

    def has_cycle(self) -> bool:
        return self._dfs.get().cycle is not None

    def topological_order(self) -> list[T] | None:
        """Reverse DFS postorder of all vertices, or None if there is a cycle."""
        indices = self._dfs.get().reverse_postorder
        if indices is None:
            return None
        at = self._index.vertex_at
        return [at(i) for i in indices]

    # ---- derived graphs --------------------------------------------------

    def reverse(self) -> Digraph[T]:
        """New graph with every edge flipped and the same index assignment."""
        rev: Digraph[T] = Digraph()
        rev._index = self._index.copy()
        rev._adj.grow(len(self._adj))
        for v in range(len(self._adj)):
            for w in self._adj.successors(v):
                rev._add_index_edge(w, v)
        return rev

    def copy(self) -> Digraph[T]:
        clone: Digraph[T] = Digraph()
        clone._index = self._index.copy()
        clone._adj = self._adj.copy()
        clone._edge_targets = list(self._edge_targets)
        # cached values are only ever replaced, never mutated, so sharing is safe
        clone._dfs.seed(self._dfs.state)
        clone._canonical.seed(self._canonical.state)
        return clone

    # ---- structural equality ---------------------------------------------

    def _build_canonical(self) -> Canonical:
        """Vertex -> out-neighbour relation, independent of insertion order."""
        if len(self._adj) != len(self._index):
            raise IllegalStateError(
                f"adjacency holds {len(self._adj)} slots for "
                f"{len(self._index)} indexed vertices"
            )
        at = self._index.vertex_at
        return frozenset(
            (at(v), frozenset(at(w) for w in self._adj.successors(v)))
            for v in range(len(self._adj))
        )

    def structural_equals(self, other: object) -> bool:
        """Same vertices and same edges, regardless of insertion order."""
        if other is self:
            return True
        if not isinstance(other, Digraph):
            return False
        if self.vertex_count != other.vertex_count:
            return False
        if self._index.keys() != other._index.keys():
            return False
        return self._canonical.get() == other._canonical.get()

    def structural_hash(self) -> int:
        return hash(self._canonical.get())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digraph):
            return NotImplemented
        return self.structural_equals(other)

    # mutable, so not hashable; use structural_hash() for a value hash
    __hash__ = None  # type: ignore[assignment]

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Digraph(vertices={self.vertex_count}, edges={self.edge_count})"

    def __str__(self) -> str:
        at = self._index.vertex_at
        lines = []
        for v in range(len(self._adj)):
            targets = "".join(f" {at(w)}" for w in self._adj.successors(v))
            lines.append(f"{at(v)}:{targets}")
        return "\n".join(lines)
