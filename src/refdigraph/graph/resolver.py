"""Digraph that accepts edges to vertices which do not exist yet.

Think of a linker or module loader: while reading declarations you
learn that A depends on "the thing called k2" long before the thing
called k2 is itself read.  ReferenceResolver lets you record that edge
now against the *reference key* "k2" and supply the real vertex later.

Every vertex T has a reference key R = deref(T).  Internally all edges
live in one Digraph.  An unresolved key r is stored there wrapped as
_Ref(r), so reference keys and vertex values never share a namespace
even when they compare equal:

  add_vertex(v) / add_edge(v, w)   -- key _Ref(deref(v)), v queued as pending
  add_vertex_ref(r) / add_edge_ref(v, r)
                                   -- key _Ref(r), r queued as pending

Every read first calls resolve(), which walks the pending vertices,
rebinds the index held by _Ref(deref(v)) to v itself (same index, same
edges), and checks off the matching pending references.  A reference
key that no vertex ever claimed makes the read fail with
UnresolvedReferenceError; nothing is silently dropped.

Once a key is resolved, later additions that name it go straight to
the real vertex, so a resolver can be grown and queried in rounds.

Not thread-safe, same as Digraph.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterator, TypeVar

from refdigraph.errors import (
    IllegalStateError,
    InvalidArgumentError,
    UnresolvedReferenceError,
)
from refdigraph.graph.digraph import Digraph

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)
R = TypeVar("R", bound=Hashable)


@dataclass(frozen=True, slots=True)
class _Ref:
    """Placeholder key for a vertex known only by its reference key."""
    key: Hashable

    def __repr__(self) -> str:
        return f"ref({self.key!r})"


class ReferenceResolver(Generic[T, R]):
    """Two-phase digraph: declare edges by reference, resolve on read.

    Args:
        deref: pure function mapping a vertex to its reference key.
            Must return the same key for equal vertices.

    Usage:
        graph = ReferenceResolver(lambda module: module.name)
        graph.add_edge_ref(app, "utils")   # utils not loaded yet
        graph.add_vertex(utils)            # deref(utils) == "utils"
        graph.topological_order()          # [app, utils]
    """

    __slots__ = (
        "_deref",
        "_graph",
        "_pending_vertices",
        "_pending_references",
        "_bindings",
        "_resolved",
    )

    def __init__(self, deref: Callable[[T], R]) -> None:
        self._deref = deref
        self._graph: Digraph[Hashable] = Digraph()
        self._pending_vertices: list[T] = []
        self._pending_references: set[R] = set()
        self._bindings: dict[R, T] = {}
        self._resolved: set[R] = set()

    # ---- key translation -------------------------------------------------

    def _claim(self, vertex: T) -> Hashable:
        """Check that *vertex* may own its reference key.

        Returns the key to use in the underlying graph.  Raises before
        anything is recorded if a different vertex already owns the key.
        """
        ref = self._deref(vertex)
        owner = self._bindings.get(ref)
        if owner is not None and owner != vertex:
            raise InvalidArgumentError(
                f"Reference key {ref!r} of {vertex!r} already belongs to {owner!r}"
            )
        if ref in self._resolved:
            return vertex
        return _Ref(ref)

    def _commit(self, vertex: T) -> None:
        ref = self._deref(vertex)
        self._bindings[ref] = vertex
        if ref not in self._resolved:
            self._pending_vertices.append(vertex)

    def _key_for_ref(self, ref: R) -> Hashable:
        if ref in self._resolved:
            return self._bindings[ref]
        return _Ref(ref)

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: T) -> bool:
        if vertex is None:
            raise InvalidArgumentError("vertex must not be None")
        key = self._claim(vertex)
        self._commit(vertex)
        return self._graph.add_vertex(key)

    def add_vertex_ref(self, ref: R) -> bool:
        """Add a vertex known only by its reference key."""
        if ref is None:
            raise InvalidArgumentError("reference must not be None")
        key = self._key_for_ref(ref)
        if ref not in self._resolved:
            self._pending_references.add(ref)
        return self._graph.add_vertex(key)

    def add_edge(self, src: T, dst: T | None) -> bool:
        if src is None:
            raise InvalidArgumentError("from vertex must not be None")
        if dst is None:
            return self.add_vertex(src)
        src_key = self._claim(src)
        dst_key = self._claim(dst)
        if src != dst and self._deref(src) == self._deref(dst):
            raise InvalidArgumentError(
                f"{src!r} and {dst!r} share the reference key {self._deref(src)!r}"
            )
        self._commit(src)
        self._commit(dst)
        return self._graph.add_edge(src_key, dst_key)

    def add_edge_ref(self, src: T, ref: R | None) -> bool:
        """Add edge src -> (vertex whose reference key is *ref*).

        A None *ref* only adds *src* as a vertex.
        """
        if src is None:
            raise InvalidArgumentError("from vertex must not be None")
        if ref is None:
            return self.add_vertex(src)
        src_key = self._claim(src)
        self._commit(src)
        dst_key = self._key_for_ref(ref)
        if ref not in self._resolved:
            self._pending_references.add(ref)
        return self._graph.add_edge(src_key, dst_key)

    # ---- resolution ------------------------------------------------------

    def resolve(self) -> None:
        """Swap every pending reference key for its real vertex.

        Raises UnresolvedReferenceError if any reference key added via
        add_vertex_ref()/add_edge_ref() has no matching vertex.  Keys that
        did match stay resolved and the pending vertices are consumed, so
        adding the missing vertices and reading again succeeds.
        """
        # plan every rebind before applying any, so a failure leaves no
        # half-resolved state behind
        plan: dict[R, T] = {}
        for vertex in self._pending_vertices:
            ref = self._deref(vertex)
            if ref in self._resolved or ref in plan:
                continue
            if _Ref(ref) not in self._graph or vertex in self._graph:
                raise IllegalStateError(
                    f"Cannot promote reference key {ref!r} to {vertex!r}"
                )
            plan[ref] = vertex

        for ref, vertex in plan.items():
            self._graph.rebind_key(_Ref(ref), vertex)
            self._resolved.add(ref)
        self._pending_references.difference_update(self._resolved)
        self._pending_vertices.clear()
        if plan:
            log.debug("Resolved %d reference key(s)", len(plan))

        if self._pending_references:
            log.debug(
                "%d reference key(s) left unresolved", len(self._pending_references)
            )
            raise UnresolvedReferenceError(self._pending_references)

    def _resolved_graph(self) -> Digraph[T]:
        self.resolve()
        return self._graph  # type: ignore[return-value]

    @property
    def pending_references(self) -> frozenset[R]:
        """Reference keys still waiting for a vertex."""
        return frozenset(self._pending_references)

    # ---- reads (all resolve first) ---------------------------------------

    def edges(self) -> Iterator[tuple[T, T]]:
        return self._resolved_graph().edges()

    def edge_targets(self) -> list[T]:
        return self._resolved_graph().edge_targets()

    def in_degree(self, vertex: T) -> int:
        return self._resolved_graph().in_degree(vertex)

    def out_degree(self, vertex: T) -> int:
        return self._resolved_graph().out_degree(vertex)

    def successors(self, vertex: T) -> list[T]:
        return self._resolved_graph().successors(vertex)

    def has_edge(self, src: T, dst: T) -> bool:
        return self._resolved_graph().has_edge(src, dst)

    def vertices(self) -> Iterator[T]:
        return self._resolved_graph().vertices()

    def cycle(self) -> list[T] | None:
        return self._resolved_graph().cycle()

    def has_cycle(self) -> bool:
        return self._resolved_graph().has_cycle()

    def topological_order(self) -> list[T] | None:
        return self._resolved_graph().topological_order()

    def reverse(self) -> Digraph[T]:
        return self._resolved_graph().reverse()

    def to_digraph(self) -> Digraph[T]:
        """Detached copy of the resolved graph."""
        return self._resolved_graph().copy()

    # ---- copy / equality -------------------------------------------------

    def copy(self) -> ReferenceResolver[T, R]:
        """Independent copy, pending references included.  Does not resolve."""
        clone: ReferenceResolver[T, R] = ReferenceResolver(self._deref)
        clone._graph = self._graph.copy()
        clone._pending_vertices = list(self._pending_vertices)
        clone._pending_references = set(self._pending_references)
        clone._bindings = dict(self._bindings)
        clone._resolved = set(self._resolved)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceResolver):
            return NotImplemented
        if other is self:
            return True
        return (
            self._deref == other._deref
            and frozenset(self._pending_vertices) == frozenset(other._pending_vertices)
            and self._pending_references == other._pending_references
            and self._resolved == other._resolved
            and self._graph == other._graph
        )

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    # ---- dunder ----------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of indexed keys, resolved or not.  Does not resolve."""
        return self._graph.vertex_count

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"ReferenceResolver(vertices={self.vertex_count}, "
            f"pending_references={len(self._pending_references)})"
        )

    def __str__(self) -> str:
        """Adjacency dump; unresolved keys show as ref(key).  Does not resolve."""
        return str(self._graph)
