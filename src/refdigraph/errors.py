"""Exceptions raised by the digraph engine.

Every error derives from DigraphError so callers can catch the whole
family at once.  The concrete classes also inherit from the closest
builtin (ValueError, LookupError, RuntimeError) so code that already
catches those keeps working.
"""
from __future__ import annotations

from typing import Hashable, Iterable


class DigraphError(Exception):
    """Root exception for refdigraph."""


class InvalidArgumentError(DigraphError, ValueError):
    """Raised when an argument can never be valid, e.g. a None vertex."""


class VertexNotFoundError(DigraphError, LookupError):
    """Raised when querying a vertex that was never added."""

    def __init__(self, vertex: object) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not exist in this digraph")


class UnresolvedReferenceError(DigraphError):
    """Raised when reference keys were never matched by a real vertex.

    The keys are listed in the message sorted by their text form so the
    message is stable across runs.
    """

    def __init__(self, references: Iterable[Hashable]) -> None:
        self.references = frozenset(references)
        names = ", ".join(sorted(str(r) for r in self.references))
        super().__init__(
            f"Vertices with the following reference keys have not been "
            f"specified: {names}"
        )


class IllegalStateError(DigraphError, RuntimeError):
    """Internal invariant violated.  Indicates a bug, not bad input."""


class CyclicDependencyError(DigraphError):
    """Raised when a topological order is demanded from a cyclic graph."""

    def __init__(self, cycle: list) -> None:
        self.cycle = cycle
        path = " -> ".join(repr(v) for v in cycle)
        super().__init__(f"Cycle detected: {path}")
