"""Raising wrappers around Digraph's cached DFS results.

Digraph.topological_order() returns None for a cyclic graph, which
suits callers that branch on the outcome.  Callers that treat a cycle
as a hard failure (a build step that must have an order, a loader that
must not see circular imports) use topological_sort() instead and get a
CyclicDependencyError carrying the offending cycle.

Works on anything exposing cycle() and topological_order(), so a
ReferenceResolver can be passed directly; it resolves before answering.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Protocol, TypeVar

from refdigraph.errors import CyclicDependencyError, IllegalStateError

T = TypeVar("T", bound=Hashable)


class Orderable(Protocol[T]):
    def cycle(self) -> list[T] | None: ...

    def topological_order(self) -> list[T] | None: ...


@dataclass(slots=True)
class CycleResult(Generic[T]):
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[T] | None = None


def find_cycle(graph: Orderable[T]) -> CycleResult[T]:
    """Report whether *graph* has a cycle (self-loops excluded).

    The cycle path is [v0, v1, ..., vk, v0] where each consecutive pair
    is a directed edge.
    """
    path = graph.cycle()
    return CycleResult(has_cycle=path is not None, cycle_path=path)


def topological_sort(graph: Orderable[T]) -> list[T]:
    """Return vertices so every edge points forward in the list.

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    order = graph.topological_order()
    if order is not None:
        return order
    cycle = graph.cycle()
    if cycle is None:
        raise IllegalStateError("DFS produced neither an order nor a cycle")
    raise CyclicDependencyError(cycle)
