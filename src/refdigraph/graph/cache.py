"""A lazily computed value that a structural change marks stale.

The cell is always in one of two states:

  Stale        -- nothing cached; the next get() recomputes
  Fresh(value) -- get() returns value without recomputing

invalidate() moves it back to Stale.  Digraph keeps one cell per
derived result (DFS outcome, canonical adjacency) and invalidates all
of them on every accepted edge.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


class _Stale:
    __slots__ = ()

    def __repr__(self) -> str:
        return "Stale"


STALE = _Stale()


@dataclass(frozen=True, slots=True)
class Fresh(Generic[V]):
    value: V


class LazyCell(Generic[V]):
    """Memoizes *compute()* until invalidated."""

    __slots__ = ("_compute", "_state")

    def __init__(self, compute: Callable[[], V]) -> None:
        self._compute = compute
        self._state: Fresh[V] | _Stale = STALE

    def get(self) -> V:
        if isinstance(self._state, Fresh):
            return self._state.value
        value = self._compute()
        self._state = Fresh(value)
        return value

    def invalidate(self) -> None:
        self._state = STALE

    def seed(self, state: Fresh[V] | _Stale) -> None:
        """Adopt another cell's state (used when copying a graph)."""
        self._state = state

    @property
    def state(self) -> Fresh[V] | _Stale:
        return self._state
