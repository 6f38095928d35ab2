"""Bidirectional vertex <-> dense integer index mapping.

Indices are handed out in first-seen order starting at 0.  They are
never removed or reused, so the index space is always range(len(self)).
The only way a key changes is rebind(), which swaps the key held by an
existing index without moving it; the reference resolver uses that to
replace a placeholder key with the real vertex.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

from refdigraph.errors import InvalidArgumentError

T = TypeVar("T", bound=Hashable)


class VertexIndex(Generic[T]):
    """Append-only bijection between vertices and 0..n-1."""

    __slots__ = ("_index_of", "_vertex_of")

    def __init__(self) -> None:
        self._index_of: dict[T, int] = {}
        self._vertex_of: list[T] = []

    def get_or_create(self, vertex: T) -> tuple[int, bool]:
        """Return (index, created) for *vertex*."""
        index = self._index_of.get(vertex)
        if index is not None:
            return index, False
        index = len(self._vertex_of)
        self._index_of[vertex] = index
        self._vertex_of.append(vertex)
        return index, True

    def index_of(self, vertex: T) -> int | None:
        return self._index_of.get(vertex)

    def vertex_at(self, index: int) -> T:
        return self._vertex_of[index]

    def rebind(self, old_key: T, new_key: T) -> int:
        """Move the index held by *old_key* over to *new_key*.

        Returns the index.  Raises InvalidArgumentError if *old_key* has
        no index or *new_key* already has one.
        """
        if new_key in self._index_of:
            raise InvalidArgumentError(f"Key {new_key!r} is already indexed")
        index = self._index_of.pop(old_key, None)
        if index is None:
            raise InvalidArgumentError(f"Key {old_key!r} is not indexed")
        self._index_of[new_key] = index
        self._vertex_of[index] = new_key
        return index

    def copy(self) -> VertexIndex[T]:
        clone: VertexIndex[T] = VertexIndex()
        clone._index_of = dict(self._index_of)
        clone._vertex_of = list(self._vertex_of)
        return clone

    def keys(self) -> frozenset[T]:
        return frozenset(self._index_of)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index_of

    def __iter__(self) -> Iterator[T]:
        return iter(self._vertex_of)

    def __len__(self) -> int:
        return len(self._vertex_of)
