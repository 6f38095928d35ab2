"""Shared fixtures for reference resolver tests."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from refdigraph.graph.resolver import ReferenceResolver


@dataclass(frozen=True)
class Obj:
    """A declaration that names itself and (optionally) its parent."""
    id: str
    parent_id: str | None = None

    def __repr__(self) -> str:
        return f"{self.id}->{self.parent_id}"


def by_id(obj: Obj) -> str:
    return obj.id


@pytest.fixture
def resolver() -> ReferenceResolver[Obj, str]:
    return ReferenceResolver(by_id)


def declare(graph: ReferenceResolver[Obj, str], *objs: Obj) -> None:
    """Add each object with an edge to its parent's reference key."""
    for obj in objs:
        graph.add_edge_ref(obj, obj.parent_id)
