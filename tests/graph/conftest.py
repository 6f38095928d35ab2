"""Shared fixtures for digraph tests."""
from __future__ import annotations

from typing import Hashable

import pytest

from refdigraph.graph.digraph import Digraph

SEED = 42


def make_digraph(*pairs: Hashable) -> Digraph:
    """Build a graph from a flat (v, w, v, w, ...) sequence."""
    if len(pairs) % 2 != 0:
        raise ValueError("pairs must be (v, w) vertex pairs")
    g: Digraph = Digraph()
    for i in range(0, len(pairs), 2):
        g.add_edge(pairs[i], pairs[i + 1])
    return g


@pytest.fixture
def empty_graph() -> Digraph[str]:
    return Digraph()


@pytest.fixture
def linear_graph() -> Digraph[str]:
    """A -> B -> C -> D"""
    return make_digraph("A", "B", "B", "C", "C", "D")


@pytest.fixture
def diamond_graph() -> Digraph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    return make_digraph("A", "B", "A", "C", "B", "D", "C", "D")


@pytest.fixture
def wide_dag() -> Digraph[str]:
    """Root with 10 children, each with 2 grandchildren (all leaves)."""
    g: Digraph[str] = Digraph()
    for i in range(10):
        child = f"L1_{i}"
        g.add_edge("root", child)
        for j in range(2):
            g.add_edge(child, f"L2_{i}_{j}")
    return g


@pytest.fixture
def pipeline_graph() -> Digraph[str]:
    """a->b, b->c, b->d, c->d, c->e, d->e, e->f, e->g, e->h, f->h"""
    return make_digraph(
        "a", "b", "b", "c", "b", "d", "c", "d", "c", "e",
        "d", "e", "e", "f", "e", "g", "e", "h", "f", "h",
    )


@pytest.fixture
def acyclic_int_graph() -> Digraph[int]:
    return make_digraph(
        2, 3, 0, 6, 0, 1, 2, 0, 11, 12, 9, 12, 9, 10, 9, 11,
        3, 5, 8, 7, 5, 4, 0, 5, 6, 4, 6, 9, 7, 6,
    )


@pytest.fixture
def tiny_cyclic_graph() -> Digraph[int]:
    return make_digraph(
        4, 2, 2, 3, 3, 2, 6, 0, 0, 1, 2, 0, 11, 12, 12, 9, 9, 10,
        9, 11, 7, 9, 10, 12, 11, 4, 4, 3, 3, 5, 6, 8, 8, 6, 5, 4,
        0, 5, 6, 4, 6, 9, 7, 6,
    )


@pytest.fixture
def medium_cyclic_graph() -> Digraph[int]:
    """50 vertices with duplicate edges and self-loops (9, 38, 49)."""
    return make_digraph(
        0, 7, 0, 34, 1, 14, 1, 45, 1, 21, 1, 22, 1, 22, 1, 49, 2, 19, 2, 25,
        2, 33, 3, 4, 3, 17, 3, 27, 3, 36, 3, 42, 4, 17, 4, 17, 4, 27, 5, 43,
        6, 13, 6, 13, 6, 28, 6, 28, 7, 41, 7, 44, 8, 19, 8, 48, 9, 9, 9, 11,
        9, 30, 9, 46, 10, 0, 10, 7, 10, 28, 10, 28, 10, 28, 10, 29, 10, 29,
        10, 34, 10, 41, 11, 21, 11, 30, 12, 9, 12, 11, 12, 21, 12, 21, 12, 26,
        13, 22, 13, 23, 13, 47, 14, 8, 14, 21, 14, 48, 15, 8, 15, 34, 15, 49,
        16, 9, 17, 20, 17, 24, 17, 38, 18, 6, 18, 28, 18, 32, 18, 42, 19, 15,
        19, 40, 20, 3, 20, 35, 20, 38, 20, 46, 22, 6, 23, 11, 23, 21, 23, 22,
        24, 4, 24, 5, 24, 38, 24, 43, 25, 2, 25, 34, 26, 9, 26, 12, 26, 16,
        27, 5, 27, 24, 27, 32, 27, 31, 27, 42, 28, 22, 28, 29, 28, 39, 28, 44,
        29, 22, 29, 49, 30, 23, 30, 37, 31, 18, 31, 32, 32, 5, 32, 6, 32, 13,
        32, 37, 32, 47, 33, 2, 33, 8, 33, 19, 34, 2, 34, 19, 34, 40, 35, 9,
        35, 37, 35, 46, 36, 20, 36, 42, 37, 5, 37, 9, 37, 35, 37, 47, 37, 47,
        38, 35, 38, 37, 38, 38, 39, 18, 39, 42, 40, 15, 41, 28, 41, 44, 42, 31,
        43, 37, 43, 38, 44, 39, 45, 8, 45, 14, 45, 14, 45, 15, 45, 49, 46, 16,
        47, 23, 47, 30, 48, 12, 48, 21, 48, 33, 48, 33, 49, 34, 49, 22, 49, 49,
    )
