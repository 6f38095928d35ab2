"""Directed graphs with cycle detection, topological order and forward references."""

from refdigraph.graph.adjacency import AdjacencyStore
from refdigraph.graph.cache import Fresh, LazyCell, STALE
from refdigraph.graph.dfs import DfsResult, depth_first
from refdigraph.graph.digraph import Digraph
from refdigraph.graph.index import VertexIndex
from refdigraph.graph.resolver import ReferenceResolver
from refdigraph.graph.topological import (
    CycleResult,
    find_cycle,
    topological_sort,
)

__all__ = [
    "AdjacencyStore",
    "CycleResult",
    "DfsResult",
    "Digraph",
    "Fresh",
    "LazyCell",
    "ReferenceResolver",
    "STALE",
    "VertexIndex",
    "depth_first",
    "find_cycle",
    "topological_sort",
]
