"""refdigraph: directed graphs with deferred reference resolution.

Re-exports the public API for convenient access:
    from refdigraph import Digraph, ReferenceResolver, topological_sort
"""
from refdigraph.errors import (
    CyclicDependencyError,
    DigraphError,
    IllegalStateError,
    InvalidArgumentError,
    UnresolvedReferenceError,
    VertexNotFoundError,
)
from refdigraph.graph import (
    CycleResult,
    Digraph,
    ReferenceResolver,
    find_cycle,
    topological_sort,
)

__all__ = [
    "CycleResult",
    "CyclicDependencyError",
    "Digraph",
    "DigraphError",
    "IllegalStateError",
    "InvalidArgumentError",
    "ReferenceResolver",
    "UnresolvedReferenceError",
    "VertexNotFoundError",
    "find_cycle",
    "topological_sort",
]
