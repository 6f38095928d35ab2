"""Single-pass depth-first search yielding a cycle or a topological order.

One traversal produces both answers, so cycle() and topological_order()
can never disagree:

  marked    -- vertex has been reached
  on_stack  -- vertex is on the current DFS path
  edge_to   -- predecessor on the DFS tree, used to rebuild a cycle

Roots are tried in ascending index order and successors in insertion
order, which makes both results deterministic for a given insertion
history.  An edge to a vertex that is on the stack is a back edge and
closes a cycle.  The guard ``w != v`` means a self-loop is never
reported as a cycle; a graph whose only cycles are self-loops still has
a topological order.

The traversal keeps an explicit stack of (vertex, successor iterator)
pairs rather than recursing, so long chains do not run into the
interpreter's recursion limit.  It visits vertices in exactly the order
the recursive formulation would.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(frozen=True, slots=True)
class DfsResult:
    """Outcome of one DFS pass over index space.

    Exactly one of the two fields is set.  ``cycle`` is a closed walk of
    indices (first == last); ``reverse_postorder`` is a topological order
    of every index.
    """
    cycle: list[int] | None
    reverse_postorder: list[int] | None


def depth_first(
    size: int, successors: Callable[[int], Iterator[int]]
) -> DfsResult:
    """Run DFS over indices 0..size-1."""
    marked = bytearray(size)
    on_stack = bytearray(size)
    edge_to = [0] * size
    postorder: list[int] = []

    for root in range(size):
        if marked[root]:
            continue
        marked[root] = on_stack[root] = 1
        stack: list[tuple[int, Iterator[int]]] = [(root, successors(root))]
        while stack:
            v, it = stack[-1]
            for w in it:
                if not marked[w]:
                    edge_to[w] = v
                    marked[w] = on_stack[w] = 1
                    stack.append((w, successors(w)))
                    break
                if v != w and on_stack[w]:
                    return DfsResult(cycle=_close_cycle(edge_to, v, w), reverse_postorder=None)
            else:
                stack.pop()
                on_stack[v] = 0
                postorder.append(v)

    postorder.reverse()
    return DfsResult(cycle=None, reverse_postorder=postorder)


def _close_cycle(edge_to: list[int], v: int, w: int) -> list[int]:
    """Walk back from v to w, then close the loop with w and v."""
    cycle: list[int] = []
    x = v
    while x != w:
        cycle.append(x)
        x = edge_to[x]
    cycle.append(w)
    cycle.append(v)
    return cycle
