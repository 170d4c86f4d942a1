"""Lazy reachability traversals.

Each function is a generator over the component reachable from *start*.
Membership of *start* is checked by the calling :class:`Graph` method so
that misuse fails at call time rather than on the first ``next()``.

Neighbours are visited in adjacency insertion order.  Mutating the graph
while a traversal is partially consumed is undefined behaviour.
"""

from __future__ import annotations

from collections.abc import Iterator

from nodegraph.graph.node import Node
from nodegraph.infrastructure.containers import Queue, Stack


def breadth_first[T](start: Node[T]) -> Iterator[Node[T]]:
    """Yield nodes in breadth-first order.

    Nodes are marked visited when scheduled, so the frontier never holds
    the same node twice.
    """
    visited: set[Node[T]] = {start}
    frontier: Queue[Node[T]] = Queue()
    frontier.enqueue(start)
    while frontier.size > 0:
        current = frontier.dequeue()
        yield current
        for neighbour in current.neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                frontier.enqueue(neighbour)


def depth_first[T](start: Node[T]) -> Iterator[Node[T]]:
    """Yield nodes in depth-first order using an explicit stack.

    All unvisited neighbours are scheduled as soon as their parent is
    yielded.  Depth is bounded only by memory, not by the interpreter's
    recursion limit.
    """
    visited: set[Node[T]] = {start}
    frontier: Stack[Node[T]] = Stack()
    frontier.push(start)
    while frontier.size > 0:
        current = frontier.pop()
        yield current
        for neighbour in current.neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                frontier.push(neighbour)


def depth_first_recursive[T](start: Node[T]) -> Iterator[Node[T]]:
    """Yield nodes in depth-first order using nested generators.

    Later siblings are only considered once the subtree of the earlier
    sibling is exhausted.  Raises ``RecursionError`` on paths deeper than
    the interpreter's recursion limit.
    """
    return _descend(start, set())


def _descend[T](current: Node[T], visited: set[Node[T]]) -> Iterator[Node[T]]:
    visited.add(current)
    yield current
    for neighbour in current.neighbours:
        if neighbour not in visited:
            yield from _descend(neighbour, visited)
