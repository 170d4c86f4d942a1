"""A* heuristics.

A heuristic is any callable ``(node, target) -> number`` estimating the
remaining distance from *node* to *target*.  The search rejects negative
estimates; admissibility (never overestimating) is the caller's concern.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from nodegraph.graph.node import Node


class Heuristic[T](Protocol):
    def __call__(self, node: Node[T], target: Node[T], /) -> int | float: ...


def zero_heuristic[T](node: Node[T], target: Node[T]) -> int:
    """Always estimate 0.  A* with this heuristic is exactly Dijkstra."""
    return 0


def table_heuristic[T](estimates: Mapping[Node[T], int | float]) -> Heuristic[T]:
    """Build a heuristic from precomputed per-node estimates.

    The estimates are assumed to be relative to a single target; nodes
    missing from *estimates* are estimated at 0.
    """

    def heuristic(node: Node[T], target: Node[T]) -> int | float:
        return estimates.get(node, 0)

    return heuristic
