"""Single-source shortest-path search: Dijkstra (two variants) and A*.

All searches return a :class:`ShortestPathTree` holding a distance map
over every node of the graph (``math.inf`` for unreachable nodes) and a
predecessor map over every reached node.  The source is its own
predecessor, so "is the source", "reached" and "unreachable" (absent from
the map) are all distinguishable.

The priority-queue searches never decrease a key in place: each
improvement enqueues a fresh ``(node, distance)`` entry and entries whose
recorded distance exceeds the live best distance are skipped as stale.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nodegraph.domain.errors import (
    HeuristicError,
    NodeMembershipError,
    SearchPreconditionError,
    UnreachableNodeError,
)
from nodegraph.graph.node import Node
from nodegraph.infrastructure.containers import MinPriorityQueue, Stack

if TYPE_CHECKING:
    from nodegraph.graph.graph import Graph
    from nodegraph.graph.heuristics import Heuristic

logger = logging.getLogger(__name__)

INFINITY = math.inf

type Distance = int | float


@dataclass
class SearchStats:
    """Work counters for one search run."""

    enqueued: int = 0
    settled: int = 0
    stale: int = 0
    relaxed: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "enqueued": self.enqueued,
            "settled": self.settled,
            "stale": self.stale,
            "relaxed": self.relaxed,
        }


@dataclass
class ShortestPathTree[T]:
    """Result of a single-source search.

    Attributes:
        source: The node the search started from.
        distances: Best known distance to every node of the graph.
        predecessors: Previous node on a shortest path, for every reached
            node.  ``predecessors[source] is source``.
        stats: Work counters collected during the search.
    """

    source: Node[T]
    distances: dict[Node[T], Distance]
    predecessors: dict[Node[T], Node[T]]
    stats: SearchStats = field(default_factory=SearchStats)

    def reachable(self, node: Node[T]) -> bool:
        return node in self.predecessors

    def distance_to(self, target: Node[T]) -> int:
        """Return the shortest distance to *target*.

        Raises:
            UnreachableNodeError: No path from the source reaches *target*.
        """
        distance = self.distances.get(target, INFINITY)
        if distance == INFINITY:
            raise UnreachableNodeError("There is no path from the start node to the end node.")
        return int(distance)

    def iter_path(self, target: Node[T]) -> Iterator[Node[T]]:
        """Yield the nodes of the path from the source to *target*, inclusive.

        The predecessor chain is walked backwards onto a stack when the
        first element is requested, then popped in source-to-target order.
        """
        if not self.reachable(target):
            raise UnreachableNodeError("There is no path from the start node to the end node.")
        return self._unwind(target)

    def path_to(self, target: Node[T]) -> list[Node[T]]:
        return list(self.iter_path(target))

    def all_paths(self) -> dict[Node[T], list[Node[T]]]:
        """Full path to every reached node, including the source itself."""
        return {node: self.path_to(node) for node in self.predecessors}

    def _unwind(self, target: Node[T]) -> Iterator[Node[T]]:
        chain: Stack[Node[T]] = Stack()
        current = target
        while current is not self.source:
            chain.push(current)
            current = self.predecessors[current]
        chain.push(self.source)
        while chain.size > 0:
            yield chain.pop()


# ── Preconditions ────────────────────────────────────────────────────


def check_searchable[T](graph: Graph[T], source: Node[T]) -> None:
    """Raise unless *graph* supports shortest-path search from *source*."""
    if source not in graph:
        raise NodeMembershipError("The start node is not in the graph.")
    if not graph.is_weighted:
        raise SearchPreconditionError("The graph must be weighted (it is not).")
    if not graph.positive_edges_only:
        raise SearchPreconditionError(
            "Shortest-path search cannot execute correctly if non-positive "
            "edge weights are allowed (they are)."
        )


def _initial_maps[T](
    graph: Graph[T], source: Node[T]
) -> tuple[dict[Node[T], Distance], dict[Node[T], Node[T]]]:
    distances: dict[Node[T], Distance] = dict.fromkeys(graph.nodes(), INFINITY)
    distances[source] = 0
    return distances, {source: source}


# ── Dijkstra ─────────────────────────────────────────────────────────


def dijkstra_naive[T](graph: Graph[T], source: Node[T]) -> ShortestPathTree[T]:
    """Dijkstra with a linear scan for the closest unvisited node.

    O(V^2): every iteration scans the whole unvisited set.
    """
    check_searchable(graph, source)
    distances, predecessors = _initial_maps(graph, source)
    stats = SearchStats()
    unvisited: dict[Node[T], None] = dict.fromkeys(graph.nodes())

    while unvisited:
        current: Node[T] | None = None
        lowest: Distance = INFINITY
        for node in unvisited:
            if distances[node] < lowest:
                lowest = distances[node]
                current = node
        if current is None:
            break

        stats.settled += 1
        for neighbour, weight in current.neighbours.items():
            candidate = lowest + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = current
                stats.relaxed += 1
        del unvisited[current]

    logger.debug(
        "Naive Dijkstra from %r settled %d of %d nodes",
        source,
        stats.settled,
        len(distances),
    )
    return ShortestPathTree(source, distances, predecessors, stats)


def dijkstra[T](graph: Graph[T], source: Node[T]) -> ShortestPathTree[T]:
    """Dijkstra driven by a min-priority queue with lazy deletion.

    O(E log V): one enqueue per successful relaxation plus the seed.
    """
    check_searchable(graph, source)
    distances, predecessors = _initial_maps(graph, source)
    stats = SearchStats()
    frontier: MinPriorityQueue[tuple[Node[T], Distance]] = MinPriorityQueue()
    frontier.enqueue((source, 0), 0)
    stats.enqueued += 1

    while frontier.size > 0:
        current, distance = frontier.dequeue()
        if distance > distances[current]:
            stats.stale += 1
            continue

        stats.settled += 1
        for neighbour, weight in current.neighbours.items():
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = current
                frontier.enqueue((neighbour, candidate), candidate)
                stats.relaxed += 1
                stats.enqueued += 1

    logger.debug(
        "Dijkstra from %r settled %d nodes, skipped %d stale entries",
        source,
        stats.settled,
        stats.stale,
    )
    return ShortestPathTree(source, distances, predecessors, stats)


# ── A* ───────────────────────────────────────────────────────────────


def _estimate[T](heuristic: Heuristic[T], node: Node[T], target: Node[T]) -> Distance:
    value = heuristic(node, target)
    if value < 0:
        raise HeuristicError(f"Heuristic must be non-negative (got {value!r} for {node!r}).")
    return value


def astar[T](
    graph: Graph[T],
    source: Node[T],
    target: Node[T],
    heuristic: Heuristic[T],
) -> ShortestPathTree[T]:
    """A* search from *source* towards *target*.

    Queue priority is ``g + h`` while staleness is judged on ``g`` alone.
    The search stops as soon as *target* is dequeued, so only the entry
    for *target* is guaranteed final in the returned distance map.

    Raises:
        HeuristicError: *heuristic* returned a negative estimate.
    """
    check_searchable(graph, source)
    if target not in graph:
        raise NodeMembershipError("The end node is not in the graph.")

    distances, predecessors = _initial_maps(graph, source)
    stats = SearchStats()
    frontier: MinPriorityQueue[tuple[Node[T], Distance]] = MinPriorityQueue()
    frontier.enqueue((source, 0), _estimate(heuristic, source, target))
    stats.enqueued += 1

    while frontier.size > 0:
        current, distance = frontier.dequeue()
        if current is target:
            stats.settled += 1
            break
        if distance > distances[current]:
            stats.stale += 1
            continue

        stats.settled += 1
        for neighbour, weight in current.neighbours.items():
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = current
                priority = candidate + _estimate(heuristic, neighbour, target)
                frontier.enqueue((neighbour, candidate), priority)
                stats.relaxed += 1
                stats.enqueued += 1

    logger.debug(
        "A* from %r to %r settled %d nodes, skipped %d stale entries",
        source,
        target,
        stats.settled,
        stats.stale,
    )
    return ShortestPathTree(source, distances, predecessors, stats)
