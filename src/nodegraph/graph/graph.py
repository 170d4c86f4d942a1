"""Graph — node-centric directed/undirected, weighted/unweighted graph.

The graph owns its nodes (kept in an insertion-ordered dict used as a
set) and is the only writer of their adjacency maps.  Structural rules:

* at most one edge from A to B, and never A to A;
* undirected edges are stored as the symmetric pair A->B, B->A with equal
  weight and counted once in :attr:`Graph.edges_count`;
* on a positive-edges-only graph every weight is >= 1.

Every operation validates its arguments before touching any state, so a
raised :class:`~nodegraph.domain.errors.GraphError` leaves the graph
exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, KeysView, Mapping
from types import MappingProxyType

from nodegraph.domain.errors import (
    DuplicateEdgeError,
    EdgeKindError,
    EdgeWeightError,
    GraphConfigurationError,
    MissingEdgeError,
    NodeMembershipError,
    SelfLoopError,
)
from nodegraph.graph import search, traversal
from nodegraph.graph.heuristics import Heuristic
from nodegraph.graph.node import Node
from nodegraph.graph.search import Distance

logger = logging.getLogger(__name__)


class Graph[T]:
    """A graph whose configuration is fixed at construction.

    Args:
        directed: Edges are one-way when True, symmetric pairs otherwise.
        weighted: Edges carry explicit integer weights when True; otherwise
            every edge has weight 1.
        positive_edges_only: Reject weights below 1.  Must be True for an
            unweighted graph.

    Raises:
        GraphConfigurationError: ``weighted`` is False but
            ``positive_edges_only`` is also False.
    """

    def __init__(
        self,
        *,
        directed: bool = True,
        weighted: bool = True,
        positive_edges_only: bool = True,
    ) -> None:
        if not weighted and not positive_edges_only:
            raise GraphConfigurationError(
                "positive_edges_only cannot be False when weighted is False."
            )
        self._directed = directed
        self._weighted = weighted
        self._positive_edges_only = positive_edges_only
        self._nodes: dict[Node[T], None] = {}
        self._edges_count = 0

    # ------------------------------------------------------------------
    # Configuration and state
    # ------------------------------------------------------------------

    @property
    def is_directed(self) -> bool:
        return self._directed

    @property
    def is_weighted(self) -> bool:
        return self._weighted

    @property
    def positive_edges_only(self) -> bool:
        return self._positive_edges_only

    @property
    def nodes_count(self) -> int:
        return len(self._nodes)

    @property
    def edges_count(self) -> int:
        return self._edges_count

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, weighted={self._weighted}, "
            f"positive_edges_only={self._positive_edges_only}, "
            f"nodes={self.nodes_count}, edges={self._edges_count})"
        )

    def nodes(self) -> KeysView[Node[T]]:
        """Read-only live view of the owned nodes."""
        return self._nodes.keys()

    def contains(self, node: Node[T]) -> bool:
        return node in self._nodes

    def contains_edge(self, node1: Node[T], node2: Node[T]) -> bool:
        """True when both nodes are members and an edge node1 -> node2 exists."""
        return node1 in self._nodes and node2 in self._nodes and node2 in node1.neighbours

    def neighbours(self, node: Node[T]) -> Mapping[Node[T], int]:
        """Read-only view of *node*'s adjacency map (neighbour -> weight)."""
        self._require_member(node)
        return MappingProxyType(node.neighbours)

    def edge_weight(self, node1: Node[T], node2: Node[T]) -> int:
        self._require_member(node1, "first")
        self._require_member(node2, "second")
        if node2 not in node1.neighbours:
            raise MissingEdgeError("There is no edge from the first node to the second in the graph.")
        return node1.neighbours[node2]

    def _require_member(self, node: Node[T], role: str = "") -> None:
        if node not in self._nodes:
            label = f"The {role} node" if role else "The node"
            raise NodeMembershipError(f"{label} is not in the graph.")

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, value: T) -> Node[T]:
        """Create, register and return a new node carrying *value*."""
        if value is None:
            raise ValueError("Node values must not be None.")
        node = Node(value)
        self._nodes[node] = None
        return node

    def set_value(self, node: Node[T], value: T) -> None:
        """Replace *node*'s payload."""
        self._require_member(node)
        if value is None:
            raise ValueError("Node values must not be None.")
        node.value = value

    def remove_node(self, node: Node[T]) -> None:
        """Remove *node* and every edge touching it.

        Incoming edges are found by scanning every other node, so this is
        O(n) on average.  For undirected graphs the incoming scan already
        covers each edge once; outgoing entries are only subtracted for
        directed graphs.
        """
        self._require_member(node)
        removed = 0
        for other in self._nodes:
            if node in other.neighbours:
                del other.neighbours[node]
                removed += 1
        if self._directed:
            removed += len(node.neighbours)
        node.neighbours.clear()
        del self._nodes[node]
        self._edges_count -= removed
        logger.debug("Removed node %r with %d edges", node, removed)

    def clear(self) -> None:
        """Drop every node and edge."""
        self._nodes.clear()
        self._edges_count = 0

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_weighted_edge(self, node1: Node[T], node2: Node[T], weight: int) -> None:
        """Add an edge node1 -> node2 (and its mirror if undirected).

        Raises:
            EdgeKindError: The graph is unweighted.
            EdgeWeightError: *weight* < 1 on a positive-edges-only graph.
            SelfLoopError, DuplicateEdgeError, NodeMembershipError
        """
        if not self._weighted:
            raise EdgeKindError("This graph is not weighted.")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"Edge weights must be integers, not {type(weight).__name__}.")
        self._check_new_edge(node1, node2)
        if weight < 1 and self._positive_edges_only:
            raise EdgeWeightError("This graph supports positive edge weights only.")
        self._check_not_duplicate(node1, node2)
        self._link(node1, node2, weight)

    def add_unweighted_edge(self, node1: Node[T], node2: Node[T]) -> None:
        """Add an edge node1 -> node2 with implicit weight 1.

        Raises:
            EdgeKindError: The graph is weighted.
            SelfLoopError, DuplicateEdgeError, NodeMembershipError
        """
        if self._weighted:
            raise EdgeKindError("This graph is weighted.")
        self._check_new_edge(node1, node2)
        self._check_not_duplicate(node1, node2)
        self._link(node1, node2, 1)

    def remove_edge(self, node1: Node[T], node2: Node[T]) -> None:
        """Remove the edge node1 -> node2 (and its mirror if undirected)."""
        self._require_member(node1, "first")
        self._require_member(node2, "second")
        if node2 not in node1.neighbours:
            raise MissingEdgeError("There is no edge from the first node to the second in the graph.")
        del node1.neighbours[node2]
        if not self._directed:
            del node2.neighbours[node1]
        self._edges_count -= 1

    def _check_new_edge(self, node1: Node[T], node2: Node[T]) -> None:
        if node1 is node2:
            raise SelfLoopError("Self-loops are not allowed.")
        self._require_member(node1, "first")
        self._require_member(node2, "second")

    def _check_not_duplicate(self, node1: Node[T], node2: Node[T]) -> None:
        if node2 in node1.neighbours:
            raise DuplicateEdgeError(
                "There is already an edge from that start node to that end node."
            )

    def _link(self, node1: Node[T], node2: Node[T], weight: int) -> None:
        node1.neighbours[node2] = weight
        if not self._directed:
            node2.neighbours[node1] = weight
        self._edges_count += 1

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def bfs(self, start: Node[T]) -> Iterator[Node[T]]:
        """Lazily yield every node reachable from *start*, breadth first."""
        self._require_member(start, "start")
        return traversal.breadth_first(start)

    def dfs(self, start: Node[T]) -> Iterator[Node[T]]:
        """Lazily yield every node reachable from *start*, depth first."""
        self._require_member(start, "start")
        return traversal.depth_first(start)

    def dfs_recursive(self, start: Node[T]) -> Iterator[Node[T]]:
        """Depth-first traversal by recursion; bounded by the recursion limit."""
        self._require_member(start, "start")
        return traversal.depth_first_recursive(start)

    # ------------------------------------------------------------------
    # Shortest paths (Dijkstra)
    # ------------------------------------------------------------------

    def _search_pair(self, source: Node[T], target: Node[T]) -> search.ShortestPathTree[T]:
        self._require_member(source, "start")
        self._require_member(target, "end")
        return search.dijkstra(self, source)

    def shortest_distance(self, source: Node[T], target: Node[T]) -> int:
        """Length of the shortest path from *source* to *target*.

        Raises:
            UnreachableNodeError: *target* cannot be reached.
        """
        return self._search_pair(source, target).distance_to(target)

    def all_shortest_distances(self, source: Node[T]) -> dict[Node[T], Distance]:
        """Shortest distance to every node; unreachable nodes map to ``math.inf``."""
        return search.dijkstra(self, source).distances

    def shortest_path(self, source: Node[T], target: Node[T]) -> Iterator[Node[T]]:
        """Lazily yield the nodes of a shortest path, *source* to *target* inclusive.

        The search runs when this is called; each call returns a fresh
        iterator.
        """
        return self._search_pair(source, target).iter_path(target)

    def all_shortest_paths(self, source: Node[T]) -> dict[Node[T], list[Node[T]]]:
        """Map every node reachable from *source* to its shortest path."""
        return search.dijkstra(self, source).all_paths()

    # ------------------------------------------------------------------
    # Shortest paths (A*)
    # ------------------------------------------------------------------

    def astar_distance(
        self, source: Node[T], target: Node[T], heuristic: Heuristic[T]
    ) -> int:
        """Shortest distance from *source* to *target* found by A*."""
        return search.astar(self, source, target, heuristic).distance_to(target)

    def astar_path(
        self, source: Node[T], target: Node[T], heuristic: Heuristic[T]
    ) -> Iterator[Node[T]]:
        """Lazily yield the nodes of the path found by A*."""
        return search.astar(self, source, target, heuristic).iter_path(target)
