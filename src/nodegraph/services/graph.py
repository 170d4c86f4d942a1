"""GraphService — label-addressed graph building and queries.

Builds a ``Graph[str]`` from textual edge specifications (``"A:B"`` or
``"A:B:3"``) and answers traversal and shortest-path queries by label.
Engine exceptions are translated into failed ServiceResults carrying the
exception's stable code.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Sequence
from typing import Any

from nodegraph.config.models import GraphConfig
from nodegraph.domain.errors import GraphError, NodeMembershipError
from nodegraph.domain.specs import EdgeSpec, parse_edge_spec, parse_estimate
from nodegraph.domain.types import DijkstraVariant, TraversalOrder
from nodegraph.graph import search
from nodegraph.graph.graph import Graph
from nodegraph.graph.heuristics import table_heuristic
from nodegraph.graph.node import Node
from nodegraph.services.result import ServiceError, ServiceResult
from nodegraph.services.telemetry import stage, traced

logger = logging.getLogger(__name__)


def _failed(op: str, exc: GraphError, **detail: Any) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))


def _invalid(op: str, code: str, exc: ValueError) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=str(exc)))


class GraphService:
    """Handles graph construction and queries for one in-memory graph.

    Usage::

        svc = GraphService(GraphConfig(directed=False, weighted=False))
        svc.load(["X:Y", "Y:Z"])
        svc.traverse("X")
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        config = config or GraphConfig()
        self._graph: Graph[str] = Graph(
            directed=config.directed,
            weighted=config.weighted,
            positive_edges_only=config.positive_edges_only,
        )
        self._labels: dict[str, Node[str]] = {}

    @property
    def graph(self) -> Graph[str]:
        return self._graph

    def node(self, label: str) -> Node[str]:
        """Return the node for *label*, raising NodeMembershipError if unknown."""
        try:
            return self._labels[label]
        except KeyError:
            raise NodeMembershipError(f"Node '{label}' not found in graph") from None

    def _ensure(self, label: str, created: list[str]) -> Node[str]:
        node = self._labels.get(label)
        if node is None:
            node = self._graph.add_node(label)
            self._labels[label] = node
            created.append(label)
        return node

    def _labelled(self, nodes: Sequence[Node[str]]) -> list[str]:
        return [n.value for n in nodes]

    # ------------------------------------------------------------------
    # load: build the graph from specifications
    # ------------------------------------------------------------------

    @traced
    def load(self, edges: Sequence[str], nodes: Sequence[str] = ()) -> ServiceResult:
        """Add *nodes* (isolated labels) and *edges* to the graph.

        All-or-nothing: if any specification is invalid or violates an
        edge rule, the nodes and edges added by this call are removed and
        the graph is left as it was before the call.
        """
        try:
            specs = [parse_edge_spec(text) for text in edges]
        except ValueError as exc:
            return _invalid("load", "INVALID_EDGE_SPEC", exc)

        created: list[str] = []
        linked: list[tuple[Node[str], Node[str]]] = []
        try:
            for label in nodes:
                self._ensure(label, created)
            for spec in specs:
                linked.append(self._add_edge(spec, created))
        except GraphError as exc:
            self._rollback(created, linked)
            return _failed("load", exc)

        logger.debug(
            "Loaded graph with %d nodes and %d edges",
            self._graph.nodes_count,
            self._graph.edges_count,
        )
        return ServiceResult(
            ok=True,
            op="load",
            data={
                "nodes": self._graph.nodes_count,
                "edges": self._graph.edges_count,
                "directed": self._graph.is_directed,
                "weighted": self._graph.is_weighted,
            },
        )

    def _add_edge(self, spec: EdgeSpec, created: list[str]) -> tuple[Node[str], Node[str]]:
        source = self._ensure(spec.source, created)
        target = self._ensure(spec.target, created)
        if spec.weight is not None:
            self._graph.add_weighted_edge(source, target, spec.weight)
        elif self._graph.is_weighted:
            self._graph.add_weighted_edge(source, target, 1)
        else:
            self._graph.add_unweighted_edge(source, target)
        return source, target

    def _rollback(self, created: list[str], linked: list[tuple[Node[str], Node[str]]]) -> None:
        for source, target in reversed(linked):
            self._graph.remove_edge(source, target)
        for label in reversed(created):
            self._graph.remove_node(self._labels.pop(label))
        logger.debug("Rolled back %d edges and %d nodes", len(linked), len(created))

    # ------------------------------------------------------------------
    # traverse: BFS / DFS
    # ------------------------------------------------------------------

    @traced
    def traverse(
        self,
        start: str,
        *,
        order: TraversalOrder = TraversalOrder.BFS,
        limit: int | None = None,
    ) -> ServiceResult:
        """List nodes reachable from *start* in the requested order.

        With *limit*, consumption of the lazy traversal stops early.  A
        recursive depth-first walk deeper than the interpreter recursion
        limit fails with ``TRAVERSAL_DEPTH``.
        """
        try:
            node = self.node(start)
            if order is TraversalOrder.BFS:
                walk = self._graph.bfs(node)
            elif order is TraversalOrder.DFS:
                walk = self._graph.dfs(node)
            else:
                walk = self._graph.dfs_recursive(node)
            items = [visited.value for visited in itertools.islice(walk, limit)]
        except GraphError as exc:
            return _failed("traverse", exc, start=start)
        except RecursionError:
            return ServiceResult(
                ok=False,
                op="traverse",
                error=ServiceError(
                    code="TRAVERSAL_DEPTH",
                    message="Graph is too deep for a recursive traversal; use --order dfs",
                    detail={"start": start, "order": str(order)},
                ),
            )

        return ServiceResult(
            ok=True,
            op="traverse",
            data={"start": start, "order": str(order), "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def _search(self, source: Node[str], variant: DijkstraVariant) -> search.ShortestPathTree[str]:
        with stage(f"dijkstra_{variant}") as span:
            if variant is DijkstraVariant.NAIVE:
                tree = search.dijkstra_naive(self._graph, source)
            else:
                tree = search.dijkstra(self._graph, source)
            if span:
                span.record_search(tree)
        return tree

    @traced
    def shortest_path(
        self,
        source: str,
        target: str,
        *,
        variant: DijkstraVariant = DijkstraVariant.HEAP,
    ) -> ServiceResult:
        """Shortest distance and path between two labelled nodes."""
        try:
            start = self.node(source)
            end = self.node(target)
            tree = self._search(start, variant)
            distance = tree.distance_to(end)
            path = tree.path_to(end)
        except GraphError as exc:
            return _failed("shortest_path", exc, source=source, target=target)

        return ServiceResult(
            ok=True,
            op="shortest_path",
            data={
                "source": source,
                "target": target,
                "distance": distance,
                "hops": len(path) - 1,
                "path": self._labelled(path),
            },
            meta={"search": tree.stats.to_dict()},
        )

    @traced
    def distances(
        self,
        source: str,
        *,
        variant: DijkstraVariant = DijkstraVariant.HEAP,
    ) -> ServiceResult:
        """Shortest distance from *source* to every node.

        Unreachable nodes are listed with ``distance: None``.
        """
        try:
            tree = self._search(self.node(source), variant)
        except GraphError as exc:
            return _failed("distances", exc, source=source)

        items: list[dict[str, Any]] = []
        for node, distance in tree.distances.items():
            items.append(
                {"id": node.value, "distance": None if distance == math.inf else distance}
            )
        reachable = sum(1 for item in items if item["distance"] is not None)
        return ServiceResult(
            ok=True,
            op="distances",
            data={"source": source, "count": len(items), "reachable": reachable, "items": items},
            meta={"search": tree.stats.to_dict()},
        )

    @traced
    def paths(self, source: str) -> ServiceResult:
        """Shortest path from *source* to every reachable node."""
        try:
            tree = self._search(self.node(source), DijkstraVariant.HEAP)
        except GraphError as exc:
            return _failed("paths", exc, source=source)

        items = [
            {
                "id": node.value,
                "distance": tree.distances[node],
                "path": self._labelled(path),
            }
            for node, path in tree.all_paths().items()
        ]
        return ServiceResult(
            ok=True,
            op="paths",
            data={"source": source, "count": len(items), "items": items},
        )

    @traced
    def astar(self, source: str, target: str, estimates: Sequence[str] = ()) -> ServiceResult:
        """A* search guided by per-label estimates (``"LABEL=NUMBER"``).

        Labels without an estimate are estimated at 0.
        """
        try:
            parsed = [parse_estimate(text) for text in estimates]
        except ValueError as exc:
            return _invalid("astar", "INVALID_ESTIMATE", exc)

        try:
            start = self.node(source)
            end = self.node(target)
            table = {self.node(label): value for label, value in parsed}
            with stage("astar") as span:
                tree = search.astar(self._graph, start, end, table_heuristic(table))
                if span:
                    span.record_search(tree)
            distance = tree.distance_to(end)
            path = tree.path_to(end)
        except GraphError as exc:
            return _failed("astar", exc, source=source, target=target)

        return ServiceResult(
            ok=True,
            op="astar",
            data={
                "source": source,
                "target": target,
                "distance": distance,
                "hops": len(path) - 1,
                "path": self._labelled(path),
            },
            meta={"search": tree.stats.to_dict()},
        )
