"""NetworkX interop — in-memory conversion of a :class:`Graph`.

The NetworkX graph uses the engine's :class:`Node` objects themselves as
node keys (they hash by identity), stores payloads under the ``value``
node attribute and weights under the ``weight`` edge attribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

if TYPE_CHECKING:
    from nodegraph.graph.graph import Graph


def to_networkx(graph: Graph[Any]) -> nx.Graph[Any]:
    """Build a ``DiGraph`` (directed) or ``Graph`` (undirected) copy of *graph*."""
    g: nx.Graph[Any] = nx.DiGraph() if graph.is_directed else nx.Graph()
    for node in graph.nodes():
        g.add_node(node, value=node.value)
    for node in graph.nodes():
        for neighbour, weight in node.neighbours.items():
            g.add_edge(node, neighbour, weight=weight)
    return g
