"""nodegraph — node-centric graph engine with traversal and shortest-path search."""

from nodegraph.domain.errors import (
    DuplicateEdgeError,
    EdgeKindError,
    EdgePolicyError,
    EdgeWeightError,
    GraphConfigurationError,
    GraphError,
    HeuristicError,
    MissingEdgeError,
    NodeMembershipError,
    SearchPreconditionError,
    SelfLoopError,
    UnreachableNodeError,
)
from nodegraph.graph import Graph, Node, table_heuristic, zero_heuristic

__version__ = "0.1.0"

__all__ = [
    "DuplicateEdgeError",
    "EdgeKindError",
    "EdgePolicyError",
    "EdgeWeightError",
    "Graph",
    "GraphConfigurationError",
    "GraphError",
    "HeuristicError",
    "MissingEdgeError",
    "Node",
    "NodeMembershipError",
    "SearchPreconditionError",
    "SelfLoopError",
    "UnreachableNodeError",
    "table_heuristic",
    "zero_heuristic",
]
