"""Graph error taxonomy.

Every failure raised by the engine derives from :class:`GraphError` and
carries a stable ``code`` that the service layer copies into
``ServiceError.code``.  Failures are synchronous and local to the call:
validation always completes before any mutation, so a raised error never
leaves the graph half-modified.
"""

from __future__ import annotations

from typing import ClassVar


class GraphError(Exception):
    """Base class for all graph engine failures."""

    code: ClassVar[str] = "GRAPH_ERROR"


class GraphConfigurationError(GraphError, ValueError):
    """Inconsistent flag combination at graph construction."""

    code = "INVALID_CONFIG"


class NodeMembershipError(GraphError, LookupError):
    """A node argument is not (or no longer) owned by the graph."""

    code = "NOT_FOUND"


class EdgePolicyError(GraphError, ValueError):
    """An edge operation violates one of the graph's structural rules."""

    code = "EDGE_POLICY"


class SelfLoopError(EdgePolicyError):
    code = "SELF_LOOP"


class DuplicateEdgeError(EdgePolicyError):
    code = "DUPLICATE_EDGE"


class MissingEdgeError(EdgePolicyError):
    code = "NO_SUCH_EDGE"


class EdgeKindError(EdgePolicyError):
    """Weighted-edge call on an unweighted graph, or vice versa."""

    code = "EDGE_KIND"


class EdgeWeightError(EdgePolicyError):
    """Non-positive weight on a positive-edges-only graph."""

    code = "EDGE_WEIGHT"


class SearchPreconditionError(GraphError):
    """Shortest-path search on a graph that cannot support it."""

    code = "SEARCH_PRECONDITION"


class UnreachableNodeError(GraphError, LookupError):
    """No path exists from the source to the requested target."""

    code = "UNREACHABLE"


class HeuristicError(GraphError, ValueError):
    """A heuristic evaluated to a negative estimate."""

    code = "INVALID_HEURISTIC"
