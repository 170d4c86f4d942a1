"""Node — graph-owned vertex with a payload and an adjacency map.

Nodes carry no behaviour.  They are created by :meth:`Graph.add_node`,
mutated only by their owning graph, and compared by identity: two nodes
holding equal payloads are still distinct vertices.
"""

from __future__ import annotations


class Node[T]:
    """A vertex owned by exactly one graph.

    Attributes:
        value: Arbitrary non-None payload.  Metadata only; never used by
            any structural invariant.
        neighbours: Mapping of neighbour node to edge weight.  Unweighted
            edges are stored with weight 1.
    """

    __slots__ = ("neighbours", "value")

    def __init__(self, value: T) -> None:
        self.value = value
        self.neighbours: dict[Node[T], int] = {}

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
