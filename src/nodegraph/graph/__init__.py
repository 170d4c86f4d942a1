"""Graph engine — nodes, structural management, traversal and search."""

from nodegraph.graph.graph import Graph
from nodegraph.graph.heuristics import Heuristic, table_heuristic, zero_heuristic
from nodegraph.graph.node import Node
from nodegraph.graph.search import ShortestPathTree, astar, dijkstra, dijkstra_naive

__all__ = [
    "Graph",
    "Heuristic",
    "Node",
    "ShortestPathTree",
    "astar",
    "dijkstra",
    "dijkstra_naive",
    "table_heuristic",
    "zero_heuristic",
]
