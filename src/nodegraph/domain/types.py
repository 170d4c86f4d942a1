"""Traversal and search selectors shared by services and commands."""

from __future__ import annotations

from enum import StrEnum


class TraversalOrder(StrEnum):
    """Reachability traversal strategies."""

    BFS = "bfs"
    DFS = "dfs"
    DFS_RECURSIVE = "dfs-recursive"


class DijkstraVariant(StrEnum):
    """Implementations of single-source shortest-path search."""

    NAIVE = "naive"
    HEAP = "heap"
