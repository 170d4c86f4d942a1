"""Shared pytest fixtures and test helpers for nodegraph tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable

import pytest
from click.testing import CliRunner

from nodegraph.graph.graph import Graph
from nodegraph.graph.node import Node
from nodegraph.services.telemetry import set_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config env vars set."""
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    monkeypatch.delenv("NODEGRAPH_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _cli_side_effects() -> Generator[None]:
    """Undo what AppContext does to process-wide state during CLI runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    set_telemetry(False)
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("nodegraph").setLevel(logging.NOTSET)


@pytest.fixture
def scenario() -> tuple[Graph[str], dict[str, Node[str]]]:
    """Directed, weighted graph S->A(1), A->B(2), S->B(5), B->T(1)."""
    g: Graph[str] = Graph(directed=True, weighted=True, positive_edges_only=True)
    nodes = {label: g.add_node(label) for label in "SABT"}
    g.add_weighted_edge(nodes["S"], nodes["A"], 1)
    g.add_weighted_edge(nodes["A"], nodes["B"], 2)
    g.add_weighted_edge(nodes["S"], nodes["B"], 5)
    g.add_weighted_edge(nodes["B"], nodes["T"], 1)
    return g, nodes


@pytest.fixture
def xyz() -> tuple[Graph[str], dict[str, Node[str]]]:
    """Undirected, unweighted path X - Y - Z."""
    g: Graph[str] = Graph(directed=False, weighted=False)
    nodes = {label: g.add_node(label) for label in "XYZ"}
    g.add_unweighted_edge(nodes["X"], nodes["Y"])
    g.add_unweighted_edge(nodes["Y"], nodes["Z"])
    return g, nodes


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def values(nodes: Iterable[Node[str]]) -> list[str]:
    """Payloads of *nodes*, in order."""
    return [n.value for n in nodes]


def path_weight(path: list[Node[str]]) -> int:
    """Sum of edge weights along consecutive nodes of *path*."""
    return sum(a.neighbours[b] for a, b in zip(path, path[1:], strict=False))


def adjacency_entries(graph: Graph[object]) -> int:
    """Total number of adjacency entries across all nodes."""
    return sum(len(n.neighbours) for n in graph.nodes())
