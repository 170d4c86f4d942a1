"""Commands: traversal and shortest-path queries on a command-line graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nodegraph.commands._base import NgCommand, graph_options
from nodegraph.domain.types import DijkstraVariant, TraversalOrder

if TYPE_CHECKING:
    from nodegraph.commands._context import AppContext


_VARIANT = click.option(
    "--variant",
    type=click.Choice([v.value for v in DijkstraVariant]),
    default=DijkstraVariant.HEAP.value,
    show_default=True,
    help="Dijkstra implementation.",
)


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph traverse X --undirected --unweighted -e X:Y -e Y:Z
  nodegraph traverse A --order dfs -e A:B:1 -e A:C:2 -e C:D:1
  nodegraph --json traverse A --limit 2 -e A:B:1 -e B:C:1""",
)
@click.argument("start")
@click.option(
    "--order",
    type=click.Choice([o.value for o in TraversalOrder]),
    default=TraversalOrder.BFS.value,
    show_default=True,
    help="Traversal strategy.",
)
@click.option("--limit", type=int, default=None, help="Stop after this many nodes.")
@graph_options
@click.pass_obj
def traverse(
    app: AppContext,
    start: str,
    order: str,
    limit: int | None,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
    directed: bool | None,
    weighted: bool | None,
    positive_edges_only: bool | None,
) -> None:
    """List nodes reachable from START."""
    svc = app.graph_service(
        edges, nodes, directed=directed, weighted=weighted, positive_edges_only=positive_edges_only
    )
    app.emit(svc.traverse(start, order=TraversalOrder(order), limit=limit))


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph path S T -e S:A:1 -e A:B:2 -e S:B:5 -e B:T:1
  nodegraph path S T --variant naive -e S:A:1 -e A:T:1
  nodegraph -q path S T -e S:A:1 -e A:T:1""",
)
@click.argument("source")
@click.argument("target")
@_VARIANT
@graph_options
@click.pass_obj
def path(
    app: AppContext,
    source: str,
    target: str,
    variant: str,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
    directed: bool | None,
    weighted: bool | None,
    positive_edges_only: bool | None,
) -> None:
    """Find the shortest path from SOURCE to TARGET (Dijkstra)."""
    svc = app.graph_service(
        edges, nodes, directed=directed, weighted=weighted, positive_edges_only=positive_edges_only
    )
    app.emit(svc.shortest_path(source, target, variant=DijkstraVariant(variant)))


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph distances S -e S:A:1 -e A:B:2 -n Z
  nodegraph --json distances S --variant naive -e S:A:1""",
)
@click.argument("source")
@_VARIANT
@graph_options
@click.pass_obj
def distances(
    app: AppContext,
    source: str,
    variant: str,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
    directed: bool | None,
    weighted: bool | None,
    positive_edges_only: bool | None,
) -> None:
    """Shortest distance from SOURCE to every node."""
    svc = app.graph_service(
        edges, nodes, directed=directed, weighted=weighted, positive_edges_only=positive_edges_only
    )
    app.emit(svc.distances(source, variant=DijkstraVariant(variant)))


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph paths S -e S:A:1 -e A:B:2 -e S:B:5""",
)
@click.argument("source")
@graph_options
@click.pass_obj
def paths(
    app: AppContext,
    source: str,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
    directed: bool | None,
    weighted: bool | None,
    positive_edges_only: bool | None,
) -> None:
    """Shortest path from SOURCE to every reachable node."""
    svc = app.graph_service(
        edges, nodes, directed=directed, weighted=weighted, positive_edges_only=positive_edges_only
    )
    app.emit(svc.paths(source))


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph astar S T -e S:A:1 -e A:T:1 -e S:T:5 --estimate A=1
  nodegraph --json astar S T -e S:A:1 -e A:T:1""",
)
@click.argument("source")
@click.argument("target")
@click.option(
    "--estimate",
    "estimates",
    multiple=True,
    metavar="LABEL=N",
    help="Heuristic estimate of the remaining distance from LABEL to TARGET (repeatable).",
)
@graph_options
@click.pass_obj
def astar(
    app: AppContext,
    source: str,
    target: str,
    estimates: tuple[str, ...],
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
    directed: bool | None,
    weighted: bool | None,
    positive_edges_only: bool | None,
) -> None:
    """Find a shortest path from SOURCE to TARGET with A*."""
    svc = app.graph_service(
        edges, nodes, directed=directed, weighted=weighted, positive_edges_only=positive_edges_only
    )
    app.emit(svc.astar(source, target, estimates))
