"""Command: benchmark naive vs. priority-queue Dijkstra."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nodegraph.commands._base import NgCommand
from nodegraph.services.bench import BenchService

if TYPE_CHECKING:
    from nodegraph.commands._context import AppContext


@click.command(
    cls=NgCommand,
    examples="""\
  nodegraph bench
  nodegraph bench --nodes 1000 --density 0.01
  nodegraph --json bench --seed 7 --verify""",
)
@click.option("--nodes", type=int, default=None, help="Node count (default from [bench]).")
@click.option(
    "--density",
    "edge_probability",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Probability of each directed edge.",
)
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.option("--verify", is_flag=True, help="Cross-check distances against NetworkX.")
@click.pass_obj
def bench(
    app: AppContext,
    nodes: int | None,
    edge_probability: float | None,
    seed: int | None,
    verify: bool,
) -> None:
    """Time both Dijkstra variants on a random graph."""
    svc = BenchService(app.settings.bench)
    app.emit(svc.run(nodes=nodes, edge_probability=edge_probability, seed=seed, verify=verify))
