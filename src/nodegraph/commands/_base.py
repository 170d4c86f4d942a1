"""Custom Click base class with --examples support.

Provides NgCommand, which accepts an ``examples`` parameter, and the
shared graph-building options.
When ``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class NgCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def graph_options[F: Callable[..., Any]](func: F) -> F:
    """Attach the options that describe an in-memory graph.

    Flag pairs default to None so unset flags fall back to ``[graph]``
    settings.
    """
    options = [
        click.option(
            "-e",
            "--edge",
            "edges",
            multiple=True,
            metavar="SRC:DST[:W]",
            help="Edge specification (repeatable).",
        ),
        click.option(
            "-n",
            "--node",
            "nodes",
            multiple=True,
            metavar="LABEL",
            help="Isolated node label (repeatable).",
        ),
        click.option("--directed/--undirected", default=None, help="Edge direction."),
        click.option("--weighted/--unweighted", default=None, help="Explicit edge weights."),
        click.option(
            "--positive-only/--allow-non-positive",
            "positive_edges_only",
            default=None,
            help="Reject weights below 1.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
