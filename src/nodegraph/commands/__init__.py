"""Subcommand modules for nodegraph.

Provides register_commands() which uses deferred imports to keep
``nodegraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from nodegraph.commands.bench import bench
    from nodegraph.commands.search import astar, distances, path, paths, traverse

    cli.add_command(traverse)
    cli.add_command(path)
    cli.add_command(distances)
    cli.add_command(paths)
    cli.add_command(astar)
    cli.add_command(bench)
