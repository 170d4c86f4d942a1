"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds label-addressed graphs from command-line
options and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from nodegraph.output.formatters import OutputSettings, format_result
from nodegraph.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nodegraph.config.settings import NodegraphSettings
    from nodegraph.services.graph import GraphService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NodegraphSettings) -> None:
        self.settings = settings

        from nodegraph.config.logging import configure_logging
        from nodegraph.services.telemetry import set_telemetry

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        set_telemetry(settings.verbose)

    def graph_service(
        self,
        edges: Sequence[str],
        nodes: Sequence[str],
        *,
        directed: bool | None = None,
        weighted: bool | None = None,
        positive_edges_only: bool | None = None,
    ) -> GraphService:
        """Build and load a GraphService, emitting (and exiting) on failure.

        Unset flags fall back to the ``[graph]`` settings.  An unweighted
        graph defaults to positive-edges-only.
        """
        from nodegraph.config.models import GraphConfig
        from nodegraph.services.graph import GraphService

        defaults = self.settings.graph
        weighted = defaults.weighted if weighted is None else weighted
        if positive_edges_only is None:
            positive_edges_only = defaults.positive_edges_only or not weighted
        try:
            config = GraphConfig(
                directed=defaults.directed if directed is None else directed,
                weighted=weighted,
                positive_edges_only=positive_edges_only,
            )
        except ValidationError:
            self.emit(
                ServiceResult(
                    ok=False,
                    op="load",
                    error=ServiceError(
                        code="INVALID_CONFIG",
                        message="--allow-non-positive requires a weighted graph",
                    ),
                )
            )

        svc = GraphService(config)
        result = svc.load(edges, nodes)
        if not result.ok:
            self.emit(result)
        return svc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
