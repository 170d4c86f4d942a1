"""structlog setup for the nodegraph CLI.

Engine modules log through stdlib ``logging.getLogger(__name__)``;
telemetry logs through structlog.  Both end up in one stderr handler,
rendered for a console by default or as JSON lines with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers kept at WARNING even under --verbose.
_LIBRARY_LOGGERS = ("networkx",)

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route engine and telemetry logs to stderr.

    Args:
        verbose: Show the ``nodegraph`` loggers' DEBUG output (graph
            mutations, search summaries, span timings).
        log_json: One JSON object per line instead of console text.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("nodegraph").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
