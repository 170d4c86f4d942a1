"""Rich Console factory and theme for nodegraph output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NODEGRAPH_THEME = Theme(
    {
        "ng.ok": "bold green",
        "ng.error": "bold red",
        "ng.warning": "bold yellow",
        "ng.op": "bold cyan",
        "ng.key": "dim",
        "ng.node": "bold blue",
        "ng.distance": "magenta",
        "ng.unreachable": "dim red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NODEGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
