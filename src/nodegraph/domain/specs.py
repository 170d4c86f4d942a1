"""Edge and estimate specifications — parse command-line graph descriptions.

Pure functions, no engine dependencies.  Consumed by GraphService when
building a label-addressed graph.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# SOURCE:TARGET or SOURCE:TARGET:WEIGHT; labels may not contain ':'.
_EDGE_PATTERN = re.compile(r"^\s*([^:\s][^:]*?)\s*:\s*([^:\s][^:]*?)\s*(?::\s*(-?\d+))?\s*$")

# LABEL=ESTIMATE for A* heuristic tables.
_ESTIMATE_PATTERN = re.compile(r"^\s*([^=\s][^=]*?)\s*=\s*(-?\d+(?:\.\d+)?)\s*$")


@dataclass(frozen=True)
class EdgeSpec:
    """One edge from a textual description."""

    source: str
    target: str
    weight: int | None = None  # None means unweighted


def parse_edge_spec(text: str) -> EdgeSpec:
    """Parse ``"A:B"`` or ``"A:B:3"`` into an :class:`EdgeSpec`.

    Examples:
        >>> parse_edge_spec("S:A:1")
        EdgeSpec(source='S', target='A', weight=1)
        >>> parse_edge_spec("X:Y")
        EdgeSpec(source='X', target='Y', weight=None)
    """
    match = _EDGE_PATTERN.match(text)
    if match is None:
        msg = f"Invalid edge specification {text!r} (expected SOURCE:TARGET[:WEIGHT])"
        raise ValueError(msg)
    source, target, weight = match.groups()
    return EdgeSpec(source=source, target=target, weight=int(weight) if weight else None)


def parse_estimate(text: str) -> tuple[str, float]:
    """Parse ``"LABEL=ESTIMATE"`` into ``(label, estimate)``.

    Examples:
        >>> parse_estimate("B=2")
        ('B', 2.0)
    """
    match = _ESTIMATE_PATTERN.match(text)
    if match is None:
        msg = f"Invalid estimate {text!r} (expected LABEL=NUMBER)"
        raise ValueError(msg)
    return match.group(1), float(match.group(2))
