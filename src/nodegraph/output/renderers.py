"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from nodegraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from nodegraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "path" in result.data:
        return " ".join(str(label) for label in result.data["path"])
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"] if isinstance(item, dict) else item) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="ng.ok")
    op = Text(f"  {result.op}", style="ng.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ng.key")
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text.from_markup(f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  ")
    line.append(str(name))
    counts: list[str] = []
    if "nodes" in span_data:
        counts.append(f"{span_data['nodes']} nodes, {span_data['edges']} edges")
    search = span_data.get("search") or {}
    if search:
        counts.append(
            f"settled={search['settled']} stale={search['stale']} relaxed={search['relaxed']}"
        )
    if counts:
        line.append("  (" + "; ".join(counts) + ")", style="dim")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="ng.error"),
        Text(f"  {result.op}{code}", style="ng.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_traverse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render traversal order as a numbered list."""
    d = result.data
    _status_line(console, result)
    _field(console, "start", d["start"])
    _field(console, "order", d["order"])
    _field(console, "count", d["count"])
    for index, label in enumerate(d["items"], start=1):
        console.print(f"  {index:>4}. [ng.node]{escape(str(label))}[/ng.node]")
    if verbose:
        _render_meta(console, result)


def _render_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a shortest path as a chain."""
    d = result.data
    chain = " → ".join(f"[ng.node]{escape(str(label))}[/ng.node]" for label in d["path"])
    console.print(chain)
    console.print(
        f"\nDistance: [ng.distance]{d['distance']}[/ng.distance]  ({d['hops']} hops)"
    )
    if verbose:
        _render_meta(console, result)


def _render_distances(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a distance map as a table; unreachable nodes are marked."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d["source"])
    _field(console, "reachable", f"{d['reachable']}/{d['count']}")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Node", style="ng.node", no_wrap=True)
    table.add_column("Distance", style="ng.distance", justify="right")
    for item in d["items"]:
        distance = item["distance"]
        cell = "[ng.unreachable]unreachable[/ng.unreachable]" if distance is None else str(distance)
        table.add_row(str(item["id"]), cell)
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_paths(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render every shortest path from a source."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d["source"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Node", style="ng.node", no_wrap=True)
    table.add_column("Distance", style="ng.distance", justify="right")
    table.add_column("Path")
    for item in d["items"]:
        table.add_row(str(item["id"]), str(item["distance"]), " → ".join(map(str, item["path"])))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_bench(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render Dijkstra timings side by side."""
    d = result.data
    _status_line(console, result)
    _field(console, "graph", f"{d['nodes']} nodes, {d['edges']} edges")
    _field(console, "reachable", d["reachable"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Variant")
    table.add_column("Best (ms)", justify="right", style="ng.distance")
    table.add_row("naive O(V²)", f"{d['naive_ms']:.3f}")
    table.add_row("heap O(E log V)", f"{d['heap_ms']:.3f}")
    console.print(table)

    if d.get("speedup") is not None:
        _field(console, "speedup", f"{d['speedup']}x")
    _field(console, "stale_entries", d["stale_entries"])
    if d.get("verified"):
        _field(console, "verified", "networkx")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "load": _render_generic,
    "traverse": _render_traverse,
    "shortest_path": _render_path,
    "astar": _render_path,
    "distances": _render_distances,
    "paths": _render_paths,
    "bench": _render_bench,
}
