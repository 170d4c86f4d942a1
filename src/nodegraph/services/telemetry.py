"""Operation timing for ``--verbose`` output.

A traced service call builds a small tree of spans: one root for the
operation and one child per stage (building a graph, running a search,
checking against NetworkX).  Search stages keep the ``SearchStats`` of
the run they timed and graph stages keep the node and edge counts, so
the verbose rendering can show the work done next to the time spent.

When telemetry is off, a traced call costs one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from nodegraph.services.result import ServiceResult

if TYPE_CHECKING:
    from nodegraph.graph.graph import Graph
    from nodegraph.graph.search import SearchStats, ShortestPathTree

log = structlog.get_logger("nodegraph.telemetry")

_enabled: ContextVar[bool] = ContextVar("nodegraph_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("nodegraph_active_span", default=None)


@dataclass
class Span:
    """Timing for one operation or one stage of it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    children: list[Span] = field(default_factory=list)
    stats: SearchStats | None = None
    graph_size: tuple[int, int] | None = None

    @property
    def elapsed_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def close(self) -> None:
        self.finished = time.perf_counter()

    def record_search(self, tree: ShortestPathTree[Any]) -> None:
        self.stats = tree.stats

    def record_graph(self, graph: Graph[Any]) -> None:
        self.graph_size = (graph.nodes_count, graph.edges_count)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.elapsed_ms, 2)}
        if self.graph_size is not None:
            out["nodes"], out["edges"] = self.graph_size
        if self.stats is not None:
            out["search"] = self.stats.to_dict()
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def set_telemetry(enabled: bool) -> None:
    """Switch span collection on or off for the current context."""
    _enabled.set(enabled)


@contextmanager
def stage(name: str) -> Iterator[Span | None]:
    """Time a stage of the running traced operation.

    Yields None outside a traced call or when telemetry is off.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    span = Span(name)
    parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.close()
        _active.reset(token)


def traced[**P](func: Callable[P, ServiceResult]) -> Callable[P, ServiceResult]:
    """Time a service method and attach its span tree as ``meta["telemetry"]``."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        token = _active.set(root)
        try:
            result = func(*args, **kwargs)
        finally:
            root.close()
            _active.reset(token)
            log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.elapsed_ms, 2),
                stages=len(root.children),
            )

        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper
