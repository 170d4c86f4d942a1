"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from nodegraph.config.logging import configure_logging
from nodegraph.services.graph import GraphService
from nodegraph.services.telemetry import set_telemetry


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ng = logging.getLogger("nodegraph")
    ng_level = ng.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ng.setLevel(ng_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("nodegraph").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("nodegraph").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("nodegraph.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "nodegraph.test"
        assert "timestamp" in parsed

    def test_stdlib_engine_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("nodegraph.graph.search").debug("Dijkstra from 'S' settled 4 nodes")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Dijkstra from 'S' settled 4 nodes"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "nodegraph.graph.search"

    def test_quiet_hides_engine_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("nodegraph.graph.graph").debug("Removed node")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("networkx").debug("backend noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_span_timings_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        set_telemetry(True)

        GraphService().load(["A:B:1"])

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        (span,) = [line for line in lines if line["event"] == "span.complete"]
        assert span["logger"] == "nodegraph.telemetry"
        assert span["span_name"] == "GraphService.load"
        assert any(line["logger"] == "nodegraph.services.graph" for line in lines)
