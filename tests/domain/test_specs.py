"""Tests for edge and estimate specification parsing."""

from __future__ import annotations

import pytest

from nodegraph.domain.specs import EdgeSpec, parse_edge_spec, parse_estimate


class TestParseEdgeSpec:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("S:A:1", EdgeSpec("S", "A", 1)),
            ("X:Y", EdgeSpec("X", "Y", None)),
            ("a:b:-4", EdgeSpec("a", "b", -4)),
            ("a:b:0", EdgeSpec("a", "b", 0)),
            ("  New York : Boston : 3 ", EdgeSpec("New York", "Boston", 3)),
        ],
    )
    def test_valid(self, text: str, expected: EdgeSpec) -> None:
        assert parse_edge_spec(text) == expected

    @pytest.mark.parametrize("text", ["", "A", "A:", ":B", "A:B:", "A:B:x", "A:B:1.5", "A:B:C:1"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid edge specification"):
            parse_edge_spec(text)


class TestParseEstimate:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("B=2", ("B", 2.0)), ("far away = 7.5", ("far away", 7.5)), ("x=-1", ("x", -1.0))],
    )
    def test_valid(self, text: str, expected: tuple[str, float]) -> None:
        assert parse_estimate(text) == expected

    @pytest.mark.parametrize("text", ["", "B", "=2", "B=", "B=two"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid estimate"):
            parse_estimate(text)
