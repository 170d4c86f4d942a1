"""Tests for the traversal and shortest-path commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from nodegraph.cli import cli

SCENARIO = ["-e", "S:A:1", "-e", "A:B:2", "-e", "S:B:5", "-e", "B:T:1"]


def _json(runner: CliRunner, *args: str) -> dict[str, Any]:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestTraverse:
    def test_bfs_default(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "traverse", "S", *SCENARIO)
        assert data["data"]["items"] == ["S", "A", "B", "T"]
        assert data["data"]["order"] == "bfs"

    @pytest.mark.parametrize(
        ("order", "expected"),
        [("dfs", ["S", "B", "T", "A"]), ("dfs-recursive", ["S", "A", "B", "T"])],
    )
    def test_orders(self, cli_runner: CliRunner, order: str, expected: list[str]) -> None:
        data = _json(cli_runner, "traverse", "S", "--order", order, *SCENARIO)
        assert data["data"]["items"] == expected

    def test_undirected_unweighted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "traverse", "Z", "--undirected", "--unweighted", "-e", "X:Y", "-e", "Y:Z"]
        )
        assert result.exit_code == 0
        assert result.stdout.split() == ["Z", "Y", "X"]

    def test_limit(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "traverse", "S", "--limit", "1", *SCENARIO)
        assert data["data"]["items"] == ["S"]

    def test_isolated_node(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "traverse", "Z", "-n", "Z", *SCENARIO)
        assert data["data"]["items"] == ["Z"]

    def test_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["traverse", "S", *SCENARIO])
        assert result.exit_code == 0
        assert "1. S" in result.stdout

    def test_unknown_start(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["traverse", "Q", *SCENARIO])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.stderr
        assert result.stdout == ""

    def test_invalid_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["traverse", "S", "--order", "sideways", *SCENARIO])
        assert result.exit_code == 2


class TestPath:
    @pytest.mark.parametrize("variant", ["naive", "heap"])
    def test_json(self, cli_runner: CliRunner, variant: str) -> None:
        data = _json(cli_runner, "path", "S", "T", "--variant", variant, *SCENARIO)
        assert data["ok"] is True
        assert data["data"]["distance"] == 4
        assert data["data"]["path"] == ["S", "A", "B", "T"]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "path", "S", "T", *SCENARIO])
        assert result.stdout.strip() == "S A B T"

    def test_rich(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "S", "T", *SCENARIO])
        assert "S → A → B → T" in result.stdout
        assert "Distance: 4" in result.stdout

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "path", "S", "T", *SCENARIO])
        assert result.exit_code == 0
        assert "GraphService.shortest_path" in result.stdout
        assert "dijkstra_heap" in result.stdout

    def test_unreachable(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "path", "T", "S", *SCENARIO])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "UNREACHABLE"

    def test_unweighted_graph(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "X", "Y", "--unweighted", "-e", "X:Y"])
        assert result.exit_code == 1
        assert "SEARCH_PRECONDITION" in result.stderr

    def test_bad_edge_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "S", "T", "-e", "S-T"])
        assert result.exit_code == 1
        assert "INVALID_EDGE_SPEC" in result.stderr

    def test_non_positive_weight_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "S", "T", "-e", "S:T:0"])
        assert result.exit_code == 1
        assert "EDGE_WEIGHT" in result.stderr

    def test_non_positive_graph_cannot_search(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "S", "T", "--allow-non-positive", "-e", "S:T:0"])
        assert result.exit_code == 1
        assert "SEARCH_PRECONDITION" in result.stderr

    def test_non_positive_requires_weighted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["traverse", "S", "--unweighted", "--allow-non-positive", "-e", "S:T"]
        )
        assert result.exit_code == 1
        assert "INVALID_CONFIG" in result.stderr

    def test_graph_defaults_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "nodegraph.toml"
        config.write_text("[graph]\ndirected = false\n")
        data = _json(cli_runner, "-c", str(config), "path", "T", "S", *SCENARIO)
        assert data["data"]["path"] == ["T", "B", "A", "S"]

    def test_flag_overrides_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "nodegraph.toml"
        config.write_text("[graph]\ndirected = false\n")
        result = cli_runner.invoke(cli, ["-c", str(config), "path", "T", "S", "--directed", *SCENARIO])
        assert result.exit_code == 1


class TestDistances:
    def test_json_marks_unreachable(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "distances", "A", *SCENARIO)
        items = {item["id"]: item["distance"] for item in data["data"]["items"]}
        assert items == {"S": None, "A": 0, "B": 2, "T": 3}

    def test_rich_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["distances", "A", "--variant", "naive", *SCENARIO])
        assert result.exit_code == 0
        assert "unreachable" in result.stdout


class TestPaths:
    def test_json(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "paths", "S", *SCENARIO)
        by_id = {item["id"]: item["path"] for item in data["data"]["items"]}
        assert by_id["T"] == ["S", "A", "B", "T"]
        assert by_id["S"] == ["S"]


class TestAstar:
    def test_with_estimates(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "astar", "S", "T", "--estimate", "A=3", "--estimate", "B=1", *SCENARIO)
        assert data["data"]["distance"] == 4
        assert data["data"]["path"] == ["S", "A", "B", "T"]

    def test_negative_estimate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["astar", "S", "T", "--estimate", "B=-1", *SCENARIO])
        assert result.exit_code == 1
        assert "INVALID_HEURISTIC" in result.stderr


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["traverse", "--examples"], "nodegraph traverse"),
        (["path", "--examples"], "--variant naive"),
        (["distances", "--examples"], "nodegraph distances"),
        (["paths", "--examples"], "nodegraph paths"),
        (["astar", "--examples"], "--estimate"),
        (["bench", "--examples"], "--verify"),
    ],
)
def test_examples(cli_runner: CliRunner, args: list[str], expected: str) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert expected in result.output
