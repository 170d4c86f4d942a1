"""Tests for NodegraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from nodegraph.config.models import BenchConfig, GraphConfig
from nodegraph.config.settings import NodegraphSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = NodegraphSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.graph == GraphConfig()
        assert settings.bench.nodes == 200
        assert settings.bench.seed == 42

    def test_frozen(self, tmp_path: Path) -> None:
        settings = NodegraphSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "nodegraph.toml"
        toml.write_text("[graph]\ndirected = false\n[bench]\nnodes = 50\n")
        settings = NodegraphSettings.from_cli(start=tmp_path)
        assert settings.graph.directed is False
        assert settings.graph.weighted is True  # default preserved
        assert settings.bench.nodes == 50
        assert settings.config_path == toml

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "nodegraph.toml").write_text("")
        settings = NodegraphSettings.from_cli(start=tmp_path)
        assert settings.graph == GraphConfig()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[bench]\nrepeats = 7\n")
        settings = NodegraphSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.bench.repeats == 7
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        settings = NodegraphSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "nodegraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            NodegraphSettings.from_cli(start=tmp_path)

    def test_inconsistent_graph_section(self, tmp_path: Path) -> None:
        (tmp_path / "nodegraph.toml").write_text(
            "[graph]\nweighted = false\npositive_edges_only = false\n"
        )
        with pytest.raises(ValidationError):
            NodegraphSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = NodegraphSettings.from_cli(
            start=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "nodegraph.toml").write_text("verbose = true\n")
        settings = NodegraphSettings.from_cli(start=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "nodegraph.toml").write_text("[bench]\nnodes = 50\n")
        monkeypatch.setenv("NODEGRAPH_BENCH__NODES", "75")
        settings = NodegraphSettings.from_cli(start=tmp_path)
        assert settings.bench.nodes == 75


class TestModels:
    def test_unweighted_requires_positive(self) -> None:
        with pytest.raises(ValidationError):
            GraphConfig(weighted=False, positive_edges_only=False)

    @pytest.mark.parametrize(
        "overrides",
        [{"nodes": 0}, {"edge_probability": 1.5}, {"max_weight": 0}, {"repeats": 0}],
    )
    def test_bench_bounds(self, overrides: dict[str, float]) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(**overrides)  # type: ignore[arg-type]
