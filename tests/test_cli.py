"""Tests for the demo CLI command."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from digraphs._cli.main import app
from digraphs._cli.render import render_stage_table, render_topological_order
from digraphs._demo import DEMO_EDGES, run_demo

runner = CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from a directory whose pyproject.toml sets a two-step chain."""
    (tmp_path / "pyproject.toml").write_text('[tool.digraphs]\nchain = ["set", "matrix"]\n')
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRunDemo:
    """Tests for run_demo, the data behind the CLI."""

    def test_default_chain(self) -> None:
        result = run_demo()

        assert [str(stage.representation) for stage in result.stages] == ["list", "matrix", "arc", "set"]
        for stage in result.stages:
            assert stage.vertices_count == 7
            assert stage.edge_count == len(DEMO_EDGES)
            assert sorted(stage.bfs_order) == list(range(7))
            assert sorted(stage.dfs_order) == list(range(7))

    def test_list_stage_orders(self) -> None:
        stage = run_demo([]).stages[0]

        assert stage.bfs_order == (0, 1, 5, 2, 3, 6, 4)
        assert stage.dfs_order == (0, 1, 2, 3, 4, 6, 5)

    def test_topological_order(self) -> None:
        order = run_demo([]).topological_order

        for from_vertex, to_vertex in DEMO_EDGES:
            assert order.index(from_vertex) < order.index(to_vertex)

    def test_to_dict(self) -> None:
        data = run_demo(["arc"]).to_dict()

        assert data["topological_order"] == [0, 1, 5, 3, 6, 4, 2]
        assert [stage["representation"] for stage in data["stages"]] == ["list", "arc"]


class TestDemoCommand:
    """Tests for `digraphs demo`."""

    def test_json_uses_config_chain(self, project_dir: Path) -> None:  # noqa: ARG002
        result = runner.invoke(app, ["demo", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [stage["representation"] for stage in data["stages"]] == ["list", "set", "matrix"]

    def test_chain_option_overrides_config(self, project_dir: Path) -> None:  # noqa: ARG002
        result = runner.invoke(app, ["demo", "--json", "-c", "arc"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [stage["representation"] for stage in data["stages"]] == ["list", "arc"]

    def test_unknown_chain_option(self, project_dir: Path) -> None:  # noqa: ARG002
        result = runner.invoke(app, ["demo", "-c", "tree"])

        assert result.exit_code != 0

    def test_invalid_config_exits_with_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.digraphs]\nchain = ["tree"]\n')
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 1

    def test_table_output(self, project_dir: Path) -> None:  # noqa: ARG002
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0, result.output
        assert "ListGraph" in result.stdout
        assert "SetGraph" in result.stdout
        assert "MatrixGraph" in result.stdout
        assert "Topological order" in result.stdout


class TestRender:
    """Tests for the rich rendering helpers."""

    def test_stage_table(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=120)

        render_stage_table(run_demo(["matrix"]), console)

        output = buffer.getvalue()
        assert "ListGraph" in output
        assert "MatrixGraph" in output
        assert "0 1 5 2 3 6 4" in output

    def test_topological_order(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=120)

        render_topological_order(run_demo([]), console)

        assert buffer.getvalue().strip() == "Topological order: 0 1 5 3 6 4 2"
