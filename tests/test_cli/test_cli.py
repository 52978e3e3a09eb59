"""Tests for the doodlecss CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from doodlecss import __version__
from doodlecss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
BASIC = str(FIXTURES / "basic.json")
RANDOM = str(FIXTURES / "random.json")
INVALID = str(FIXTURES / "invalid.json")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# compile command
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_css_output(self) -> None:
        result = CliRunner().invoke(cli, ["compile", BASIC])
        assert result.exit_code == 0, result.output
        assert "/* host */" in result.output
        assert ":host {" in result.output
        assert "#cell-3-2-1 {" in result.output
        assert "@keyframes spin {" in result.output
        assert "@keyframes spin-6 {" in result.output

    def test_json_output(self) -> None:
        result = CliRunner().invoke(cli, ["compile", BASIC, "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["grid"] == {"x": 3, "y": 2, "z": 1, "count": 6}
        assert data["props"] == {"has_animation": True}
        assert set(data["styles"]) == {"host", "container", "cells", "keyframes"}

    def test_grid_option_used_without_directive(self) -> None:
        result = CliRunner().invoke(cli, ["compile", RANDOM, "--grid", "2x2", "--seed", "1", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["grid"]["count"] == 4

    def test_seed_is_reproducible(self) -> None:
        runner = CliRunner()
        first = runner.invoke(cli, ["compile", RANDOM, "--grid", "4", "--seed", "7"])
        second = runner.invoke(cli, ["compile", RANDOM, "--grid", "4", "--seed", "7"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_output_file(self, tmp_path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(cli, ["compile", BASIC, "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "#cell-1-1-1 {" in out.read_text()

    def test_invalid_tokens_exit_1(self) -> None:
        result = CliRunner().invoke(cli, ["compile", INVALID])
        assert result.exit_code == 1
        assert "Token error" in result.output

    def test_invalid_json_exit_1(self, tmp_path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = CliRunner().invoke(cli, ["compile", str(bad)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "does-not-exist.json"])
        assert result.exit_code != 0

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["-v", "compile", BASIC])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_summary(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", BASIC])
        assert result.exit_code == 0, result.output
        assert "Tokens: 4 top-level, 6 total" in result.output
        assert "Grid:  3x2" in result.output
        assert "pseudo :doodle (2 rules)" in result.output
        assert "keyframes spin [from, to]" in result.output

    def test_default_grid(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", RANDOM])
        assert result.exit_code == 0, result.output
        assert "Grid:  (default)" in result.output
        assert "cond @random (1 tokens)" in result.output

    def test_invalid_tokens(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", INVALID])
        assert result.exit_code == 1
