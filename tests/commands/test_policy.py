"""Tests for the policy CLI group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from credcheck.cli import cli

LAYOUTS = "[layouts.strict]\nmin_length = 16\nmax_length = 64\n\n[layouts.pin]\nmin_length = 4\n"


@pytest.fixture
def configured(_isolated_config: Path) -> Path:
    (_isolated_config / "credcheck.toml").write_text(LAYOUTS)
    return _isolated_config


@pytest.mark.usefixtures("_isolated_config")
class TestPolicyShow:
    def test_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["policy", "show"])
        assert result.exit_code == 0
        assert "layout: default" in result.output
        assert "min_length: 8" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "policy", "show"])
        assert result.exit_code == 0
        assert json.loads(result.output)["policy"]["max_length"] == 100

    def test_unknown_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["policy", "show", "--layout", "nope"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("configured")
class TestPolicyWithLayouts:
    def test_show_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "policy", "show", "--layout", "strict"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["layout"] == "strict"
        assert data["policy"]["min_length"] == 16

    def test_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "policy", "list"])
        assert result.exit_code == 0
        assert result.output.split() == ["default", "pin", "strict"]

    def test_list_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "policy", "list"])
        data = json.loads(result.output)
        assert data["pin"]["min_length"] == 4
        assert data["default"]["min_length"] == 8


@pytest.mark.usefixtures("_isolated_config")
class TestBrokenSettings:
    def test_unknown_key_in_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "credcheck.toml").write_text("[policy]\nminlength = 10\n")
        result = cli_runner.invoke(cli, ["policy", "show"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.stderr
        assert "minlength" in result.stderr

    def test_bad_env_value(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CREDCHECK_POLICY__MIN_LENGTH", "abc")
        result = cli_runner.invoke(cli, ["policy", "show"])
        assert result.exit_code == 2
        assert "min_length" in result.stderr

    def test_evaluate_stops_before_validation(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "credcheck.toml").write_text("[layouts.strict]\nmaxlen = 64\n")
        result = cli_runner.invoke(
            cli, ["evaluate", "-e", "bob@gmail.com", "-p", "12345678a", "-C", "12345678a"]
        )
        assert result.exit_code == 2
        assert "Credentials accepted" not in result.output
