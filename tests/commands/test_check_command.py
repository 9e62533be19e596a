"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from passfields import __version__
from passfields.cli import cli

_PASS = {
    "eventTicket": {
        "primaryFields": [{"key": "event", "label": "Event", "value": "Concert"}],
        "secondaryFields": [
            {"key": "event", "label": "Dup", "value": "Again"},
            {"key": "seat", "label": "Seat", "value": "A1"},
        ],
    }
}


@pytest.fixture
def pass_json(tmp_path: Path) -> Path:
    path = tmp_path / "pass.json"
    path.write_text(json.dumps(_PASS), encoding="utf-8")
    return path


@pytest.mark.usefixtures("_isolated_cwd")
class TestCheckCommand:
    def test_human_output(self, cli_runner: CliRunner, pass_json: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(pass_json)])
        assert result.exit_code == 0
        assert "OK: check" in result.stdout
        assert "WARNING: Cannot add field with key 'event'" in result.stderr

    def test_json_output(self, cli_runner: CliRunner, pass_json: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(pass_json)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["accepted"] == 2
        assert data["data"]["rejected"] == 1
        assert data["data"]["groups"]["secondaryFields"]["keys"] == ["seat"]

    def test_strict_exits_nonzero(self, cli_runner: CliRunner, pass_json: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(pass_json), "--strict"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "REJECTED_FIELDS" in result.stderr

    def test_strict_from_config_file(
        self, cli_runner: CliRunner, pass_json: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "passfields.toml").write_text("[check]\nfail_on_rejected = true\n")
        result = cli_runner.invoke(cli, ["check", str(pass_json)])
        assert result.exit_code == 1

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--examples"])
        assert result.exit_code == 0
        assert "passfields check pass.json --strict" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestConfigBesidePass:
    @pytest.fixture
    def nested_pass(self, tmp_path: Path) -> Path:
        folder = tmp_path / "passes" / "concert"
        folder.mkdir(parents=True)
        (folder / "passfields.toml").write_text("[check]\nfail_on_rejected = true\n")
        path = folder / "pass.json"
        path.write_text(json.dumps(_PASS), encoding="utf-8")
        return path

    def test_config_next_to_pass_is_used(self, cli_runner: CliRunner, nested_pass: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(nested_pass)])
        assert result.exit_code == 1
        assert "REJECTED_FIELDS" in result.stderr

    def test_explicit_config_wins(
        self, cli_runner: CliRunner, nested_pass: Path, tmp_path: Path
    ) -> None:
        lenient = tmp_path / "lenient.toml"
        lenient.write_text("[check]\nfail_on_rejected = false\n")
        result = cli_runner.invoke(cli, ["-c", str(lenient), "check", str(nested_pass)])
        assert result.exit_code == 0

    def test_cli_flags_survive_rediscovery(
        self, cli_runner: CliRunner, nested_pass: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(nested_pass)])
        assert result.exit_code == 1
        assert '"code": "REJECTED_FIELDS"' in result.stderr
        assert "ERROR: check" not in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootGroup:
    def test_help_without_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "check" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
