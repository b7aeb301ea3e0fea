"""Tests for `vetted person`."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from vetted.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestPersonCommand:
    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "25"])
        assert result.exit_code == 0, result.output
        assert "name: Peter Parker" in result.output
        assert "age: 25" in result.output

    def test_single_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "200"])
        assert result.exit_code == 1
        assert "AgeOutOfRange" in result.output
        assert "NameLengthOutOfRange" not in result.output

    def test_accumulates_failures(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "person", "--name", "", "--age", "200"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "VALIDATION_FAILED"
        assert data["error"]["detail"]["errors"] == ["NameLengthOutOfRange", "AgeOutOfRange"]

    def test_json_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "person", "--name", "Peter Parker", "--age", "25"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["person"] == {"name": "Peter Parker", "age": 25}

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "person", "--name", "Peter Parker", "--age", "25"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: validate_person"

    def test_non_integer_age_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "old"])
        assert result.exit_code == 2

    def test_missing_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "--age", "25"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_cwd")
class TestPersonCommandConfig:
    def test_toml_bounds_apply(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[rules.age]\nmaximum = 150\n")
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "140"])
        assert result.exit_code == 0, result.output

    def test_env_bounds_apply(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VETTED_RULES__NAME__MAX_LENGTH", "5")
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "25"])
        assert result.exit_code == 1
        assert "NameLengthOutOfRange" in result.output

    def test_ill_formed_bounds(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[rules.age]\nminimum = 10\nmaximum = 5\n")
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "7"])
        assert result.exit_code == 1
        assert "Invalid rule configuration" in result.output

    def test_invalid_toml(self, cli_runner: CliRunner, write_config: Callable[[str], Path]) -> None:
        write_config("[rules.age\n")
        result = cli_runner.invoke(cli, ["person", "--name", "Peter Parker", "--age", "25"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output
