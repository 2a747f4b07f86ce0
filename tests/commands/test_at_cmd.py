"""Tests for the at command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from daytime.cli import cli


@pytest.mark.usefixtures("workdir")
class TestAtCommand:
    def test_end_of_day_next_midnight(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "at", "24:00:00", "--date", "2025-12-31", "--tz", "UTC"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2026-01-01T00:00:00+00:00"

    def test_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "at", "13:05:00", "--date", "2025-01-10", "--layout", "%H:%M"]
        )
        assert json.loads(result.output)["data"]["formatted"] == "13:05"

    def test_reference(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "at", "12:00:00", "--date", "2025-01-10", "--ref", "2025-01-10T10:00:00"],
        )
        data = json.loads(result.output)["data"]
        assert data["since"] == 7200
        assert data["until"] == -7200

    def test_unknown_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["at", "12:00:00", "--tz", "Mars/Base"])
        assert result.exit_code == 2
        assert "Unknown time zone" in result.output

    def test_bad_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["at", "12:00:00", "--date", "10/01/2025"])
        assert result.exit_code == 2


def test_uses_configured_display(cli_runner: CliRunner, configured_workdir: Path) -> None:
    result = cli_runner.invoke(cli, ["--json", "at", "24:00:00", "--date", "2025-10-26"])
    data = json.loads(result.output)["data"]
    assert data["datetime"] == "2025-10-27T00:00:00+01:00"
    assert data["formatted"] == "2025-10-27 00:00"
