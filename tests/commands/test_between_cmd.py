"""Tests for the between command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from daytime.cli import cli


@pytest.mark.usefixtures("workdir")
class TestExplicitBounds:
    @pytest.mark.parametrize(
        "args,expected",
        [
            (["12:00:00", "09:00:00", "17:00:00"], "true"),
            (["18:00:00", "09:00:00", "17:00:00"], "false"),
            (["23:30:00", "23:00:00", "01:00:00"], "true"),
            (["24:00:00", "23:00:00", "01:00:00"], "true"),
            (["12:00:00", "23:00:00", "01:00:00"], "false"),
            (["24:00:00", "12:00:00", "24:00:00"], "true"),
        ],
    )
    def test_membership(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "between", *args])
        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_rich_output_marks_wrap(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["between", "00:30:00", "23:00:00", "01:00:00"])
        assert "wraps midnight" in result.output

    def test_missing_end(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["between", "12:00:00", "09:00:00"])
        assert result.exit_code == 2
        assert "START and END are required" in result.output

    def test_bad_bound(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["between", "12:00:00", "09:00:00", "25:00:00"])
        assert result.exit_code == 1
        assert "invalid time component" in result.output


class TestWindows:
    def test_configured_window(self, cli_runner: CliRunner, configured_workdir: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "between", "02:00:00", "--window", "quiet"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_window_shown_in_output(
        self, cli_runner: CliRunner, configured_workdir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["between", "12:00:00", "-w", "office"])
        assert result.exit_code == 0
        assert "office" in result.output
        assert "between: true" in result.output

    def test_unknown_window(self, cli_runner: CliRunner, configured_workdir: Path) -> None:
        result = cli_runner.invoke(cli, ["between", "12:00:00", "-w", "lunch"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_window_and_bounds_conflict(
        self, cli_runner: CliRunner, configured_workdir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["between", "12:00:00", "01:00:00", "-w", "quiet"])
        assert result.exit_code == 2
