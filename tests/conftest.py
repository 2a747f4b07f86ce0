"""Shared pytest fixtures for daytime tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from daytime.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME

SAMPLE_CONFIG = """\
[display]
timezone = "Europe/Berlin"
layout = "%Y-%m-%d %H:%M"

[windows]
quiet = { start = "23:00:00", end = "07:00:00" }
office = { start = "09:00:00", end = "17:30:00" }
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's DAYTIME_* environment out of the tests."""
    for name in (CONFIG_ENV_VAR, "DAYTIME_DISPLAY__TIMEZONE", "DAYTIME_DISPLAY__LAYOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """AppContext reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Change CWD to an empty temp directory so no daytime.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def configured_workdir(workdir: Path) -> Path:
    """Temp CWD containing the sample daytime.toml."""
    (workdir / CONFIG_FILENAME).write_text(SAMPLE_CONFIG, encoding="utf-8")
    return workdir
