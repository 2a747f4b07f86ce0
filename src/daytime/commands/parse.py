"""Command: parse and inspect a daytime."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daytime.commands._base import DaytimeCommand

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime parse 13:45:00
  daytime parse 3600
  daytime parse 24:00:00
  daytime --json parse 86400""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse TEXT (HH:MM:SS or seconds since midnight) and show its parts."""
    app.emit(app.service.parse(text))
