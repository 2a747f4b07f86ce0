"""Command: interval membership, including windows that wrap midnight."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daytime.commands._base import DaytimeCommand

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime between 12:00:00 09:00:00 17:00:00
  daytime between 23:30:00 23:00:00 01:00:00
  daytime between 02:00:00 --window quiet
  daytime -q between 00:30:00 23:00:00 01:00:00""",
)
@click.argument("daytime")
@click.argument("start", required=False)
@click.argument("end", required=False)
@click.option("-w", "--window", default=None, help="Named window from daytime.toml.")
@click.pass_obj
def between(
    app: AppContext,
    daytime: str,
    start: str | None,
    end: str | None,
    window: str | None,
) -> None:
    """Check whether DAYTIME lies in [START, END] (or a configured window)."""
    if window is not None:
        if start is not None or end is not None:
            raise click.UsageError("Give either START END or --window, not both.")
        app.emit(app.service.in_window(daytime, window))
        return
    if start is None or end is None:
        raise click.UsageError("START and END are required unless --window is given.")
    app.emit(app.service.between(daytime, start, end))
