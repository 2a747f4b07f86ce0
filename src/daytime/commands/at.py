"""Command: place a daytime on a calendar date in a time zone."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from daytime.commands._base import DaytimeCommand
from daytime.config.models import resolve_zone

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


def _validate_zone(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        resolve_zone(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return value


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime at 12:30:00 --date 2025-01-10
  daytime at 24:00:00 --date 2025-10-26 --tz Europe/Berlin
  daytime at 08:00:00 --layout "%A %H:%M"
  daytime at 12:00:00 --date 2025-01-10 --ref 2025-01-10T10:00:00""",
)
@click.argument("daytime")
@click.option(
    "--date",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Calendar date (default: today).",
)
@click.option(
    "--tz",
    "zone",
    default=None,
    callback=_validate_zone,
    help="IANA time zone (default: [display] timezone).",
)
@click.option("--layout", default=None, help="strftime layout (default: [display] layout).")
@click.option(
    "--ref",
    "reference",
    type=click.DateTime(),
    default=None,
    help="Reference time; adds since/until seconds to the output.",
)
@click.pass_obj
def at(
    app: AppContext,
    daytime: str,
    on: datetime | None,
    zone: str | None,
    layout: str | None,
    reference: datetime | None,
) -> None:
    """Combine DAYTIME with a date; 24:00:00 lands on the next midnight."""
    app.emit(
        app.service.at(
            daytime,
            on=on.date() if on else None,
            zone=zone,
            layout=layout,
            reference=reference,
        )
    )
