"""Commands: daytime arithmetic with day-boundary bookkeeping.

Negative amounts must follow ``--`` so Click does not read them as options:
``daytime add -- 01:00:00 -7200``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daytime.commands._base import DaytimeCommand

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


def _shift_command(op: str, help_text: str, examples: str) -> click.Command:
    """Build an ``add``/``sub``/``mul`` command; they differ only in the operation."""

    @click.command(name=op, cls=DaytimeCommand, examples=examples, help=help_text)
    @click.argument("daytime")
    @click.argument("amount", type=int)
    @click.pass_obj
    def command(app: AppContext, daytime: str, amount: int) -> None:
        app.emit(app.service.shift(op, daytime, amount))

    return command


add = _shift_command(
    "add",
    "Add AMOUNT seconds to DAYTIME and report days crossed.",
    """\
  daytime add 23:00:00 7200
  daytime add 00:00:00 86400
  daytime add -- 01:00:00 -7200""",
)

sub = _shift_command(
    "sub",
    "Subtract AMOUNT seconds from DAYTIME and report days crossed.",
    """\
  daytime sub 01:00:00 7200
  daytime sub 24:00:00 1""",
)

mul = _shift_command(
    "mul",
    "Multiply DAYTIME by AMOUNT and report days crossed.",
    """\
  daytime mul 06:00:00 4
  daytime mul -- 06:00:00 -5""",
)


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime div 12:00:00 7
  daytime div 24:00:00 3""",
)
@click.argument("daytime")
@click.argument("divisor", type=int)
@click.pass_obj
def div(app: AppContext, daytime: str, divisor: int) -> None:
    """Divide DAYTIME by DIVISOR, showing quotient and remainder."""
    app.emit(app.service.div(daytime, divisor))


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime mod 01:00:00 3601
  daytime mod 24:00:00 100""",
)
@click.argument("daytime")
@click.argument("modulus", type=int)
@click.pass_obj
def mod(app: AppContext, daytime: str, modulus: int) -> None:
    """Reduce DAYTIME modulo MODULUS seconds."""
    app.emit(app.service.mod(daytime, modulus))


@click.command(
    cls=DaytimeCommand,
    examples="""\
  daytime diff 12:00:00 01:00:00
  daytime diff 24:00:00 00:00:00
  daytime diff 01:00:00 12:00:00""",
)
@click.argument("daytime")
@click.argument("other")
@click.pass_obj
def diff(app: AppContext, daytime: str, other: str) -> None:
    """Compute DAYTIME - OTHER as seconds within a day plus days crossed."""
    app.emit(app.service.diff(daytime, other))
