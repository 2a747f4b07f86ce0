"""Subcommand modules for daytime.

Provides register_commands() which uses deferred imports to keep
``daytime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from daytime.commands.arithmetic import add, diff, div, mod, mul, sub
    from daytime.commands.at import at
    from daytime.commands.between import between
    from daytime.commands.parse import parse

    cli.add_command(parse)
    for command in (add, sub, mul, div, mod, diff):
        cli.add_command(command)
    cli.add_command(between)
    cli.add_command(at)
