"""Subcommand modules for jpdt.

Provides register_commands() which uses deferred imports to keep
``jpdt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from jpdatetime.commands.compare import compare
    from jpdatetime.commands.new_year import new_year
    from jpdatetime.commands.shift import shift
    from jpdatetime.commands.show import show
    from jpdatetime.commands.slots import slots

    cli.add_command(show)
    cli.add_command(shift)
    cli.add_command(compare)
    cli.add_command(slots)
    cli.add_command(new_year)
