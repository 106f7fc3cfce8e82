"""Command: New Year's Day a number of years from now."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jpdatetime.commands._base import JpdtCommand

if TYPE_CHECKING:
    from jpdatetime.commands._context import AppContext


@click.command(
    "new-year",
    cls=JpdtCommand,
    examples="""\
  jpdt new-year 1
  jpdt -q new-year 5""",
)
@click.argument("years", type=int)
@click.pass_obj
def new_year(app: AppContext, years: int) -> None:
    """Print January 1st, YEARS years after the current year."""
    app.emit(app.service.new_year(years))
