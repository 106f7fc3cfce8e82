"""Command: move a date by whole days."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jpdatetime.commands._base import JpdtCommand

if TYPE_CHECKING:
    from jpdatetime.commands._context import AppContext


@click.command(
    cls=JpdtCommand,
    examples="""\
  jpdt shift 2024-03-01 7
  jpdt shift 2024-03-01 7 --back
  jpdt -q shift "2024-12-31 23:00" 1
  jpdt shift -- 2024-03-01 -3""",
)
@click.argument("value")
@click.argument("days", type=int)
@click.option("--back", is_flag=True, help="Subtract DAYS instead of adding them.")
@click.pass_obj
def shift(app: AppContext, value: str, days: int, back: bool) -> None:
    """Shift VALUE forward (or back) by DAYS days in Tokyo time."""
    app.emit(app.service.shift(value, days, back=back))
