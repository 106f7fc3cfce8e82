"""Command: compare two dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jpdatetime.commands._base import JpdtCommand

if TYPE_CHECKING:
    from jpdatetime.commands._context import AppContext


@click.command(
    cls=JpdtCommand,
    examples="""\
  jpdt compare 2024-03-01 2024-03-10
  jpdt compare 2024-03-01 2024/03/01
  jpdt -q compare 2024-03-10 2024-03-01""",
)
@click.argument("value")
@click.argument("other")
@click.pass_obj
def compare(app: AppContext, value: str, other: str) -> None:
    """Compare VALUE with OTHER: is_before, days_diff, is_same_date."""
    app.emit(app.service.compare(value, other))
