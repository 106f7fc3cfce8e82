"""Command: list appointment entry slots for a day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jpdatetime.commands._base import JpdtCommand

if TYPE_CHECKING:
    from jpdatetime.commands._context import AppContext


@click.command(
    cls=JpdtCommand,
    examples="""\
  jpdt slots
  jpdt slots 2024-03-01
  jpdt -q slots 2024/03/01""",
)
@click.argument("date", required=False)
@click.pass_obj
def slots(app: AppContext, date: str | None) -> None:
    """List the half-hour slots 08:00-19:30 for DATE (default: today)."""
    app.emit(app.service.slots(date))
