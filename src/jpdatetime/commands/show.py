"""Command: render a date in every supported format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jpdatetime.commands._base import JpdtCommand

if TYPE_CHECKING:
    from jpdatetime.commands._context import AppContext


@click.command(
    cls=JpdtCommand,
    examples="""\
  jpdt show
  jpdt show 2024-03-01
  jpdt show "2024/03/01 09:05:30"
  jpdt --json show 2024-03-01""",
)
@click.argument("value", required=False)
@click.pass_obj
def show(app: AppContext, value: str | None) -> None:
    """Show VALUE (default: now) in every Japanese and ISO format."""
    app.emit(app.service.show(value))
