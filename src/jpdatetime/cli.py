"""Root CLI group for jpdt with global flags and command registration."""

from __future__ import annotations

import click

from jpdatetime import __version__
from jpdatetime.commands import register_commands
from jpdatetime.commands._context import AppContext
from jpdatetime.config.settings import JpdtSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="jpdt")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """jpdt — Japanese date formatting, arithmetic, and slots in Tokyo time."""
    settings = JpdtSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
