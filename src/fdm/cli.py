"""The ``fdm`` entry point: global flags, then one subcommand."""

from __future__ import annotations

import click

from fdm import __version__
from fdm.commands import register_commands
from fdm.commands._context import AppContext
from fdm.config.settings import FdmSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name="fdm")
@click.option("-c", "--config", "config_path", metavar="PATH", help="Use this fdm.toml.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR lines.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug events to stderr.")
@click.option("--log-json", is_flag=True, help="Log as JSON lines instead of text.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """fdm: smart constructors, variant builders, and type-state builders."""
    ctx.obj = AppContext(FdmSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
