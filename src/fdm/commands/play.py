"""Command: play the text adventure."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fdm.commands._base import FdmCommand
from fdm.game.loop import run_loop
from fdm.game.world import default_world

if TYPE_CHECKING:
    from fdm.commands._context import AppContext


@click.command(
    cls=FdmCommand,
    examples="""\
  fdm play
  printf 'look\\ntake sword\\ngo cellar\\nfight rat\\nquit\\n' | fdm play""",
)
@click.option("--start", default=None, help="Starting location (overrides [game] start).")
@click.pass_obj
def play(app: AppContext, start: str | None) -> None:
    """Play a short text adventure. Type 'quit' or 'exit' to stop."""
    game = app.settings.game
    try:
        state = default_world(start or game.start)
    except KeyError as exc:
        raise click.BadParameter(f"unknown location {exc}", param_hint="--start") from exc

    stdin = click.get_text_stream("stdin")

    def read() -> str | None:
        if stdin.isatty():
            click.echo(game.prompt, nl=False)
        line = stdin.readline()
        return line if line else None

    run_loop(state, read=read, write=click.echo)
