"""Commands: validate raw values through smart constructors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fdm.commands._base import FdmCommand

if TYPE_CHECKING:
    from fdm.commands._context import AppContext


@click.command(
    cls=FdmCommand,
    examples="""\
  fdm validate Age 42
  fdm validate Email ada@example.com
  fdm --json validate Password hunter22""",
)
@click.argument("tag")
@click.argument("raw")
@click.pass_obj
def validate(app: AppContext, tag: str, raw: str) -> None:
    """Validate RAW with the smart constructor registered for TAG."""
    app.emit(app.service.validate(tag, raw))


@click.command(
    cls=FdmCommand,
    examples="""\
  fdm constructors
  fdm --json constructors""",
)
@click.pass_obj
def constructors(app: AppContext) -> None:
    """List registered smart constructors and their rules."""
    app.emit(app.service.list_constructors())
