"""Command group: assemble products with type-state builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from fdm.commands._base import FdmGroup

if TYPE_CHECKING:
    from fdm.commands._context import AppContext


@click.group(cls=FdmGroup)
def build() -> None:
    """Build products step by step."""


@build.command(
    examples="""\
  fdm build person --age 42 --name Ada
  fdm build person --age 42""",
)
@click.option("--age", type=int, default=None, help="Sets the AgeSet mark.")
@click.option("--name", default=None, help="Sets the NameSet mark.")
@click.pass_obj
def person(app: AppContext, age: int | None, name: str | None) -> None:
    """Build a Person; fails unless both age and name are given."""
    steps: list[tuple[str, Any]] = []
    if age is not None:
        steps.append(("age", age))
    if name is not None:
        steps.append(("name", name))
    app.emit(app.service.build_person(steps))
