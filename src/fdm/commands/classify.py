"""Command: classify loosely typed fields into exactly one variant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fdm.commands._base import FdmCommand, parse_assignments
from fdm.services.modeling import CLASSIFIERS

if TYPE_CHECKING:
    from fdm.commands._context import AppContext


@click.command(
    cls=FdmCommand,
    examples="""\
  fdm classify origin -f device_id=d1
  fdm classify activity -f user_id=u1 -f click=/pricing
  fdm classify ad -f page_url=/shop -f element_id=buy
  fdm classify card -f digit16=4111111111111111 -f security_code4=1234
  fdm classify document -f owner_ids=alice,bob""",
)
@click.argument("model", type=click.Choice(sorted(CLASSIFIERS)))
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    metavar="KEY=VALUE",
    help="Raw field (repeatable).",
)
@click.pass_obj
def classify(app: AppContext, model: str, fields: tuple[str, ...]) -> None:
    """Classify raw fields into one variant of MODEL."""
    app.emit(app.service.classify(model, parse_assignments(fields)))
