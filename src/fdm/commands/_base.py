"""Click base classes shared by fdm commands.

A command declared with ``cls=FdmCommand`` (or on an :class:`FdmGroup`) may
pass ``examples="..."``. It then accepts ``--examples``, which prints that
text and exits before any argument is checked.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit(0)


_EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_examples,
    help="Print usage examples and exit.",
)


class _WithExamples:
    examples: str | None = None

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params: list[click.Parameter] = super().get_params(ctx)  # type: ignore[misc]
        if self.examples:
            return [*params, _EXAMPLES_OPTION]
        return params


class FdmCommand(_WithExamples, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples


class FdmGroup(_WithExamples, click.Group):
    """Group whose ``@group.command()`` subcommands are :class:`FdmCommand`."""

    command_class = FdmCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples


def parse_assignments(values: tuple[str, ...], param_hint: str = "--field") -> dict[str, str]:
    """Parse ``key=value`` pairs; later keys win.

    Raises:
        click.BadParameter: If an item has no ``=`` or an empty key.
    """
    fields: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint=param_hint)
        fields[key] = value
    return fields
