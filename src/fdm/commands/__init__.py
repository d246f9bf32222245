"""fdm subcommands.

:func:`register_commands` imports each command module only when the root
group is assembled, so importing :mod:`fdm.commands` stays cheap.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

# (module, attribute) for every top-level command, in help order.
_COMMANDS: tuple[tuple[str, str], ...] = (
    ("fdm.commands.validate", "validate"),
    ("fdm.commands.validate", "constructors"),
    ("fdm.commands.classify", "classify"),
    ("fdm.commands.build", "build"),
    ("fdm.commands.play", "play"),
)


def register_commands(cli: click.Group) -> None:
    for module_name, attr in _COMMANDS:
        cli.add_command(getattr(import_module(module_name), attr))
