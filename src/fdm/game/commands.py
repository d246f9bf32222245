"""Command vocabulary and line parser.

Grammar (case-insensitive, whitespace-separated)::

    go <where> | look | look at <what> | take <item> | drop <item>
    | fight <who> | quit | exit

Unrecognized lines parse to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Look:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class LookAt:
    what: str


@dataclass(frozen=True)
class Go:
    where: str


@dataclass(frozen=True)
class Take:
    item: str


@dataclass(frozen=True)
class Drop:
    item: str


@dataclass(frozen=True)
class Fight:
    who: str


Command = Look | Quit | LookAt | Go | Take | Drop | Fight


def parse_command(line: str) -> Command | None:
    """Parse one input line into a command.

    Examples:
        >>> parse_command("  Look AT  sword ")
        LookAt(what='sword')
        >>> parse_command("dance") is None
        True
    """
    match line.strip().lower().split():
        case ["go", where]:
            return Go(where)
        case ["look"]:
            return Look()
        case ["look", "at", what]:
            return LookAt(what)
        case ["take", item]:
            return Take(item)
        case ["drop", item]:
            return Drop(item)
        case ["fight", who]:
            return Fight(who)
        case ["quit"] | ["exit"]:
            return Quit()
        case _:
            return None
