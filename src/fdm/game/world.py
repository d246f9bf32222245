"""Game world model and command processing.

All world values are frozen; :func:`process` returns a new state rather
than mutating the old one. ``None`` as the next state ends the game.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TypeVar, assert_never

from fdm.game.commands import Command, Drop, Fight, Go, Look, LookAt, Quit, Take

# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Weapon:
    damage: int
    durability: int


@dataclass(frozen=True)
class Food:
    energy_boost: int


@dataclass(frozen=True)
class HealingPotion:
    health_boost: int


ItemKind = Weapon | Food | HealingPotion


@dataclass(frozen=True)
class Item:
    name: str
    kind: ItemKind


def describe_item(item: Item) -> str:
    match item.kind:
        case Weapon(damage=damage, durability=durability):
            return f"{item.name}: a weapon (damage {damage}, durability {durability})"
        case Food(energy_boost=boost):
            return f"{item.name}: food (+{boost} energy)"
        case HealingPotion(health_boost=boost):
            return f"{item.name}: a healing potion (+{boost} health)"
        case _:
            assert_never(item.kind)


def damage(item: Item) -> int:
    """Damage dealt when fighting with *item*; non-weapons hit like bare hands."""
    match item.kind:
        case Weapon(damage=dealt):
            return dealt
        case Food() | HealingPotion():
            return 1
        case _:
            assert_never(item.kind)


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------


class CharClass(StrEnum):
    WIZARD = "wizard"
    WARRIOR = "warrior"


class CharStatus(StrEnum):
    NORMAL = "normal"
    POISONED = "poisoned"
    CURSED = "cursed"


@dataclass(frozen=True)
class Character:
    name: str
    health: int
    char_class: CharClass
    status: CharStatus = CharStatus.NORMAL
    inventory: tuple[Item, ...] = ()

    @property
    def attack(self) -> int:
        return max((damage(i) for i in self.inventory), default=1)


# ---------------------------------------------------------------------------
# Locations and state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Location:
    name: str
    description: str
    items: tuple[Item, ...] = ()
    npcs: tuple[Character, ...] = ()
    exits: tuple[str, ...] = ()


@dataclass(frozen=True)
class State:
    location: str
    player: Character
    locations: dict[str, Location] = field(default_factory=dict)

    @property
    def here(self) -> Location:
        return self.locations[self.location]

    def with_location(self, location: Location) -> State:
        return replace(self, locations={**self.locations, location.name: location})


Named = TypeVar("Named", Item, Character)


def _find(things: tuple[Named, ...], name: str) -> Named | None:
    for thing in things:
        if thing.name.lower() == name:
            return thing
    return None


def _without(things: tuple[Named, ...], target: Named) -> tuple[Named, ...]:
    return tuple(t for t in things if t is not target)


def describe(state: State) -> str:
    here = state.here
    lines = [f"{here.name.title()}: {here.description}"]
    if here.items:
        lines.append("You see: " + ", ".join(i.name for i in here.items))
    if here.npcs:
        lines.append("Present: " + ", ".join(c.name for c in here.npcs))
    if here.exits:
        lines.append("Exits: " + ", ".join(here.exits))
    return "\n".join(lines)


def process(state: State, command: Command) -> tuple[str, State | None]:
    """Apply *command* to *state*; a ``None`` state ends the game."""
    here = state.here
    match command:
        case Quit():
            return "You quit the game.", None
        case Look():
            return describe(state), state
        case LookAt(what=what):
            item = _find(here.items, what) or _find(state.player.inventory, what)
            if item is not None:
                return describe_item(item), state
            npc = _find(here.npcs, what)
            if npc is not None:
                return f"{npc.name}: a {npc.char_class} with {npc.health} health.", state
            return f"There is no {what} here.", state
        case Go(where=where):
            if where not in here.exits or where not in state.locations:
                return f"You cannot go to {where} from here.", state
            moved = replace(state, location=where)
            return describe(moved), moved
        case Take(item=name):
            item = _find(here.items, name)
            if item is None:
                return f"There is no {name} to take.", state
            player = replace(state.player, inventory=(*state.player.inventory, item))
            room = replace(here, items=_without(here.items, item))
            return f"You take the {item.name}.", replace(state.with_location(room), player=player)
        case Drop(item=name):
            item = _find(state.player.inventory, name)
            if item is None:
                return f"You are not carrying {name}.", state
            player = replace(state.player, inventory=_without(state.player.inventory, item))
            room = replace(here, items=(*here.items, item))
            return f"You drop the {item.name}.", replace(state.with_location(room), player=player)
        case Fight(who=who):
            npc = _find(here.npcs, who)
            if npc is None:
                return f"There is no {who} to fight.", state
            remaining = npc.health - state.player.attack
            if remaining <= 0:
                room = replace(here, npcs=_without(here.npcs, npc))
                return f"You defeat the {npc.name}.", state.with_location(room)
            hurt = replace(npc, health=remaining)
            room = replace(here, npcs=tuple(hurt if c is npc else c for c in here.npcs))
            return (
                f"You hit the {npc.name}; it has {remaining} health left.",
                state.with_location(room),
            )
        case _:
            assert_never(command)


def default_world(start: str = "hall") -> State:
    """A three-room world for interactive play."""
    hall = Location(
        name="hall",
        description="A draughty stone hall.",
        items=(Item("sword", Weapon(damage=5, durability=10)),),
        exits=("cellar", "garden"),
    )
    cellar = Location(
        name="cellar",
        description="Damp and dark. Something shuffles in the corner.",
        items=(Item("potion", HealingPotion(health_boost=20)),),
        npcs=(Character("rat", health=6, char_class=CharClass.WARRIOR),),
        exits=("hall",),
    )
    garden = Location(
        name="garden",
        description="An overgrown garden under a grey sky.",
        items=(Item("apple", Food(energy_boost=5)),),
        exits=("hall",),
    )
    locations = {loc.name: loc for loc in (hall, cellar, garden)}
    if start not in locations:
        raise KeyError(start)
    player = Character("player", health=30, char_class=CharClass.WARRIOR)
    return State(location=start, player=player, locations=locations)
