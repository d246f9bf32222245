"""Tests for world state transitions."""

import pytest

from fdm.game.commands import Drop, Fight, Go, Look, LookAt, Quit, Take
from fdm.game.world import (
    CharClass,
    Character,
    Food,
    HealingPotion,
    Item,
    Weapon,
    damage,
    default_world,
    describe,
    describe_item,
    process,
)


@pytest.fixture
def world():
    return default_world()


class TestItems:
    def test_describe_each_kind(self) -> None:
        assert describe_item(Item("axe", Weapon(7, 3))) == "axe: a weapon (damage 7, durability 3)"
        assert describe_item(Item("pie", Food(4))) == "pie: food (+4 energy)"
        assert describe_item(Item("elixir", HealingPotion(9))) == (
            "elixir: a healing potion (+9 health)"
        )

    def test_damage(self) -> None:
        assert damage(Item("axe", Weapon(7, 3))) == 7
        assert damage(Item("pie", Food(4))) == 1

    def test_attack_uses_best_item(self) -> None:
        hero = Character(
            "hero",
            10,
            CharClass.WIZARD,
            inventory=(Item("pie", Food(1)), Item("axe", Weapon(7, 1))),
        )
        assert hero.attack == 7
        assert Character("bare", 10, CharClass.WIZARD).attack == 1


class TestDescribe:
    def test_hall(self, world) -> None:
        assert describe(world) == (
            "Hall: A draughty stone hall.\nYou see: sword\nExits: cellar, garden"
        )


class TestProcess:
    def test_quit_ends_game(self, world) -> None:
        assert process(world, Quit()) == ("You quit the game.", None)

    def test_look(self, world) -> None:
        output, state = process(world, Look())
        assert output == describe(world)
        assert state == world

    def test_look_at_item(self, world) -> None:
        output, _ = process(world, LookAt("sword"))
        assert output == "sword: a weapon (damage 5, durability 10)"

    def test_look_at_nothing(self, world) -> None:
        assert process(world, LookAt("dragon")) == ("There is no dragon here.", world)

    def test_go(self, world) -> None:
        output, state = process(world, Go("garden"))
        assert state is not None
        assert state.location == "garden"
        assert output.startswith("Garden: ")

    def test_go_invalid(self, world) -> None:
        assert process(world, Go("attic")) == ("You cannot go to attic from here.", world)

    def test_take_and_drop(self, world) -> None:
        output, taken = process(world, Take("sword"))
        assert output == "You take the sword."
        assert taken is not None
        assert [i.name for i in taken.player.inventory] == ["sword"]
        assert taken.here.items == ()
        assert [i.name for i in world.here.items] == ["sword"]

        output, dropped = process(taken, Drop("sword"))
        assert output == "You drop the sword."
        assert dropped is not None
        assert dropped.player.inventory == ()
        assert [i.name for i in dropped.here.items] == ["sword"]

    def test_take_missing(self, world) -> None:
        assert process(world, Take("apple")) == ("There is no apple to take.", world)

    def test_drop_missing(self, world) -> None:
        assert process(world, Drop("apple")) == ("You are not carrying apple.", world)

    def test_fight_bare_handed(self) -> None:
        cellar = default_world("cellar")
        output, state = process(cellar, Fight("rat"))
        assert output == "You hit the rat; it has 5 health left."
        assert state is not None
        assert state.here.npcs[0].health == 5

    def test_fight_with_sword(self, world) -> None:
        _, armed = process(world, Take("sword"))
        _, cellar = process(armed, Go("cellar"))
        output, hit = process(cellar, Fight("rat"))
        assert output == "You hit the rat; it has 1 health left."
        output, won = process(hit, Fight("rat"))
        assert output == "You defeat the rat."
        assert won is not None
        assert won.here.npcs == ()

    def test_fight_nobody(self, world) -> None:
        assert process(world, Fight("rat")) == ("There is no rat to fight.", world)


def test_unknown_start() -> None:
    with pytest.raises(KeyError):
        default_world("attic")
