"""Playing cards (extract product).

Every suit carries points with the same meaning, so a card is one record
with ``points`` and a closed ``suit``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, assert_never

from fdm.domain.constructors import CARD_POINTS
from fdm.domain.result import Err, Ok, Result, ValidationFailure
from fdm.domain.validated import Validated


class Suit(StrEnum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    SPADES = "spades"
    HEARTS = "hearts"


@dataclass(frozen=True)
class PlayingCard:
    points: Validated[int]
    suit: Suit


def make_card(points: Any, suit: Suit) -> Result[PlayingCard, ValidationFailure]:
    match CARD_POINTS(points):
        case Ok(checked):
            return Ok(PlayingCard(points=checked, suit=suit))
        case Err() as failed:
            return failed


def color(suit: Suit) -> str:
    match suit:
        case Suit.DIAMONDS | Suit.HEARTS:
            return "red"
        case Suit.CLUBS | Suit.SPADES:
            return "black"
        case _:
            assert_never(suit)


def hand_points(cards: Iterable[PlayingCard]) -> int:
    return sum(card.points.value for card in cards)
