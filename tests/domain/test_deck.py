"""Tests for playing cards."""

import pytest

from fdm.domain.deck import PlayingCard, Suit, color, hand_points, make_card
from fdm.domain.result import Err, Ok, RuleViolated


def _card(points: int, suit: Suit) -> PlayingCard:
    result = make_card(points, suit)
    assert isinstance(result, Ok), result
    return result.value


class TestMakeCard:
    def test_points_and_suit_kept(self) -> None:
        card = _card(12, Suit.HEARTS)
        assert card.points.value == 12
        assert card.suit is Suit.HEARTS

    def test_text_points_parsed(self) -> None:
        assert _card("7", Suit.CLUBS).points.value == 7  # type: ignore[arg-type]

    @pytest.mark.parametrize(("points", "rule"), [(0, ">=1"), (14, "<=13"), ("ace", "integer")])
    def test_invalid_points(self, points: object, rule: str) -> None:
        assert make_card(points, Suit.SPADES) == Err(RuleViolated(rule=rule, tag="CardPoints"))


class TestSuits:
    @pytest.mark.parametrize(
        ("suit", "expected"),
        [
            (Suit.HEARTS, "red"),
            (Suit.DIAMONDS, "red"),
            (Suit.CLUBS, "black"),
            (Suit.SPADES, "black"),
        ],
    )
    def test_color(self, suit: Suit, expected: str) -> None:
        assert color(suit) == expected

    def test_hand_points(self) -> None:
        hand = [_card(1, Suit.CLUBS), _card(10, Suit.HEARTS), _card(13, Suit.SPADES)]
        assert hand_points(hand) == 24
        assert hand_points([]) == 0
