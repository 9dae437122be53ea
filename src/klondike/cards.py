# cards.py - card identity for the Klondike engine
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Color(Enum):
    RED = "red"
    BLACK = "black"


class Suit(Enum):
    CLUBS = "club"
    DIAMONDS = "diamond"
    HEARTS = "heart"
    SPADES = "spade"

    @property
    def color(self) -> Color:
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def text(self) -> str:
        return RANK_TO_TEXT[self.value]


RANK_TO_TEXT = {1: "A", 11: "J", 12: "Q", 13: "K"}
for _r in range(2, 11):
    RANK_TO_TEXT[_r] = str(_r)


@dataclass(frozen=True)
class Card:
    """One of the 52 card identities.

    Cards are plain values: face-up and selected state is tracked by the
    engine, keyed by the card itself.
    """

    suit: Suit
    rank: Rank

    @property
    def color(self) -> Color:
        return self.suit.color

    def is_red(self) -> bool:
        return self.suit.color is Color.RED

    def __repr__(self):
        return f"{self.rank.text}{self.suit.symbol}"


def all_cards():
    """Every (suit, rank) identity, suit-major."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]
