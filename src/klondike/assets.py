"""Lookup keys and messages shared by presentation layers."""

from __future__ import annotations

from klondike.cards import Card, Rank
from klondike.commands import RejectReason

CARD_BACK_KEY = "cardback"

_RANK_NAMES = {
    Rank.ACE: "ace",
    Rank.TWO: "two",
    Rank.THREE: "three",
    Rank.FOUR: "four",
    Rank.FIVE: "five",
    Rank.SIX: "six",
    Rank.SEVEN: "seven",
    Rank.EIGHT: "eight",
    Rank.NINE: "nine",
    Rank.TEN: "ten",
    Rank.JACK: "jack",
    Rank.QUEEN: "queen",
    Rank.KING: "king",
}

ALERT_TEXT = {
    RejectReason.ILLEGAL_TABLEAU_MOVE: "Invalid move!",
    RejectReason.ILLEGAL_FOUNDATION_MOVE: "Invalid move!",
    RejectReason.STOCK_CYCLES_EXHAUSTED: "No more stock cycles!",
}


def card_asset_key(card: Card) -> str:
    """Image key in the ``<rank>of<suit>s`` form, e.g. ``queenofhearts``."""
    return f"{_RANK_NAMES[card.rank]}of{card.suit.value}s"


def alert_text(reason: RejectReason) -> str:
    return ALERT_TEXT[reason]
