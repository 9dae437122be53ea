# rules.py - placement legality for tableau and foundation piles
from __future__ import annotations

from typing import Optional

from klondike.cards import Card, Rank


def is_legal_tableau_move(destination_top: Optional[Card], moving: Card, king_on_empty: bool = False) -> bool:
    """
    ``moving`` may go on ``destination_top`` when the top is one rank higher
    and of the other colour. An Ace never takes a card. An empty column takes
    anything unless ``king_on_empty`` asks for the stricter Klondike rule.
    """
    if destination_top is None:
        return moving.rank == Rank.KING if king_on_empty else True
    if destination_top.rank == Rank.ACE:
        return False
    if destination_top.color == moving.color:
        return False
    return destination_top.rank == moving.rank + 1


def is_legal_foundation_move(destination_top: Optional[Card], moving: Card) -> bool:
    """Foundations build up by suit from the Ace."""
    if destination_top is None:
        return moving.rank == Rank.ACE
    return moving.suit == destination_top.suit and moving.rank == destination_top.rank + 1
