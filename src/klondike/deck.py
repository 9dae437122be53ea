# deck.py - deck construction, shuffle and the opening deal
from __future__ import annotations

from typing import List, MutableSequence, Tuple

from klondike.cards import Card, all_cards
from klondike.zones import Faces, Stock, Tableau

TABLEAU_COLUMNS = 7


def new_deck() -> List[Card]:
    """All 52 cards in suit/rank order. None of them is face-up yet."""
    return all_cards()


def shuffle(deck: MutableSequence, rng) -> None:
    """
    In-place Fisher-Yates shuffle.
    ``rng`` only needs ``randrange``; pass a ``random.Random`` for seeded
    games or a scripted stand-in for exact sequences.
    """
    n = len(deck)
    for i in range(n):
        j = rng.randrange(n - i)
        last = n - 1 - i
        deck[j], deck[last] = deck[last], deck[j]


def deal(deck: List[Card]) -> Tuple[List[Tableau], Stock, Faces]:
    """
    Lay out the board from a shuffled deck. Column ``i`` gets ``i + 1`` cards
    drawn from the end of the deck, the last one face-up; the rest of the
    deck becomes the face-down stock.
    """
    deck = list(deck)
    faces = Faces()
    tableau = []
    for col in range(TABLEAU_COLUMNS):
        t = Tableau()
        for _ in range(col + 1):
            t.push_top(deck.pop())
        faces.turn_up(t.peek_top())
        tableau.append(t)
    return tableau, Stock(deck), faces
