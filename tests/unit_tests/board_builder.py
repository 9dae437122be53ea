"""Helpers for laying out specific boards in engine tests."""

from typing import Iterable, Optional, Sequence

from klondike.cards import RANK_TO_TEXT, Card, Rank, Suit, all_cards
from klondike.engine import GameState, KlondikeEngine
from klondike.settings import Settings
from klondike.zones import WASTE, Faces, Stock, Tableau, ZoneKind, ZoneRef

_SUIT_LETTERS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}
_TEXT_TO_RANK = {text: rank for rank, text in RANK_TO_TEXT.items()}


def card(code: str) -> Card:
    """``"7H"`` -> seven of hearts, ``"10S"`` -> ten of spades."""
    return Card(_SUIT_LETTERS[code[-1]], Rank(_TEXT_TO_RANK[code[:-1]]))


def cards(codes: Iterable[str]):
    return [card(c) for c in codes]


def build_engine(
    tableau: Sequence[Sequence[str]] = (),
    waste: Sequence[str] = (),
    foundations: Sequence[Sequence[str]] = (),
    stock: Optional[Sequence[str]] = None,
    face_down: Sequence[str] = (),
    settings: Optional[Settings] = None,
) -> KlondikeEngine:
    """
    Engine holding exactly the given layout; piles list bottom to top.
    Every card not placed anywhere goes to the stock unless ``stock`` is given.
    """
    engine = KlondikeEngine(settings, seed=0)
    columns = [Tableau(cards(col)) for col in tableau]
    columns += [Tableau() for _ in range(7 - len(columns))]
    hidden = set(cards(face_down))
    placed = [c for col in columns for c in col] + cards(waste) + [c for f in foundations for c in cards(f)]
    if stock is None:
        rest = [c for c in all_cards() if c not in placed]
    else:
        rest = cards(stock)
    state = GameState(columns, Stock(rest), Faces(c for c in placed if c not in hidden))
    for c in cards(waste):
        state.waste.push_top(c)
        state.locations[c] = WASTE
    for i, f in enumerate(foundations):
        for c in cards(f):
            state.foundations[i].push_top(c)
            state.locations[c] = ZoneRef(ZoneKind.FOUNDATION, i)
    engine.state = state
    return engine


def full_suit(letter: str, upto: int = 13):
    return [f"{RANK_TO_TEXT[r]}{letter}" for r in range(1, upto + 1)]
