# zones.py - ordered card piles and the face-up table
from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Set

from klondike.cards import Card


class ZoneKind(Enum):
    STOCK = "stock"
    WASTE = "waste"
    TABLEAU = "tableau"
    FOUNDATION = "foundation"


class ZoneRef(NamedTuple):
    kind: ZoneKind
    index: int = 0

    def __str__(self):
        if self.kind in (ZoneKind.STOCK, ZoneKind.WASTE):
            return self.kind.value
        return f"{self.kind.value}[{self.index}]"


STOCK = ZoneRef(ZoneKind.STOCK)
WASTE = ZoneRef(ZoneKind.WASTE)


class Faces:
    """Face-up flags for cards, kept apart from the card values."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._up: Set[Card] = set(cards)

    def is_face_up(self, card: Card) -> bool:
        return card in self._up

    def turn_up(self, card: Card):
        self._up.add(card)

    def turn_down(self, card: Card):
        self._up.discard(card)

    def clear(self):
        self._up.clear()

    def __len__(self):
        return len(self._up)


# ---------- Piles ----------
class Pile:
    """Ordered card sequence; the top of the pile is the end of the list."""

    kind: ZoneKind

    def __init__(self, cards: Iterable[Card] = ()):
        self.cards: List[Card] = list(cards)

    def peek_top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def push_top(self, card: Card):
        self.cards.append(card)

    def take_top(self) -> Optional[Card]:
        return self.cards.pop() if self.cards else None

    def remove_card(self, card: Card) -> bool:
        """Remove ``card`` by identity; returns False when it is not here."""
        try:
            self.cards.remove(card)
        except ValueError:
            return False
        return True

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self):
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card):
        return card in self.cards

    def __repr__(self):
        return f"{type(self).__name__}({self.cards!r})"


class Waste(Pile):
    kind = ZoneKind.WASTE


class Stock(Pile):
    kind = ZoneKind.STOCK

    def draw_top(self) -> Optional[Card]:
        return self.take_top()

    def turn_onto(self, waste: Waste, faces: Faces, count: int = 1) -> List[Card]:
        """Turn up to ``count`` cards face-up onto the waste, in draw order."""
        moved = []
        for _ in range(min(count, len(self.cards))):
            c = self.cards.pop()
            faces.turn_up(c)
            waste.push_top(c)
            moved.append(c)
        return moved

    def refill_from(self, waste: Waste, faces: Faces) -> int:
        """Put every waste card back face-down so the stock redraws in the same order."""
        n = len(waste)
        while waste.cards:
            c = waste.cards.pop()
            faces.turn_down(c)
            self.cards.append(c)
        return n


class Tableau(Pile):
    kind = ZoneKind.TABLEAU

    def card_at(self, row: int) -> Card:
        if row < 0 or row >= len(self.cards):
            raise IndexError(f"row {row} out of range for a column of {len(self.cards)}")
        return self.cards[row]

    def is_top_row(self, row: int) -> bool:
        return row == len(self.cards) - 1

    def reveal_top(self, faces: Faces) -> Optional[Card]:
        top = self.peek_top()
        if top is not None and not faces.is_face_up(top):
            faces.turn_up(top)
            return top
        return None


class Foundation(Pile):
    kind = ZoneKind.FOUNDATION

    def is_complete(self) -> bool:
        return len(self.cards) == 13
