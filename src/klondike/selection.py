# selection.py - the single armed card
from __future__ import annotations

from typing import Optional

from klondike.cards import Card


class Selection:
    """
    Idle when ``armed`` is None, otherwise Armed(card).
    The engine only arms face-up top cards.
    """

    def __init__(self):
        self.armed: Optional[Card] = None

    @property
    def is_idle(self) -> bool:
        return self.armed is None

    def is_armed(self, card: Optional[Card]) -> bool:
        return card is not None and self.armed == card

    def arm(self, card: Card) -> Optional[Card]:
        """Arm ``card``; returns whatever was armed before."""
        previous = self.armed
        self.armed = card
        return previous

    def clear(self) -> Optional[Card]:
        previous = self.armed
        self.armed = None
        return previous
