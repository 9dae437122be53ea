"""Commands presentation sends to the engine, and the results it gets back."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from klondike.cards import Card
from klondike.zones import ZoneRef


class CommandError(ValueError):
    """A command the presentation layer should never have built."""


# ---------- Commands ----------
@dataclass(frozen=True)
class ClickStock:
    pass


@dataclass(frozen=True)
class ClickWaste:
    pass


@dataclass(frozen=True)
class ClickTableau:
    column: int
    row: int = 0


@dataclass(frozen=True)
class ClickFoundation:
    index: int


@dataclass(frozen=True)
class ClickElsewhere:
    pass


Command = Union[ClickStock, ClickWaste, ClickTableau, ClickFoundation, ClickElsewhere]


# ---------- Results ----------
class RejectReason(Enum):
    ILLEGAL_TABLEAU_MOVE = "illegal_tableau_move"
    ILLEGAL_FOUNDATION_MOVE = "illegal_foundation_move"
    STOCK_CYCLES_EXHAUSTED = "stock_cycles_exhausted"


@dataclass(frozen=True)
class StockTurned:
    cards: Tuple[Card, ...]


@dataclass(frozen=True)
class StockReset:
    count: int


@dataclass(frozen=True)
class Selected:
    card: Card
    zone: ZoneRef


@dataclass(frozen=True)
class Deselected:
    card: Card


@dataclass(frozen=True)
class MoveApplied:
    card: Card
    source: ZoneRef
    destination: ZoneRef


@dataclass(frozen=True)
class MoveRejected:
    reason: RejectReason
    card: Optional[Card] = None


@dataclass(frozen=True)
class NoOp:
    pass


CommandResult = Union[StockTurned, StockReset, Selected, Deselected, MoveApplied, MoveRejected, NoOp]
