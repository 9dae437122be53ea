# engine.py - game state and the command API presentation drives
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

from klondike.cards import Card
from klondike.commands import (
    ClickElsewhere,
    ClickFoundation,
    ClickStock,
    ClickTableau,
    ClickWaste,
    Command,
    CommandError,
    CommandResult,
    Deselected,
    MoveApplied,
    MoveRejected,
    NoOp,
    RejectReason,
    Selected,
    StockReset,
    StockTurned,
)
from klondike.deck import TABLEAU_COLUMNS, deal, new_deck, shuffle
from klondike.rules import is_legal_foundation_move, is_legal_tableau_move
from klondike.selection import Selection
from klondike.settings import DEFAULT_SETTINGS, Settings
from klondike.zones import (
    STOCK,
    WASTE,
    Faces,
    Foundation,
    Pile,
    Stock,
    Tableau,
    Waste,
    ZoneKind,
    ZoneRef,
)

logger = logging.getLogger(__name__)

FOUNDATION_COUNT = 4


class CardView(NamedTuple):
    card: Card
    face_up: bool
    selected: bool


@dataclass(frozen=True)
class BoardView:
    """Read-only picture of the board for rendering."""

    stock_size: int
    waste_top: Optional[CardView]
    waste_size: int
    tableau: Tuple[Tuple[CardView, ...], ...]
    foundations: Tuple[Optional[CardView], ...]
    foundation_sizes: Tuple[int, ...]
    selected: Optional[Card]
    won: bool


class GameState:
    """
    Every zone plus the face-up table, the selection and an index of where
    each card lives. Nothing about a game is kept anywhere else.
    """

    def __init__(self, tableau: List[Tableau], stock: Stock, faces: Faces):
        self.stock = stock
        self.waste = Waste()
        self.tableau = tableau
        self.foundations = [Foundation() for _ in range(FOUNDATION_COUNT)]
        self.faces = faces
        self.selection = Selection()
        self.stock_cycles_used = 0
        self.locations: Dict[Card, ZoneRef] = {}
        for c in stock:
            self.locations[c] = STOCK
        for i, t in enumerate(tableau):
            for c in t:
                self.locations[c] = ZoneRef(ZoneKind.TABLEAU, i)

    @classmethod
    def deal_new(cls, rng) -> "GameState":
        deck = new_deck()
        shuffle(deck, rng)
        tableau, stock, faces = deal(deck)
        return cls(tableau, stock, faces)

    def zone(self, ref: ZoneRef) -> Pile:
        if ref.kind is ZoneKind.STOCK:
            return self.stock
        if ref.kind is ZoneKind.WASTE:
            return self.waste
        if ref.kind is ZoneKind.TABLEAU:
            return self.tableau[ref.index]
        return self.foundations[ref.index]

    def zones(self):
        yield STOCK, self.stock
        yield WASTE, self.waste
        for i, t in enumerate(self.tableau):
            yield ZoneRef(ZoneKind.TABLEAU, i), t
        for i, f in enumerate(self.foundations):
            yield ZoneRef(ZoneKind.FOUNDATION, i), f

    def locate(self, card: Card) -> ZoneRef:
        return self.locations[card]

    def turn_stock(self, count: int) -> List[Card]:
        turned = self.stock.turn_onto(self.waste, self.faces, count)
        for c in turned:
            self.locations[c] = WASTE
        return turned

    def reset_stock(self) -> int:
        moved = list(self.waste)
        n = self.stock.refill_from(self.waste, self.faces)
        for c in moved:
            self.locations[c] = STOCK
        self.stock_cycles_used += 1
        return n

    def move(self, card: Card, destination: ZoneRef) -> ZoneRef:
        """Take ``card`` out of wherever it is and put it on ``destination``."""
        source = self.locate(card)
        if not self.zone(source).remove_card(card):
            raise AssertionError(f"{card!r} indexed in {source} but not found there")
        self.zone(destination).push_top(card)
        self.locations[card] = destination
        return source

    def reveal_cards(self) -> List[Card]:
        """Turn every face-down tableau top face-up."""
        revealed = []
        for t in self.tableau:
            c = t.reveal_top(self.faces)
            if c is not None:
                revealed.append(c)
        return revealed

    def is_won(self) -> bool:
        return all(f.is_complete() for f in self.foundations)

    def check_invariants(self):
        """Raise AssertionError naming the first broken board invariant."""
        seen: Dict[Card, ZoneRef] = {}
        for ref, pile in self.zones():
            for c in pile:
                if c in seen:
                    raise AssertionError(f"{c!r} is in both {seen[c]} and {ref}")
                seen[c] = ref
        if len(seen) != 52:
            raise AssertionError(f"expected 52 cards on the board, found {len(seen)}")
        if seen != self.locations:
            raise AssertionError("location index is out of date")
        for c in self.stock:
            if self.faces.is_face_up(c):
                raise AssertionError(f"{c!r} is face-up in the stock")
        for ref, pile in self.zones():
            if ref.kind in (ZoneKind.WASTE, ZoneKind.FOUNDATION):
                for c in pile:
                    if not self.faces.is_face_up(c):
                        raise AssertionError(f"{c!r} is face-down in {ref}")
        armed = self.selection.armed
        if armed is not None:
            if not self.faces.is_face_up(armed):
                raise AssertionError(f"selected {armed!r} is face-down")
            if self.zone(self.locations[armed]).peek_top() != armed:
                raise AssertionError(f"selected {armed!r} is not a top card")


class KlondikeEngine:
    """
    Owns one game and answers presentation commands.

    Every command is processed completely, tableau tops are revealed, and a
    single CommandResult describes what happened.
    """

    def __init__(self, settings: Optional[Settings] = None, seed: Optional[int] = None, rng=None):
        self.settings = settings or DEFAULT_SETTINGS
        self.rng = rng if rng is not None else random.Random()
        self.seed: Optional[int] = None
        self.state: GameState
        self.new_game(seed)

    # ---------- Lifecycle ----------
    def new_game(self, seed: Optional[int] = None):
        rng = random.Random(seed) if seed is not None else self.rng
        self.seed = seed
        self.state = GameState.deal_new(rng)
        self.state.reveal_cards()
        logger.debug(f"New game dealt (seed={seed}, settings={self.settings})")

    # ---------- Commands ----------
    def handle_command(self, cmd: Command) -> CommandResult:
        if isinstance(cmd, ClickStock):
            result = self._click_stock()
        elif isinstance(cmd, ClickWaste):
            result = self._click_waste()
        elif isinstance(cmd, ClickTableau):
            result = self._click_tableau(cmd.column, cmd.row)
        elif isinstance(cmd, ClickFoundation):
            result = self._click_foundation(cmd.index)
        elif isinstance(cmd, ClickElsewhere):
            result = self._deselect()
        else:
            raise CommandError(f"Unknown command: {cmd!r}")
        self.state.reveal_cards()
        logger.debug(f"{cmd} -> {result}")
        if isinstance(result, MoveApplied) and self.state.is_won():
            logger.info("Game won")
        return result

    def _click_stock(self) -> CommandResult:
        s = self.state
        s.selection.clear()
        if not s.stock.is_empty():
            return StockTurned(tuple(s.turn_stock(self.settings.draw_count)))
        if s.waste.is_empty():
            return NoOp()
        limit = self.settings.stock_cycles
        if limit is not None and s.stock_cycles_used >= limit:
            return MoveRejected(RejectReason.STOCK_CYCLES_EXHAUSTED)
        return StockReset(s.reset_stock())

    def _click_waste(self) -> CommandResult:
        c = self.state.waste.peek_top()
        if c is None or self.state.selection.is_armed(c):
            return self._deselect()
        return self._arm(c, WASTE)

    def _click_tableau(self, column: int, row: int) -> CommandResult:
        s = self.state
        self._check_index(column, TABLEAU_COLUMNS, "tableau column")
        pile = s.tableau[column]
        dest = ZoneRef(ZoneKind.TABLEAU, column)
        armed = s.selection.armed
        if pile.is_empty():
            if armed is None:
                return NoOp()
            return self._attempt_move(dest, None, RejectReason.ILLEGAL_TABLEAU_MOVE)
        try:
            c = pile.card_at(row)
        except IndexError as exc:
            raise CommandError(str(exc)) from None
        if not s.faces.is_face_up(c):
            raise CommandError(f"tableau[{column}] row {row} is face-down")
        if s.selection.is_armed(c):
            return self._deselect()
        if not pile.is_top_row(row):
            # only top cards can be armed
            return self._deselect()
        if armed is not None:
            return self._attempt_move(dest, c, RejectReason.ILLEGAL_TABLEAU_MOVE)
        return self._arm(c, dest)

    def _click_foundation(self, index: int) -> CommandResult:
        s = self.state
        self._check_index(index, FOUNDATION_COUNT, "foundation")
        dest = ZoneRef(ZoneKind.FOUNDATION, index)
        c = s.foundations[index].peek_top()
        armed = s.selection.armed
        if c is not None and s.selection.is_armed(c):
            return self._deselect()
        if armed is not None and self.settings.foundation_moves:
            return self._attempt_move(dest, c, RejectReason.ILLEGAL_FOUNDATION_MOVE)
        if c is None:
            return self._deselect()
        return self._arm(c, dest)

    # ---------- Selection helpers ----------
    def _arm(self, card: Card, zone: ZoneRef) -> Selected:
        self.state.selection.arm(card)
        return Selected(card, zone)

    def _deselect(self) -> CommandResult:
        previous = self.state.selection.clear()
        return Deselected(previous) if previous is not None else NoOp()

    def _attempt_move(self, dest: ZoneRef, dest_top: Optional[Card], reason: RejectReason) -> CommandResult:
        s = self.state
        card = s.selection.clear()
        if dest.kind is ZoneKind.FOUNDATION:
            legal = is_legal_foundation_move(dest_top, card)
        else:
            legal = is_legal_tableau_move(dest_top, card, self.settings.king_on_empty)
        if not legal:
            return MoveRejected(reason, card)
        source = s.move(card, dest)
        return MoveApplied(card, source, dest)

    @staticmethod
    def _check_index(index: int, count: int, what: str):
        if not isinstance(index, int) or not 0 <= index < count:
            raise CommandError(f"{what} index {index!r} out of range 0..{count - 1}")

    # ---------- Auto finish ----------
    def auto_move_target(self, card: Card) -> Optional[int]:
        """First foundation that would take ``card``, or None."""
        for i, f in enumerate(self.state.foundations):
            if is_legal_foundation_move(f.peek_top(), card):
                return i
        return None

    def can_auto_finish(self) -> bool:
        """Eligible when stock and waste are empty and all tableau cards are face-up."""
        s = self.state
        if not self.settings.foundation_moves or s.is_won():
            return False
        if not s.stock.is_empty() or not s.waste.is_empty():
            return False
        return all(s.faces.is_face_up(c) for t in s.tableau for c in t)

    def auto_finish_step(self) -> CommandResult:
        """Move one tableau top to its foundation."""
        if not self.can_auto_finish():
            return NoOp()
        s = self.state
        s.selection.clear()
        for i, t in enumerate(s.tableau):
            c = t.peek_top()
            if c is None:
                continue
            fi = self.auto_move_target(c)
            if fi is not None:
                dest = ZoneRef(ZoneKind.FOUNDATION, fi)
                source = s.move(c, dest)
                if s.is_won():
                    logger.info("Game won")
                return MoveApplied(c, source, dest)
        return NoOp()

    # ---------- Read accessors ----------
    def is_won(self) -> bool:
        return self.state.is_won()

    @property
    def selected(self) -> Optional[Card]:
        return self.state.selection.armed

    @property
    def stock_size(self) -> int:
        return len(self.state.stock)

    @property
    def stock_top_face_up(self) -> bool:
        return False

    @property
    def waste_size(self) -> int:
        return len(self.state.waste)

    def is_face_up(self, card: Card) -> bool:
        return self.state.faces.is_face_up(card)

    def _view(self, card: Optional[Card]) -> Optional[CardView]:
        if card is None:
            return None
        return CardView(card, self.state.faces.is_face_up(card), self.state.selection.is_armed(card))

    def waste_top(self) -> Optional[CardView]:
        return self._view(self.state.waste.peek_top())

    def tableau_column(self, index: int) -> Tuple[CardView, ...]:
        self._check_index(index, TABLEAU_COLUMNS, "tableau column")
        return tuple(self._view(c) for c in self.state.tableau[index])

    def foundation_top(self, index: int) -> Optional[CardView]:
        self._check_index(index, FOUNDATION_COUNT, "foundation")
        return self._view(self.state.foundations[index].peek_top())

    def foundation_size(self, index: int) -> int:
        self._check_index(index, FOUNDATION_COUNT, "foundation")
        return len(self.state.foundations[index])

    def snapshot(self) -> BoardView:
        return BoardView(
            stock_size=self.stock_size,
            waste_top=self.waste_top(),
            waste_size=self.waste_size,
            tableau=tuple(self.tableau_column(i) for i in range(TABLEAU_COLUMNS)),
            foundations=tuple(self.foundation_top(i) for i in range(FOUNDATION_COUNT)),
            foundation_sizes=tuple(len(f) for f in self.state.foundations),
            selected=self.selected,
            won=self.is_won(),
        )
