# table.py - pygame table that drives the engine from mouse clicks
import os
import pygame
from typing import Dict, Optional

from klondike.assets import CARD_BACK_KEY, alert_text, card_asset_key
from klondike.cards import Card, all_cards
from klondike.commands import (
    ClickElsewhere,
    ClickFoundation,
    ClickStock,
    ClickTableau,
    ClickWaste,
    MoveRejected,
)
from klondike.deck import TABLEAU_COLUMNS
from klondike.engine import FOUNDATION_COUNT, KlondikeEngine

# ---------- Configuration ----------
SCREEN_W, SCREEN_H = 900, 800
TABLE_BG = (2, 100, 40)

CARD_W, CARD_H = 100, 145
CARD_RADIUS = 10
PADDING = 25
FAN_Y = 25

BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
RED = (200, 20, 20)
BLUE = (34, 96, 200)
LIGHT = (220, 220, 220)
SELECT = (150, 200, 255)
ALERT = (255, 255, 180)

WON_TEXT = "Congratulations! You won! Press N for a new game."
HINTS = "ESC: Quit  N: New  A: Auto Finish"

# Fonts are initialized via setup_fonts() AFTER pygame.init()
FONT_UI = None
FONT_RANK = None


def setup_fonts():
    global FONT_UI, FONT_RANK
    name = pygame.font.get_default_font()
    FONT_UI = pygame.font.SysFont(name, 22, bold=True)
    FONT_RANK = pygame.font.SysFont(name, 26, bold=True)


# ---------- Layout ----------
def stock_rect():
    return pygame.Rect(PADDING, PADDING, CARD_W, CARD_H)


def waste_rect():
    return pygame.Rect(PADDING * 2 + CARD_W, PADDING, CARD_W, CARD_H)


def foundation_rect(index):
    return pygame.Rect(PADDING + (CARD_W + PADDING) * (3 + index), PADDING, CARD_W, CARD_H)


def tableau_rect(column, row=0):
    return pygame.Rect(PADDING + (CARD_W + PADDING) * column, PADDING * 2 + CARD_H + FAN_Y * row, CARD_W, CARD_H)


# ---------- Card surfaces ----------
_face_cache: Dict[str, pygame.Surface] = {}
_back_cache: Optional[pygame.Surface] = None


def load_card_images(directory):
    """Fill the surface cache from ``<key>.png`` files; missing files fall back to drawn cards."""
    global _back_cache
    if not directory or not os.path.isdir(directory):
        return 0
    loaded = 0
    keys = [card_asset_key(c) for c in all_cards()] + [CARD_BACK_KEY]
    for key in keys:
        path = os.path.join(directory, key + ".png")
        if not os.path.isfile(path):
            continue
        surf = pygame.transform.smoothscale(pygame.image.load(path).convert_alpha(), (CARD_W, CARD_H))
        if key == CARD_BACK_KEY:
            _back_cache = surf
        else:
            _face_cache[key] = surf
        loaded += 1
    return loaded


def get_card_surface(card: Card):
    key = card_asset_key(card)
    if key in _face_cache:
        return _face_cache[key]
    surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0, 0, CARD_W, CARD_H), width=3, border_radius=CARD_RADIUS)
    color = RED if card.is_red() else BLACK
    label = FONT_RANK.render(f"{card.rank.text}{card.suit.symbol}", True, color)
    surf.blit(label, (10, 8))
    _face_cache[key] = surf
    return surf


def get_back_surface():
    global _back_cache
    if _back_cache is not None:
        return _back_cache
    surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0, 0, CARD_W, CARD_H), width=3, border_radius=CARD_RADIUS)
    inner = pygame.Rect(8, 8, CARD_W - 16, CARD_H - 16)
    pygame.draw.rect(surf, BLUE, inner, border_radius=8)
    for i in range(-CARD_H, CARD_W, 12):
        pygame.draw.line(surf, LIGHT, (i, 8), (i + CARD_H, CARD_H - 8), 1)
    _back_cache = surf
    return surf


# ---------- Scene ----------
class TableScene:
    """Hit-tests clicks into engine commands and draws what the engine reports."""

    def __init__(self, engine: Optional[KlondikeEngine] = None):
        self.engine = engine or KlondikeEngine()
        self.message = ""
        self.last_result = None
        self.quit_requested = False

        self.auto_play_active = False
        self.auto_last_time = 0
        self.auto_interval_ms = 180

    def hit_test(self, pos):
        """Resolve a pointer position to the command for whatever lies under it."""
        if stock_rect().collidepoint(pos):
            return ClickStock()
        if waste_rect().collidepoint(pos):
            return ClickWaste()
        for i in range(FOUNDATION_COUNT):
            if foundation_rect(i).collidepoint(pos):
                return ClickFoundation(i)
        for col in range(TABLEAU_COLUMNS):
            cards = self.engine.tableau_column(col)
            if not cards:
                if tableau_rect(col).collidepoint(pos):
                    return ClickTableau(col, 0)
                continue
            # Later rows overlap earlier ones; only face-up cards are clickable
            for row in reversed(range(len(cards))):
                if cards[row].face_up and tableau_rect(col, row).collidepoint(pos):
                    return ClickTableau(col, row)
        return ClickElsewhere()

    def apply(self, cmd):
        result = self.engine.handle_command(cmd)
        self.last_result = result
        self.message = alert_text(result.reason) if isinstance(result, MoveRejected) else ""
        if self.engine.is_won():
            self.message = WON_TEXT
        return result

    def new_game(self):
        self.engine.new_game()
        self.message = ""
        self.last_result = None
        self.auto_play_active = False

    def start_auto_finish(self):
        if not self.engine.can_auto_finish():
            return
        self.auto_play_active = True
        self.auto_last_time = pygame.time.get_ticks()

    def step_auto_finish(self):
        self.last_result = self.engine.auto_finish_step()
        if not self.engine.can_auto_finish():
            self.auto_play_active = False
        if self.engine.is_won():
            self.message = WON_TEXT

    # ---------- Event handling ----------
    def handle_event(self, e):
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            self.auto_play_active = False
            return self.apply(self.hit_test(e.pos))
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_n:
                self.new_game()
            elif e.key == pygame.K_a:
                self.start_auto_finish()
            elif e.key == pygame.K_ESCAPE:
                self.quit_requested = True
        return None

    # ---------- Drawing ----------
    def _draw_empty(self, screen, rect):
        pygame.draw.rect(screen, WHITE, rect, width=1, border_radius=CARD_RADIUS)

    def _draw_card(self, screen, view, rect):
        if not view.face_up:
            screen.blit(get_back_surface(), rect.topleft)
            return
        screen.blit(get_card_surface(view.card), rect.topleft)
        if view.selected:
            pygame.draw.rect(screen, SELECT, rect, width=3, border_radius=CARD_RADIUS)

    def draw(self, screen):
        if self.auto_play_active:
            now = pygame.time.get_ticks()
            if now - self.auto_last_time >= self.auto_interval_ms:
                self.step_auto_finish()
                self.auto_last_time = now

        screen.fill(TABLE_BG)
        board = self.engine.snapshot()

        if board.stock_size:
            screen.blit(get_back_surface(), stock_rect().topleft)
        else:
            self._draw_empty(screen, stock_rect())

        if board.waste_top is None:
            self._draw_empty(screen, waste_rect())
        else:
            self._draw_card(screen, board.waste_top, waste_rect())

        for i, top in enumerate(board.foundations):
            if top is None:
                self._draw_empty(screen, foundation_rect(i))
            else:
                self._draw_card(screen, top, foundation_rect(i))

        for col, cards in enumerate(board.tableau):
            if not cards:
                self._draw_empty(screen, tableau_rect(col))
            for row, view in enumerate(cards):
                self._draw_card(screen, view, tableau_rect(col, row))

        status = repr(board.selected) if board.selected is not None else HINTS
        s = FONT_UI.render(status, True, WHITE)
        screen.blit(s, (10, SCREEN_H - s.get_height() - 10))
        if self.message:
            msg = FONT_UI.render(self.message, True, ALERT)
            screen.blit(msg, (SCREEN_W - msg.get_width() - 10, SCREEN_H - msg.get_height() - 10))
