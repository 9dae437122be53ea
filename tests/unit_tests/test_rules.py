from typing import Optional

import pytest

from board_builder import card
from klondike.rules import is_legal_foundation_move, is_legal_tableau_move


@pytest.mark.parametrize(
    "destination, moving, expected",
    [
        (None, "5D", True),
        (None, "KS", True),
        ("AH", "KS", False),
        ("AS", "2H", False),
        ("7H", "6S", True),
        ("7D", "6C", True),
        ("7S", "6H", True),
        ("7H", "6D", False),
        ("7H", "5S", False),
        ("7H", "8S", False),
        ("7H", "7S", False),
        ("KH", "QC", True),
    ],
)
def test_tableau_moves(destination: Optional[str], moving: str, expected: bool) -> None:
    top = card(destination) if destination else None
    assert is_legal_tableau_move(top, card(moving)) is expected


def test_king_on_empty_column_rule() -> None:
    assert is_legal_tableau_move(None, card("KD"), king_on_empty=True)
    assert not is_legal_tableau_move(None, card("QD"), king_on_empty=True)
    assert is_legal_tableau_move(card("8C"), card("7H"), king_on_empty=True)


@pytest.mark.parametrize(
    "destination, moving, expected",
    [
        (None, "AH", True),
        (None, "2H", False),
        ("AH", "2H", True),
        ("AH", "2D", False),
        ("AH", "3H", False),
        ("QS", "KS", True),
        ("KS", "AS", False),
    ],
)
def test_foundation_moves(destination: Optional[str], moving: str, expected: bool) -> None:
    top = card(destination) if destination else None
    assert is_legal_foundation_move(top, card(moving)) is expected
