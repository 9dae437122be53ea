import pytest

from board_builder import card
from klondike.assets import CARD_BACK_KEY, alert_text, card_asset_key
from klondike.cards import all_cards
from klondike.commands import RejectReason


@pytest.mark.parametrize(
    "code, key",
    [
        ("AS", "aceofspades"),
        ("QH", "queenofhearts"),
        ("10D", "tenofdiamonds"),
        ("7C", "sevenofclubs"),
    ],
)
def test_card_asset_keys(code: str, key: str) -> None:
    assert card_asset_key(card(code)) == key


def test_asset_keys_are_unique() -> None:
    keys = {card_asset_key(c) for c in all_cards()}
    assert len(keys) == 52
    assert CARD_BACK_KEY not in keys


def test_alert_text() -> None:
    assert alert_text(RejectReason.ILLEGAL_TABLEAU_MOVE) == "Invalid move!"
    assert all(alert_text(r) for r in RejectReason)
