import itertools
import random
from collections import Counter

import pytest

from klondike.cards import Card, Color, Rank, Suit
from klondike.deck import deal, new_deck, shuffle


class ScriptedRng:
    """Stand-in random source returning preset ``randrange`` answers."""

    def __init__(self, answers):
        self._answers = list(answers)

    def randrange(self, stop):
        value = self._answers.pop(0)
        assert 0 <= value < stop
        return value


@pytest.mark.parametrize(
    "suit, color",
    [
        (Suit.CLUBS, Color.BLACK),
        (Suit.DIAMONDS, Color.RED),
        (Suit.HEARTS, Color.RED),
        (Suit.SPADES, Color.BLACK),
    ],
)
def test_suit_colors(suit: Suit, color: Color) -> None:
    assert suit.color is color
    assert Card(suit, Rank.SEVEN).color is color


def test_cards_are_values() -> None:
    assert Card(Suit.HEARTS, Rank.ACE) == Card(Suit.HEARTS, Rank.ACE)
    assert len({Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.ACE)}) == 1
    assert repr(Card(Suit.SPADES, Rank.TEN)) == "10♠"


def test_new_deck_has_every_card_once() -> None:
    deck = new_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert Counter(c.suit for c in deck) == {s: 13 for s in Suit}


def test_shuffle_is_reproducible_with_a_seed() -> None:
    a, b = new_deck(), new_deck()
    shuffle(a, random.Random(42))
    shuffle(b, random.Random(42))
    assert a == b
    assert sorted(a, key=lambda c: (c.suit.value, c.rank)) == sorted(new_deck(), key=lambda c: (c.suit.value, c.rank))


def test_shuffle_swaps_against_the_end() -> None:
    deck = ["a", "b", "c"]
    shuffle(deck, ScriptedRng([0, 0, 0]))
    assert deck == ["b", "c", "a"]


def test_shuffle_reaches_every_permutation_exactly_once() -> None:
    seen = Counter()
    for answers in itertools.product(range(3), range(2), range(1)):
        deck = ["a", "b", "c"]
        shuffle(deck, ScriptedRng(answers))
        seen[tuple(deck)] += 1
    assert len(seen) == 6
    assert set(seen.values()) == {1}


def test_shuffle_first_position_is_roughly_uniform() -> None:
    counts = Counter()
    for seed in range(4000):
        deck = ["a", "b", "c", "d"]
        shuffle(deck, random.Random(seed))
        counts[deck[0]] += 1
    assert set(counts) == {"a", "b", "c", "d"}
    assert all(850 < n < 1150 for n in counts.values())


def test_deal_shape() -> None:
    deck = new_deck()
    tableau, stock, faces = deal(deck)
    assert [len(t) for t in tableau] == [1, 2, 3, 4, 5, 6, 7]
    for t in tableau:
        *hidden, top = list(t)
        assert faces.is_face_up(top)
        assert not any(faces.is_face_up(c) for c in hidden)
    assert len(stock) == 24
    assert not any(faces.is_face_up(c) for c in stock)
    assert len(deck) == 52  # the caller's list is left alone


def test_deal_draws_from_the_end_of_the_deck() -> None:
    deck = new_deck()
    tableau, stock, _ = deal(deck)
    assert tableau[0].peek_top() == deck[-1]
    assert stock.peek_top() == Card(Suit.DIAMONDS, Rank.JACK)
