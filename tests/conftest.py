"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from shoo.cards import Card, Shoe, Rank, Suit
from shoo.game import Table
from shoo.hand import Hand


def make_hand(*codes: str) -> Hand:
    """Build a hand by inserting cards given as strings like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.insert(Card.from_string(code))
    return hand


def stack_shoe(shoe: Shoe, codes: list[str]) -> None:
    """Arrange a shoe so that ``codes`` are dealt first, in order."""
    top = [Card.from_string(code) for code in codes]
    rest = list(shoe._cards)
    for card in top:
        rest.remove(card)
    shoe._cards = rest + list(reversed(top))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    return Shoe(num_decks=6, rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.insert(Card(Rank.ACE, Suit.SPADES))
    hand.insert(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def table(rng):
    """A single-deck, two-spot table."""
    return Table(num_decks=1, num_spots=2, max_penetration=0.75, rng=rng)


@pytest.fixture
def stacked_table(table):
    """
    Factory for a table whose next deal uses the given cards.

    Cards are listed in dealing order: each spot's first card, the dealer's
    up card, each spot's second card, the dealer's hole card, then hits.
    """

    def _stack(*codes: str) -> Table:
        stack_shoe(table.shoe, list(codes))
        return table

    return _stack


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings."""
    return make_hand
