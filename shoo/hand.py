"""Hand evaluation for blackjack.

A hand's valuation is updated one card at a time. Each insert derives the new
valuation from the previous one plus the incoming card, which keeps track of
how many aces have been forced down from 11 to 1.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from shoo.cards import Card

BLACKJACK_TOTAL = 21


@dataclass(frozen=True)
class Hard:
    """Best total with no ace counted as 11."""

    total: int


@dataclass(frozen=True)
class Soft:
    """Best total with exactly one ace counted as 11.

    ``hard_aces`` is the number of aces currently forced to count as 1.
    """

    total: int
    hard_aces: int


@dataclass(frozen=True)
class Blackjack:
    """A natural: an ace and a ten-value card as the first two cards."""

    @property
    def total(self) -> int:
        return BLACKJACK_TOTAL


@dataclass(frozen=True)
class Bust:
    """Every legal total exceeds 21."""

    @property
    def total(self) -> None:
        return None


Valuation = Hard | Soft | Blackjack | Bust

BLACKJACK = Blackjack()
BUST = Bust()


class Outcome(Enum):
    """Result of a player hand against the dealer."""

    BLACKJACK = auto()
    WIN = auto()
    LOSE = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.title()


class Hand:
    """A blackjack hand with incremental value calculation."""

    def __init__(self) -> None:
        """Initialize an empty hand."""
        self._cards: list[Card] = []
        self._num_aces: int = 0
        self._valuation: Valuation = Hard(0)

    def insert(self, card: Card) -> None:
        """Add a card to the hand and update its valuation."""
        if not self._cards:
            valuation: Valuation = Soft(11, 0) if card.is_ace else Hard(card.values[0])
        else:
            valuation = self._next_valuation(card)

        if card.is_ace:
            self._num_aces += 1
        self._cards.append(card)
        self._valuation = valuation
        self._check_invariants()

    def _next_valuation(self, card: Card) -> Valuation:
        current = self._valuation
        if isinstance(current, Bust):
            return current
        if isinstance(current, Hard):
            return self._after_hard(current.total, card)
        if isinstance(current, Soft):
            return self._after_soft(current, card)
        return self._after_blackjack(card)

    def _after_hard(self, total: int, card: Card) -> Valuation:
        candidates = [total + value for value in card.values]

        if len(self._cards) == 1 and total == 10 and card.is_ace:
            return BLACKJACK
        if all(c > BLACKJACK_TOTAL for c in candidates):
            return BUST
        if len(candidates) == 1:
            return Hard(candidates[0])
        if any(c > BLACKJACK_TOTAL for c in candidates):
            # Counting the new ace as 11 would bust
            return Hard(min(candidates))
        return Soft(max(candidates), 0)

    def _after_soft(self, current: Soft, card: Card) -> Valuation:
        free_aces = self._num_aces - current.hard_aces
        bases = [
            (current.total - 10 * i, current.hard_aces + i)
            for i in range(free_aces + 1)
        ]

        # A new ace taken as 1 adds one more forced ace
        reachable = [
            (base + value, forced + extra)
            for extra, value in enumerate(reversed(card.values))
            for base, forced in bases
        ]

        if len(self._cards) == 1 and current.total == 11 and card.high_value == 10:
            return BLACKJACK

        standing = [pair for pair in reachable if pair[0] <= BLACKJACK_TOTAL]
        if not standing:
            return BUST
        if len(standing) == 1:
            return Hard(standing[0][0])
        total, forced = max(standing)
        return Soft(total, forced)

    def _after_blackjack(self, card: Card) -> Valuation:
        standing = [
            base + value
            for base in (11, BLACKJACK_TOTAL)
            for value in card.values
            if base + value <= BLACKJACK_TOTAL
        ]
        if not standing:
            return BUST
        return Hard(max(standing))

    def _check_invariants(self) -> None:
        valuation = self._valuation
        pips = sum(card.values[0] for card in self._cards if not card.is_ace)

        if isinstance(valuation, Blackjack):
            assert len(self._cards) == 2, "blackjack needs exactly two cards"
        elif isinstance(valuation, Soft):
            assert valuation.total <= BLACKJACK_TOTAL
            assert valuation.hard_aces < self._num_aces
            assert valuation.total == pips + 10 + self._num_aces
        elif isinstance(valuation, Hard):
            assert valuation.total <= BLACKJACK_TOTAL
            assert valuation.total == pips + self._num_aces

    @property
    def valuation(self) -> Valuation:
        """Return the current valuation variant."""
        return self._valuation

    @property
    def value(self) -> int | None:
        """Return the best total, or None if the hand is busted."""
        return self._valuation.total

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted."""
        return isinstance(self._valuation, Bust)

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack."""
        return isinstance(self._valuation, Blackjack)

    @property
    def is_soft(self) -> bool:
        """Check if an ace is counted as 11 (blackjack counts as soft)."""
        return isinstance(self._valuation, (Soft, Blackjack))

    @property
    def is_empty(self) -> bool:
        """Check if no cards have been dealt to the hand."""
        return not self._cards

    @property
    def can_split(self) -> bool:
        """Check if the hand is a pair (two cards of same rank)."""
        return len(self._cards) == 2 and self._cards[0].rank == self._cards[1].rank

    @property
    def can_double(self) -> bool:
        """Check if the hand can be doubled down."""
        return len(self._cards) == 2

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in the order they were dealt."""
        return tuple(self._cards)

    @property
    def num_aces(self) -> int:
        """Return the number of aces in the hand."""
        return self._num_aces

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self._cards)
        if self.is_busted:
            return f"[{cards_str}] (Bust)"
        if self.is_blackjack:
            return f"[{cards_str}] (Blackjack)"
        if self.is_soft:
            return f"[{cards_str}] (soft {self.value})"
        return f"[{cards_str}] ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, valuation={self._valuation!r})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare a player hand against the dealer.

    Dealer blackjack is checked first, then player blackjack, then busts,
    then totals.
    """
    if dealer_hand.is_blackjack:
        return Outcome.PUSH if player_hand.is_blackjack else Outcome.LOSE

    if player_hand.is_blackjack:
        return Outcome.BLACKJACK

    # Player busts always loses
    if player_hand.is_busted:
        return Outcome.LOSE

    if dealer_hand.is_busted:
        return Outcome.WIN

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return Outcome.WIN
    if player_value < dealer_value:
        return Outcome.LOSE
    return Outcome.PUSH
