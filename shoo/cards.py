"""Card and Shoe classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering
from random import Random

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def point_values(self) -> tuple[int, ...]:
        """Return every legal point value, lowest first (Ace = 1 or 11)."""
        if self == Rank.ACE:
            return (1, 11)
        if self.value <= 10:
            return (self.value,)
        return (10,)  # Face cards

    @property
    def count_weight(self) -> int:
        """Return the Hi-Lo running-count weight."""
        if self.value <= 6:
            return 1
        if self.value <= 9:
            return 0
        return -1  # Tens, faces and aces

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.point_values == (10,)


_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._sort_key < other._sort_key

    @property
    def _sort_key(self) -> tuple[int, int]:
        return _SUIT_ORDER[self.suit], self.rank.value

    @property
    def values(self) -> tuple[int, ...]:
        """Return the legal point values of this card, lowest first."""
        return self.rank.point_values

    @property
    def high_value(self) -> int:
        """Return the highest point value of this card."""
        return self.rank.point_values[-1]

    @property
    def count_weight(self) -> int:
        """Return the Hi-Lo weight (+1, 0 or -1)."""
        return self.rank.count_weight

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
            "A": Rank.ACE,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Shoe:
    """A multi-deck shoe that keeps a Hi-Lo running count of dealt cards."""

    def __init__(self, num_decks: int = 6, rng: Random | None = None) -> None:
        """
        Initialize a full, shuffled shoe.

        Args:
            num_decks: Number of decks in the shoe
            rng: Random number generator for shuffling
        """
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")

        self._num_decks = num_decks
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._count: int = 0
        self.reset()

    def reset(self) -> None:
        """Refill the shoe with every card, reshuffle and zero the count."""
        self._cards = [
            Card(rank, suit)
            for _ in range(self._num_decks)
            for suit in Suit
            for rank in Rank
        ]
        self._rng.shuffle(self._cards)
        self._count = 0
        logger.debug("Shuffled %d-deck shoe", self._num_decks)

    def deal(self) -> Card | None:
        """Deal the top card, or return None if the shoe is empty."""
        if not self._cards:
            return None
        card = self._cards.pop()
        self._count += card.count_weight
        return card

    def draw(self) -> Card:
        """Deal the top card, raising if the shoe is empty."""
        card = self.deal()
        if card is None:
            raise IndexError("Cannot draw from empty shoe")
        return card

    @property
    def running_count(self) -> float:
        """Return the running count normalized by the number of decks."""
        return self._count / self._num_decks

    @property
    def raw_count(self) -> int:
        """Return the un-normalized sum of dealt card weights."""
        return self._count

    @property
    def penetration(self) -> float:
        """Return the fraction of the shoe dealt since the last shuffle."""
        return 1.0 - len(self._cards) / self.total_cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt."""
        return self.total_cards - len(self._cards)

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self._num_decks * 52

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self._num_decks

    @property
    def is_empty(self) -> bool:
        """Check if every card has been dealt."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return (
            f"Shoe(num_decks={self._num_decks}, remaining={len(self._cards)}, "
            f"running_count={self.running_count})"
        )
