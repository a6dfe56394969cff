"""Pydantic snapshots of table state for a presentation layer."""

from pydantic import BaseModel, ConfigDict

from shoo.cards import Card, Shoe
from shoo.game.state import TableState
from shoo.game.table import Table
from shoo.hand import Hand


class CardView(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    values: list[int]
    count_weight: int


class HandView(BaseModel):
    """Hand representation; value is None when busted or concealed."""

    model_config = ConfigDict(frozen=True)

    cards: list[CardView]
    value: int | None
    is_soft: bool
    is_blackjack: bool
    is_busted: bool
    can_split: bool
    can_double: bool
    concealed: bool = False


class ShoeStats(BaseModel):
    """Shoe statistics."""

    model_config = ConfigDict(frozen=True)

    num_decks: int
    cards_remaining: int
    running_count: float
    penetration: float


class TableView(BaseModel):
    """Current table state."""

    model_config = ConfigDict(frozen=True)

    state: str
    dealer: HandView
    players: list[HandView]
    shoe: ShoeStats
    max_penetration: float


def card_view(card: Card) -> CardView:
    """Snapshot a single card."""
    return CardView(
        rank=str(card.rank),
        suit=str(card.suit),
        values=list(card.values),
        count_weight=card.count_weight,
    )


def hand_view(hand: Hand, conceal_hole: bool = False) -> HandView:
    """
    Build a hand snapshot.

    With ``conceal_hole`` only the first card is shown and the value and
    status flags are withheld.
    """
    if conceal_hole:
        return HandView(
            cards=[card_view(card) for card in hand.cards[:1]],
            value=None,
            is_soft=False,
            is_blackjack=False,
            is_busted=False,
            can_split=False,
            can_double=False,
            concealed=True,
        )
    return HandView(
        cards=[card_view(card) for card in hand.cards],
        value=hand.value,
        is_soft=hand.is_soft,
        is_blackjack=hand.is_blackjack,
        is_busted=hand.is_busted,
        can_split=hand.can_split,
        can_double=hand.can_double,
    )


def shoe_stats(shoe: Shoe) -> ShoeStats:
    """Snapshot the shoe's size, count and penetration."""
    return ShoeStats(
        num_decks=shoe.num_decks,
        cards_remaining=shoe.cards_remaining,
        running_count=shoe.running_count,
        penetration=shoe.penetration,
    )


def table_view(table: Table) -> TableView:
    """Snapshot the table; the dealer hole card stays hidden until flipped."""
    return TableView(
        state=table.state.name.lower(),
        dealer=hand_view(table.dealer, conceal_hole=table.state == TableState.DEALT),
        players=[hand_view(hand) for hand in table.player_hands],
        shoe=shoe_stats(table.shoe),
        max_penetration=table.max_penetration,
    )
