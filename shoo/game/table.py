"""Blackjack table with a phase state machine."""

import logging
from random import Random

from transitions import Machine

from shoo.cards import Card, Shoe
from shoo.config import TableConfig
from shoo.game.events import EventEmitter, EventHandler, EventType
from shoo.game.state import TableState
from shoo.hand import Hand, Outcome, evaluate_hands

logger = logging.getLogger(__name__)


class Table:
    """
    One dealer hand and a fixed row of player spots dealt from one shoe.

    Every public operation fires a single trigger on the state machine, so a
    call made in the wrong phase raises ``transitions.core.MachineError``
    before anything on the table changes.
    """

    # State machine states
    STATES = [s.name.lower() for s in TableState]

    # State machine transitions
    TRANSITIONS = [
        {
            "trigger": "start_round",
            "source": "open",
            "dest": "dealt",
            "before": "_check_hands_empty",
        },
        {
            "trigger": "peek_hole",
            "source": "dealt",
            "dest": "flipped",
            "conditions": "_dealer_has_blackjack",
        },
        {"trigger": "peek_hole", "source": "dealt", "dest": None},
        {"trigger": "hit_player", "source": "dealt", "dest": None},
        {"trigger": "hit_dealer", "source": ["dealt", "flipped"], "dest": "flipped"},
        {"trigger": "flip", "source": ["dealt", "flipped"], "dest": "flipped"},
        {"trigger": "score", "source": ["dealt", "flipped"], "dest": None},
        {"trigger": "clear_round", "source": "flipped", "dest": "open"},
        {"trigger": "restart", "source": "open", "dest": None},
    ]

    def __init__(
        self,
        num_decks: int = 6,
        num_spots: int = 1,
        max_penetration: float = 0.75,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a table with an open round.

        Args:
            num_decks: Number of decks in the shoe
            num_spots: Number of player betting spots
            max_penetration: Shoe penetration (0.0-1.0) above which the next
                deal reshuffles; values outside the range are clamped
            rng: Random number generator for reproducible shoes
        """
        if num_spots < 1:
            raise ValueError("Table must have at least 1 spot")

        self.shoe = Shoe(num_decks=num_decks, rng=rng)
        self.max_penetration = min(max(max_penetration, 0.0), 1.0)
        self.dealer = Hand()
        self._player_hands = [Hand() for _ in range(num_spots)]
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="open",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @classmethod
    def from_config(cls, table_config: TableConfig | None = None) -> "Table":
        """Build a table from configuration (environment defaults if omitted)."""
        table_config = table_config or TableConfig()
        rng = Random(table_config.seed) if table_config.seed is not None else None
        return cls(
            num_decks=table_config.num_decks,
            num_spots=table_config.num_spots,
            max_penetration=table_config.max_penetration,
            rng=rng,
        )

    @property
    def state(self) -> TableState:
        """Get current table state as enum."""
        return TableState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to table events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Deal the initial two cards to every spot and the dealer.

        Returns:
            True if the shoe was reshuffled before dealing
        """
        self.start_round()

        reshuffled = self.shoe.penetration > self.max_penetration
        if reshuffled:
            logger.info(
                "Penetration %.2f exceeds %.2f, reshuffling",
                self.shoe.penetration,
                self.max_penetration,
            )
            self.shoe.reset()
            self.events.emit(EventType.SHOE_SHUFFLED, num_decks=self.shoe.num_decks)

        # Players then dealer, twice; the dealer's second card is the hole card
        for round_index in range(2):
            for spot, hand in enumerate(self._player_hands):
                self._deal_card_to_hand(hand, spot=spot)
            self._deal_card_to_hand(self.dealer, face_up=round_index == 0)

        self.events.emit(EventType.ROUND_DEALT, num_spots=self.num_spots)
        return reshuffled

    def _check_hands_empty(self) -> None:
        assert all(hand.is_empty for hand in self._player_hands), "hands left on table"

    def _deal_card_to_hand(
        self,
        hand: Hand,
        spot: int | None = None,
        face_up: bool = True,
    ) -> Card:
        """Draw a card from the shoe into a hand."""
        card = self.shoe.draw()
        hand.insert(card)
        self.events.emit(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if spot is None else f"player {spot}",
        )
        return card

    def _dealer_has_blackjack(self) -> bool:
        return self.dealer.is_blackjack

    def peek(self) -> bool:
        """
        Check the dealer's hand for blackjack.

        A dealer blackjack flips the hand and ends the round.
        """
        self.peek_hole()
        if self.dealer.is_blackjack:
            self._reveal_hole()
            self.events.emit(EventType.DEALER_BLACKJACK)
            return True
        return False

    def player_hand(self, spot: int) -> Hand:
        """Return the hand at a player spot."""
        if not 0 <= spot < len(self._player_hands):
            raise IndexError(f"No player spot {spot}")
        return self._player_hands[spot]

    @property
    def player_hands(self) -> tuple[Hand, ...]:
        """Return every player hand in spot order."""
        return tuple(self._player_hands)

    @property
    def num_spots(self) -> int:
        """Return the number of player spots."""
        return len(self._player_hands)

    def player_hit(self, spot: int) -> bool:
        """
        Deal a player an additional card.

        Returns:
            True if the hand is busted
        """
        hand = self.player_hand(spot)
        self.hit_player()

        if hand.is_busted:
            return True

        self._deal_card_to_hand(hand, spot=spot)
        self.events.emit(EventType.PLAYER_HIT, spot=spot, hand_value=hand.value)

        if hand.is_busted:
            self.events.emit(EventType.PLAYER_BUSTS, spot=spot)
            return True
        return False

    def dealer_hit(self) -> bool:
        """
        Deal the dealer an additional card, revealing the hole card.

        Returns:
            True if the dealer is busted
        """
        concealed = self.state == TableState.DEALT
        self.hit_dealer()
        if concealed:
            self._reveal_hole()

        if self.dealer.is_busted:
            return True

        self._deal_card_to_hand(self.dealer)
        self.events.emit(EventType.DEALER_HITS, hand_value=self.dealer.value)

        if self.dealer.is_busted:
            self.events.emit(EventType.DEALER_BUSTS)
            return True
        return False

    def flip_hole(self) -> None:
        """Reveal the dealer's hole card without drawing."""
        concealed = self.state == TableState.DEALT
        self.flip()
        if concealed:
            self._reveal_hole()

    def _reveal_hole(self) -> None:
        self.events.emit(
            EventType.DEALER_REVEALS,
            card=str(self.dealer.cards[1]),
            hand_value=self.dealer.value,
        )

    @property
    def dealer_value(self) -> int | None:
        """Return the dealer's total, or None while the table is open or busted."""
        if self.state == TableState.OPEN:
            return None
        return self.dealer.value

    def get_outcome(self, spot: int) -> Outcome:
        """Return the outcome of a player spot against the dealer."""
        hand = self.player_hand(spot)
        self.score()
        return evaluate_hands(hand, self.dealer)

    def clear_hands(self) -> None:
        """Remove all hands once the round has been resolved."""
        self.clear_round()
        self._clear_hands()
        self.events.emit(EventType.HANDS_CLEARED)

    def reset(self) -> None:
        """Rebuild the shoe from scratch and clear all hands."""
        self.restart()
        self.shoe.reset()
        self._clear_hands()
        logger.info("Table reset with a fresh %d-deck shoe", self.shoe.num_decks)
        self.events.emit(EventType.TABLE_RESET, num_decks=self.shoe.num_decks)

    def _clear_hands(self) -> None:
        self.dealer = Hand()
        self._player_hands = [Hand() for _ in self._player_hands]

    def __str__(self) -> str:
        lines = [
            f"Dealer: {self.dealer}    "
            f"count {self.shoe.running_count:.1f} penetration {self.shoe.penetration:.2f}"
        ]
        for spot, hand in enumerate(self._player_hands):
            lines.append(f"Player {spot + 1}: {hand}")
        return "\n".join(lines)
