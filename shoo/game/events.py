"""Table events for the presentation layer."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of table events."""

    # Shoe events
    SHOE_SHUFFLED = auto()
    CARD_DEALT = auto()

    # Round flow events
    ROUND_DEALT = auto()
    HANDS_CLEARED = auto()
    TABLE_RESET = auto()

    # Player events
    PLAYER_HIT = auto()
    PLAYER_BUSTS = auto()

    # Dealer events
    DEALER_BLACKJACK = auto()
    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_BUSTS = auto()


@dataclass(frozen=True)
class TableEvent:
    """
    Immutable table event.

    Events let a presentation layer follow the round without polling the
    table after every call.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[TableEvent], None]


class EventEmitter:
    """
    Fan-out of table events to subscribers, with a running log.

    Handlers run in subscription order. A handler registered without an
    event type receives every event.
    """

    def __init__(self) -> None:
        self._subscriptions: list[tuple[EventType | None, EventHandler]] = []
        self._log: list[TableEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Register a handler.

        Args:
            handler: Called with each matching event
            event_type: Only deliver this type, or None for every event
        """
        self._subscriptions.append((event_type, handler))

    def emit(self, event_type: EventType, **data: Any) -> TableEvent:
        """Log a new event and deliver it to matching handlers."""
        event = TableEvent(event_type=event_type, data=data)
        self._log.append(event)
        for wanted, handler in self._subscriptions:
            if wanted is None or wanted is event_type:
                handler(event)
        return event

    @property
    def history(self) -> list[TableEvent]:
        """Events emitted so far, oldest first."""
        return list(self._log)
