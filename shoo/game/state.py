"""Table state enumeration."""

from enum import Enum, auto


class TableState(Enum):
    """
    Table state machine states.

    Flow: OPEN → DEALT → FLIPPED → OPEN
    """

    # No cards on the table
    OPEN = auto()

    # Initial two cards dealt, dealer hole card concealed
    DEALT = auto()

    # Dealer hand revealed, round can be resolved and cleared
    FLIPPED = auto()

    def __str__(self) -> str:
        return self.name.title()
