"""Table state machine and events."""

from transitions.core import MachineError

from shoo.game.events import EventEmitter, EventType, TableEvent
from shoo.game.state import TableState
from shoo.game.table import Table

__all__ = [
    "EventEmitter",
    "EventType",
    "MachineError",
    "TableEvent",
    "TableState",
    "Table",
]
