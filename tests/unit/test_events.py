"""Tests for the event emitter."""

from shoo.game.events import EventEmitter, EventType, TableEvent


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_and_catch_all_handlers(self):
        """Typed handlers see their type only; catch-all handlers see everything."""
        emitter = EventEmitter()
        typed, everything = [], []
        emitter.subscribe(typed.append, EventType.PLAYER_HIT)
        emitter.subscribe(everything.append)

        emitter.emit(EventType.PLAYER_HIT, spot=0)
        emitter.emit(EventType.DEALER_HITS)

        assert [e.event_type for e in typed] == [EventType.PLAYER_HIT]
        assert [e.event_type for e in everything] == [
            EventType.PLAYER_HIT,
            EventType.DEALER_HITS,
        ]

    def test_handlers_run_in_subscription_order(self):
        """Handlers are called in the order they subscribed."""
        emitter = EventEmitter()
        calls = []
        emitter.subscribe(lambda event: calls.append("all"))
        emitter.subscribe(lambda event: calls.append("reset"), EventType.TABLE_RESET)

        emitter.emit(EventType.TABLE_RESET)
        assert calls == ["all", "reset"]

    def test_history(self):
        """Every event is logged, and the log cannot be edited from outside."""
        emitter = EventEmitter()
        event = emitter.emit(EventType.CARD_DEALT, card="A♠", hand="dealer")

        assert isinstance(event, TableEvent)
        assert emitter.history == [event]
        assert str(event) == "CARD_DEALT: {'card': 'A♠', 'hand': 'dealer'}"

        emitter.history.clear()
        assert emitter.history == [event]
