"""
Unit tests for EventEmitter and SubscriptionScope.

Usage:
    pytest portefeuille/tests/unit/infrastructure/test_event_emitter.py
"""

from portefeuille.domain.events import DisconnectedEvent, NetworkChangedEvent
from portefeuille.infrastructure.events import ANY_EVENT, EventEmitter


class TestEventEmitter:
    """Unit tests for EventEmitter."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _emitter(self) -> EventEmitter:
        return EventEmitter(reporter=self.reporter)

    # ================================================================
    # Test Methods
    # ================================================================

    def test_delivers_in_subscription_order(self):
        """Test listeners run in the order they subscribed."""
        emitter = self._emitter()
        calls = []
        emitter.on("disconnected", lambda e: calls.append("first"))
        emitter.on("disconnected", lambda e: calls.append("second"))
        emitter.on(ANY_EVENT, lambda e: calls.append("any"))

        emitter.emit(DisconnectedEvent.create("w"))

        assert calls == ["first", "second", "any"]

    def test_only_matching_listeners(self):
        emitter = self._emitter()
        calls = []
        emitter.on("disconnected", calls.append)

        emitter.emit(NetworkChangedEvent.create("w"))

        assert calls == []

    def test_failing_listener_does_not_stop_delivery(self):
        """Test a raising listener is reported and others still run."""
        emitter = self._emitter()
        calls = []

        def broken(event):
            raise RuntimeError("listener bug")

        emitter.on("disconnected", broken)
        emitter.on("disconnected", calls.append)

        emitter.emit(DisconnectedEvent.create("w"))

        assert len(calls) == 1

    def test_unsubscribe(self):
        emitter = self._emitter()
        calls = []
        unsubscribe = emitter.on("disconnected", calls.append)

        unsubscribe()
        emitter.emit(DisconnectedEvent.create("w"))

        assert calls == []
        assert emitter.listener_count() == 0

    def test_off_unknown_listener(self):
        emitter = self._emitter()

        assert emitter.off("disconnected", print) is False

    def test_listener_may_unsubscribe_during_emit(self):
        """Test emission iterates over a snapshot."""
        emitter = self._emitter()
        calls = []
        holder = {}

        def once(event):
            calls.append("once")
            holder["unsubscribe"]()

        holder["unsubscribe"] = emitter.on("disconnected", once)
        emitter.on("disconnected", lambda e: calls.append("after"))

        emitter.emit(DisconnectedEvent.create("w"))
        emitter.emit(DisconnectedEvent.create("w"))

        assert calls == ["once", "after", "after"]

    def test_listener_count_by_name(self):
        emitter = self._emitter()
        emitter.on("disconnected", print)
        emitter.on("connected", print)

        assert emitter.listener_count("disconnected") == 1
        assert emitter.listener_count() == 2


class TestSubscriptionScope:
    """Unit tests for SubscriptionScope."""

    def test_close_releases_all(self):
        """Test scope removes emitter listeners and tracked callables."""
        emitter = EventEmitter(reporter=self.reporter)
        scope = emitter.scope()
        released = []

        scope.on("disconnected", print)
        scope.on("connected", print)
        scope.track(lambda: released.append("external"))

        assert len(scope) == 3
        assert scope.close() == 3
        assert emitter.listener_count() == 0
        assert released == ["external"]
        assert len(scope) == 0

    def test_close_is_reverse_order(self):
        scope = EventEmitter().scope()
        order = []
        scope.track(lambda: order.append(1))
        scope.track(lambda: order.append(2))

        scope.close()

        assert order == [2, 1]

    def test_failing_release_is_reported(self):
        """Test a failing unsubscribe does not stop the others."""
        scope = EventEmitter(reporter=self.reporter).scope()
        released = []

        def broken():
            raise RuntimeError("already gone")

        scope.track(lambda: released.append("ok"))
        scope.track(broken)

        assert scope.close() == 1
        assert released == ["ok"]

    def test_close_twice(self):
        scope = EventEmitter().scope()
        scope.track(lambda: None)

        scope.close()

        assert scope.close() == 0
