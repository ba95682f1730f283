"""
Wallet event emitter with production logging.

Explicit, ordered subscriber registry. Emission is synchronous and
follows subscription order. Listeners registered through a
SubscriptionScope are removed together when the scope closes.
"""

from typing import Callable, Dict, List, Optional, Union

from portefeuille.domain.events import BaseEvent, WalletEventType
from portefeuille.infrastructure.reporting import Emoji, SystemReporter

Listener = Callable[[BaseEvent], None]
Unsubscribe = Callable[[], None]

# Listeners registered under this name receive every event
ANY_EVENT = "*"


def _event_name(event: Union[str, WalletEventType]) -> str:
    if isinstance(event, WalletEventType):
        return event.value
    return event


class EventEmitter:
    """Typed publish/subscribe channel for wallet lifecycle events."""

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self._listeners: Dict[str, List[Listener]] = {}
        self.reporter = reporter

    def on(self, event: Union[str, WalletEventType], listener: Listener) -> Unsubscribe:
        """
        Subscribe listener to an event name.

        Args:
            event: Event name (or ANY_EVENT)
            listener: Callable receiving the event model

        Returns:
            Callable that removes this subscription
        """
        name = _event_name(event)
        self._listeners.setdefault(name, []).append(listener)

        def unsubscribe() -> None:
            self.off(name, listener)

        return unsubscribe

    def off(self, event: Union[str, WalletEventType], listener: Listener) -> bool:
        """
        Remove one subscription of listener.

        Returns:
            True if a subscription was removed
        """
        name = _event_name(event)
        listeners = self._listeners.get(name)
        if not listeners or listener not in listeners:
            return False

        listeners.remove(listener)
        if not listeners:
            del self._listeners[name]
        return True

    def emit(self, event: BaseEvent) -> None:
        """
        Deliver event to its subscribers, then to ANY_EVENT subscribers.

        A failing listener is reported and does not stop delivery.
        """
        # Snapshot so listeners may unsubscribe while being notified
        targets = list(self._listeners.get(event.type, ()))
        targets.extend(self._listeners.get(ANY_EVENT, ()))

        for listener in targets:
            try:
                listener(event)
            except Exception as e:
                if self.reporter:
                    self.reporter.error(
                        f"{Emoji.ERROR} Listener failed for '{event.type}' "
                        f"(wallet={event.wallet_id}): {e}",
                        context="EventEmitter",
                    )

    def listener_count(self, event: Optional[Union[str, WalletEventType]] = None) -> int:
        """Count subscriptions for one event name, or for all names."""
        if event is None:
            return sum(len(listeners) for listeners in self._listeners.values())
        return len(self._listeners.get(_event_name(event), ()))

    def scope(self) -> "SubscriptionScope":
        """Create a subscription scope bound to this emitter."""
        return SubscriptionScope(self, reporter=self.reporter)


class SubscriptionScope:
    """
    Group of subscriptions owned by one wallet session.

    Holds emitter listeners and collaborator unsubscribe callables.
    close() releases all of them synchronously, in reverse order.
    """

    def __init__(
        self,
        emitter: EventEmitter,
        reporter: Optional[SystemReporter] = None,
    ):
        self.emitter = emitter
        self.reporter = reporter
        self._unsubscribers: List[Unsubscribe] = []

    def on(self, event: Union[str, WalletEventType], listener: Listener) -> Unsubscribe:
        """Subscribe listener on the emitter for the lifetime of this scope."""
        unsubscribe = self.emitter.on(event, listener)
        self._unsubscribers.append(unsubscribe)
        return unsubscribe

    def track(self, unsubscribe: Unsubscribe) -> None:
        """Release an external subscription when this scope closes."""
        self._unsubscribers.append(unsubscribe)

    def close(self) -> int:
        """
        Release every tracked subscription.

        Returns:
            Number of subscriptions released
        """
        released = 0
        while self._unsubscribers:
            unsubscribe = self._unsubscribers.pop()
            try:
                unsubscribe()
                released += 1
            except Exception as e:
                if self.reporter:
                    self.reporter.warning(
                        f"{Emoji.WARNING} Failed to release subscription: {e}",
                        context="SubscriptionScope",
                    )
        return released

    def __len__(self) -> int:
        return len(self._unsubscribers)
