"""Event infrastructure."""

from portefeuille.infrastructure.events.event_emitter import (
    ANY_EVENT,
    EventEmitter,
    SubscriptionScope,
)

__all__ = ["EventEmitter", "SubscriptionScope", "ANY_EVENT"]
