"""
Test fixtures and configuration.
"""

import logging
from typing import List

import pytest

from helpers import (
    TEST_CONTRACT_ID,
    FakeBridgeRelay,
    FakeBrowserNavigator,
    FakeHardwareDevice,
    FakeInjectedExtension,
    RecordingProvider,
)
from portefeuille.application.wallet_options import WalletOptions
from portefeuille.config.settings import NetworkOptions, reset_settings
from portefeuille.domain.entities import AccountState
from portefeuille.domain.events import BaseEvent
from portefeuille.infrastructure.events import ANY_EVENT, EventEmitter
from portefeuille.infrastructure.reporting import SystemReporter
from portefeuille.infrastructure.storage import InMemoryStorage


class EventRecorder:
    """Collects every event delivered by an emitter."""

    def __init__(self, emitter: EventEmitter):
        self.events: List[BaseEvent] = []
        emitter.on(ANY_EVENT, self.events.append)

    @property
    def types(self) -> List[str]:
        return [event.type for event in self.events]

    def of_type(self, event_type: str) -> List[BaseEvent]:
        return [event for event in self.events if event.type == event_type]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def reporter() -> SystemReporter:
    """Quiet reporter shared by components under test."""
    return SystemReporter(name="portefeuille-test", level=logging.DEBUG, verbose=3)


@pytest.fixture(autouse=True)
def _attach_reporter(request, reporter):
    """Expose the reporter as self.reporter on test classes."""
    if request.instance is not None:
        request.instance.reporter = reporter


@pytest.fixture(autouse=True)
def _clean_settings():
    """Drop cached settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def network_options() -> NetworkOptions:
    return NetworkOptions(
        network_id="localnet",
        contract_id=TEST_CONTRACT_ID,
        method_names=["add_message"],
    )


@pytest.fixture
def emitter(reporter) -> EventEmitter:
    return EventEmitter(reporter=reporter)


@pytest.fixture
def recorder(emitter) -> EventRecorder:
    return EventRecorder(emitter)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def wallet_options(network_options, provider, emitter, reporter, storage) -> WalletOptions:
    return WalletOptions(
        options=network_options,
        provider=provider,
        emitter=emitter,
        logger=reporter,
        storage=storage,
    )


@pytest.fixture
def alice() -> AccountState:
    return AccountState("alice.near", "ed25519:alicekey")


@pytest.fixture
def bob() -> AccountState:
    return AccountState("bob.near", "ed25519:bobkey")


@pytest.fixture
def device() -> FakeHardwareDevice:
    return FakeHardwareDevice()


@pytest.fixture
def extension(alice) -> FakeInjectedExtension:
    return FakeInjectedExtension(sign_in_accounts=[alice])


@pytest.fixture
def relay(alice) -> FakeBridgeRelay:
    return FakeBridgeRelay(accounts=[alice])


@pytest.fixture
def navigator() -> FakeBrowserNavigator:
    return FakeBrowserNavigator()
