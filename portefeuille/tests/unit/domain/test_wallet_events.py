"""
Unit tests for wallet event schemas.

Usage:
    pytest portefeuille/tests/unit/domain/test_wallet_events.py
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from portefeuille.domain.entities import AccountState
from portefeuille.domain.events import (
    AccountsChangedData,
    AccountsChangedEvent,
    ConnectedData,
    ConnectedEvent,
    DisconnectedEvent,
    InitEvent,
    WalletEventType,
)


class TestWalletEvents:
    """Unit tests for wallet events."""

    def test_create_sets_metadata(self):
        """Test create() stamps wallet id and timestamp."""
        event = DisconnectedEvent.create("ledger")

        assert event.type == WalletEventType.DISCONNECTED.value
        assert event.wallet_id == "ledger"
        assert event.metadata.timestamp.endswith("Z")
        assert event.data is None

    def test_init_defaults_to_no_accounts(self):
        event = InitEvent.create("ledger")

        assert event.data.accounts == []

    def test_connected_carries_accounts(self):
        account = AccountState("alice.near")

        event = ConnectedEvent.create(
            "ledger",
            data=ConnectedData(accounts=[account]),
        )

        assert event.data.accounts == [account]
        assert event.data.pending is False

    def test_accounts_changed_requires_data(self):
        with pytest.raises(PydanticValidationError):
            AccountsChangedEvent.create("ledger")

    def test_events_are_frozen(self):
        event = AccountsChangedEvent.create(
            "ledger",
            data=AccountsChangedData(accounts=[AccountState("alice.near")]),
        )

        with pytest.raises(PydanticValidationError):
            event.type = "connected"

    def test_extra_fields_forbidden(self):
        with pytest.raises(PydanticValidationError):
            DisconnectedEvent.create("ledger", unexpected=True)

    def test_type_is_fixed(self):
        with pytest.raises(PydanticValidationError):
            InitEvent.create("ledger", type="connected")
