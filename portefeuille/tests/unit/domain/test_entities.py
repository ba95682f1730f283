"""
Unit tests for domain entities.

Tests AccountState and WalletMetadata validation and serialization.

Usage:
    pytest portefeuille/tests/unit/domain/test_entities.py
"""

import pytest

from portefeuille.domain.entities import AccountState, WalletMetadata, WalletType


class TestAccountState:
    """Unit tests for AccountState."""

    def test_create_with_public_key(self):
        """Test account keeps id and key."""
        account = AccountState("alice.near", "ed25519:abc")

        assert account.account_id == "alice.near"
        assert account.public_key == "ed25519:abc"

    @pytest.mark.parametrize("account_id", ["", "   "])
    def test_blank_account_id_rejected(self, account_id):
        """Test blank account id raises ValueError."""
        with pytest.raises(ValueError, match="Account id"):
            AccountState(account_id)

    def test_dict_round_trip(self):
        """Test to_dict/from_dict preserve the account."""
        account = AccountState("alice.near", "ed25519:abc")

        assert AccountState.from_dict(account.to_dict()) == account

    def test_from_dict_without_public_key(self):
        """Test missing public key defaults to None."""
        account = AccountState.from_dict({"account_id": "bob.near"})

        assert account.public_key is None

    def test_is_immutable(self):
        """Test account cannot be modified."""
        account = AccountState("alice.near")

        with pytest.raises(AttributeError):
            account.account_id = "mallory.near"


class TestWalletMetadata:
    """Unit tests for WalletMetadata."""

    def _create(self, **overrides) -> WalletMetadata:
        fields = {
            "id": "ledger",
            "name": "Ledger",
            "icon_url": "https://icons.example/ledger.svg",
            "type": WalletType.HARDWARE,
        }
        fields.update(overrides)
        return WalletMetadata(**fields)

    def test_create_valid_metadata(self):
        """Test metadata keeps its fields."""
        metadata = self._create(description="Hardware wallet")

        assert metadata.id == "ledger"
        assert metadata.type is WalletType.HARDWARE
        assert metadata.description == "Hardware wallet"

    def test_type_string_is_coerced(self):
        """Test raw type strings become WalletType members."""
        metadata = self._create(type="injected")

        assert metadata.type is WalletType.INJECTED

    def test_unknown_type_rejected(self):
        """Test unknown wallet type raises ValueError."""
        with pytest.raises(ValueError):
            self._create(type="paper")

    @pytest.mark.parametrize("field", ["id", "name", "icon_url"])
    def test_required_fields(self, field):
        """Test empty required fields raise ValueError."""
        with pytest.raises(ValueError):
            self._create(**{field: ""})

    def test_to_dict(self):
        """Test dictionary form uses the type value."""
        data = self._create().to_dict()

        assert data == {
            "id": "ledger",
            "name": "Ledger",
            "description": None,
            "icon_url": "https://icons.example/ledger.svg",
            "type": "hardware",
        }
