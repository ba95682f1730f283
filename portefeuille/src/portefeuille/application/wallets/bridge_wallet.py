"""
Bridge (relay) wallet.

Requests travel over a relay to a companion app. A connection may stay
pending until the companion app approves it.
"""

from typing import Any, Dict, List, Optional

from portefeuille.application.wallet_options import WalletOptions
from portefeuille.application.wallets.base_wallet import BaseWallet, SessionGrant
from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata
from portefeuille.domain.exceptions import ValidationError
from portefeuille.domain.services.i_bridge_relay import IBridgeRelay
from portefeuille.domain.services.i_wallet_behaviour import IBridgeWalletBehaviour
from portefeuille.domain.value_objects.params import ConnectParams
from portefeuille.domain.value_objects.transaction import (
    SignedTransaction,
    Transaction,
)
from portefeuille.infrastructure.events import SubscriptionScope
from portefeuille.infrastructure.reporting import Emoji


class BridgeWallet(BaseWallet, IBridgeWalletBehaviour):
    """Wallet whose signer is a companion app reached through a relay."""

    def __init__(
        self,
        metadata: WalletMetadata,
        options: WalletOptions,
        relay: IBridgeRelay,
    ):
        super().__init__(metadata, options)
        self.relay = relay
        self.topic: Optional[str] = None

    def _probe_availability(self) -> bool:
        return self.relay.is_reachable()

    async def _setup(self) -> List[AccountState]:
        accounts, extra = await self._load_session()
        topic = extra.get("topic")
        if not accounts or not topic:
            return []

        live_accounts = list(await self.relay.restore_session(topic))
        if not live_accounts:
            self.reporter.info(
                f"{Emoji.WALLET.RELAY} Persisted relay session expired",
                context=self._context,
            )
            await self.storage.remove(self._session_key)
            return []

        self.topic = topic
        return live_accounts

    async def _authorize(self, params: Optional[ConnectParams]) -> SessionGrant:
        params = params or ConnectParams()
        contract_id = params.contract_id or self.network.contract_id
        if not contract_id:
            raise ValidationError(
                "contract_id",
                "not given and no default contract_id configured",
            )

        method_names = params.method_names or tuple(self.network.method_names)
        session = await self.relay.request_session(
            self.network.network_id,
            contract_id,
            method_names,
        )
        self.topic = session.topic

        self.reporter.info(
            f"{Emoji.WALLET.RELAY} Relay session {session.topic} opened",
            context=self._context,
            verbose_level=2,
        )

        if session.pending or not session.accounts:
            return SessionGrant(pending=True)
        return SessionGrant(accounts=list(session.accounts))

    async def confirm_session(self, accounts: List[AccountState]) -> None:
        """
        Complete a pending connection with the approved accounts.

        Args:
            accounts: Accounts approved in the companion app
        """
        async with self._guard("confirm_session"):
            await self._confirm_session(accounts)

    def _bind_session(self, scope: SubscriptionScope) -> None:
        scope.track(self.relay.on("sessionApproved", self._complete_pending_session))
        scope.track(self.relay.on("accountsChanged", self._handle_accounts_changed))
        scope.track(
            self.relay.on("sessionDeleted", lambda *_: self._handle_external_disconnect())
        )

    async def _sign(self, transaction: Transaction) -> SignedTransaction:
        account = self._account_for(transaction.signer_id)

        self.reporter.info(
            f"{Emoji.WALLET.RELAY} Waiting for companion app signature",
            context=self._context,
            verbose_level=2,
        )
        signature = await self.relay.request_signature(self.topic, transaction)

        return SignedTransaction(
            transaction=transaction,
            signature=signature,
            public_key=account.public_key,
        )

    async def _teardown(self) -> None:
        if self.topic:
            await self.relay.close_session(self.topic)

    async def _release_resources(self) -> None:
        self.topic = None

    def _session_extra(self) -> Dict[str, Any]:
        return {"topic": self.topic}
