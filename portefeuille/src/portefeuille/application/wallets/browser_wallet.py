"""
Browser (redirect) wallet.

Sign-in and signing leave the current page for the wallet website.
The host calls complete_sign_in() once the wallet redirects back.
"""

import base64
from typing import List, Optional
from urllib.parse import urlencode

from portefeuille.application.wallet_options import WalletOptions
from portefeuille.application.wallets.base_wallet import BaseWallet, SessionGrant
from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata
from portefeuille.domain.services.i_browser_navigator import IBrowserNavigator
from portefeuille.domain.services.i_wallet_behaviour import IBrowserWalletBehaviour
from portefeuille.domain.value_objects.params import (
    ConnectParams,
    SignAndSendTransactionParams,
    SignAndSendTransactionsParams,
)
from portefeuille.domain.value_objects.transaction import Transaction
from portefeuille.infrastructure.reporting import Emoji


class BrowserWallet(BaseWallet, IBrowserWalletBehaviour):
    """
    Wallet hosted on a website reached through page redirects.

    connect() emits connected{pending: True}; signing returns None
    because control leaves the page.
    """

    def __init__(
        self,
        metadata: WalletMetadata,
        options: WalletOptions,
        navigator: IBrowserNavigator,
        wallet_url: Optional[str] = None,
    ):
        super().__init__(metadata, options)
        self.navigator = navigator
        self.wallet_url = (wallet_url or self.network.wallet_url or "").rstrip("/")

    def _probe_availability(self) -> bool:
        return bool(self.wallet_url)

    async def _authorize(self, params: Optional[ConnectParams]) -> SessionGrant:
        params = params or ConnectParams()
        url = self.login_url(params)

        self.reporter.info(
            f"{Emoji.WALLET.REDIRECT} Redirecting to wallet sign-in",
            context=self._context,
        )
        await self.navigator.navigate(url)
        return SessionGrant(pending=True)

    def login_url(self, params: ConnectParams) -> str:
        """Build the wallet sign-in URL for the current page."""
        current = self.navigator.current_url()
        query = {
            "success_url": current,
            "failure_url": current,
        }
        contract_id = params.contract_id or self.network.contract_id
        if contract_id:
            query["contract_id"] = contract_id
        method_names = params.method_names or tuple(self.network.method_names)
        if method_names:
            query["methodNames"] = ",".join(method_names)
        return f"{self.wallet_url}/login/?{urlencode(query)}"

    async def complete_sign_in(
        self,
        account_id: str,
        public_key: Optional[str] = None,
    ) -> None:
        """
        Finish a sign-in redirect round trip.

        Args:
            account_id: Account returned by the wallet in the callback
            public_key: Access key returned by the wallet (if any)
        """
        async with self._guard("complete_sign_in"):
            await self._confirm_session([AccountState(account_id, public_key)])

    async def sign_and_send_transaction(
        self,
        params: SignAndSendTransactionParams,
    ) -> None:
        async with self._guard("sign_and_send_transaction"):
            self._ensure_session()
            await self._redirect_to_sign([self._resolve(params.to_transaction())])

    async def sign_and_send_transactions(
        self,
        params: SignAndSendTransactionsParams,
    ) -> None:
        async with self._guard("sign_and_send_transactions"):
            self._ensure_session()
            await self._redirect_to_sign(
                [self._resolve(tx) for tx in params.transactions]
            )

    def sign_url(self, transactions: List[Transaction]) -> str:
        """Build the wallet signing URL carrying transactions in order."""
        encoded = ",".join(
            base64.b64encode(tx.to_bytes()).decode("ascii") for tx in transactions
        )
        query = {
            "transactions": encoded,
            "callbackUrl": self.navigator.current_url(),
        }
        return f"{self.wallet_url}/sign?{urlencode(query)}"

    async def _redirect_to_sign(self, transactions: List[Transaction]) -> None:
        self.reporter.info(
            f"{Emoji.WALLET.REDIRECT} Redirecting {len(transactions)} "
            "transaction(s) to wallet for signing",
            context=self._context,
        )
        await self.navigator.navigate(self.sign_url(transactions))
