"""
Injected (extension) wallet.
"""

from typing import List, Optional

from portefeuille.application.wallet_options import WalletOptions
from portefeuille.application.wallets.base_wallet import BaseWallet, SessionGrant
from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata
from portefeuille.domain.exceptions import (
    RequestRejectedError,
    SignerUnavailableError,
    ValidationError,
)
from portefeuille.domain.services.i_injected_extension import IInjectedExtension
from portefeuille.domain.services.i_wallet_behaviour import IInjectedWalletBehaviour
from portefeuille.domain.value_objects.params import ConnectParams
from portefeuille.domain.value_objects.transaction import (
    SignedTransaction,
    Transaction,
)
from portefeuille.infrastructure.events import SubscriptionScope
from portefeuille.infrastructure.reporting import Emoji


class InjectedWallet(BaseWallet, IInjectedWalletBehaviour):
    """
    Wallet exposed by a browser extension or native host.

    The extension is the source of truth for the session: init()
    reads its accounts, and its notifications drive accountsChanged,
    networkChanged, disconnected and uninstalled.
    """

    def __init__(
        self,
        metadata: WalletMetadata,
        options: WalletOptions,
        extension: IInjectedExtension,
        download_url: str,
    ):
        if not download_url:
            raise ValueError("Injected wallets require a download_url")

        super().__init__(metadata, options)
        self.extension = extension
        self._download_url = download_url

    def get_download_url(self) -> str:
        return self._download_url

    def _probe_availability(self) -> bool:
        return self.extension.is_installed()

    async def _setup(self) -> List[AccountState]:
        if not self.extension.is_installed():
            raise SignerUnavailableError(
                f"{self.name} extension is not installed",
                {"download_url": self._download_url},
            )

        accounts = list(await self.extension.get_accounts())
        self._lifetime_scope.track(
            self.extension.on("uninstalled", lambda *_: self._handle_uninstalled())
        )
        return accounts

    async def _authorize(self, params: Optional[ConnectParams]) -> SessionGrant:
        params = params or ConnectParams()
        contract_id = params.contract_id or self.network.contract_id
        if not contract_id:
            raise ValidationError(
                "contract_id",
                "not given and no default contract_id configured",
            )

        method_names = params.method_names or tuple(self.network.method_names)
        accounts = await self.extension.request_sign_in(contract_id, method_names)
        if not accounts:
            raise RequestRejectedError("Extension authorized no account")

        return SessionGrant(accounts=list(accounts))

    def _bind_session(self, scope: SubscriptionScope) -> None:
        scope.track(
            self.extension.on("accountsChanged", self._handle_accounts_changed)
        )
        scope.track(
            self.extension.on("networkChanged", lambda *_: self._handle_network_changed())
        )
        scope.track(
            self.extension.on("signedOut", lambda *_: self._handle_external_disconnect())
        )

    async def _sign(self, transaction: Transaction) -> SignedTransaction:
        account = self._account_for(transaction.signer_id)
        signature = await self.extension.sign_transaction(transaction)

        self.reporter.debug(
            f"{Emoji.WALLET.SIGN} Extension signed tx for {account.account_id}",
            context=self._context,
        )
        return SignedTransaction(
            transaction=transaction,
            signature=signature,
            public_key=account.public_key,
        )

    async def _teardown(self) -> None:
        await self.extension.sign_out()
