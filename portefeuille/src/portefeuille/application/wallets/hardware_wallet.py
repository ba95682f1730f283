"""
Hardware (device) wallet.

Device I/O happens only in connect() and signing. init() checks host
support and restores the persisted account without opening the device.
"""

from typing import Any, Dict, List, Optional

from portefeuille.application.wallet_options import WalletOptions
from portefeuille.application.wallets.base_wallet import BaseWallet, SessionGrant
from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata
from portefeuille.domain.exceptions import SignerUnavailableError, ValidationError
from portefeuille.domain.services.i_hardware_device import IHardwareDevice
from portefeuille.domain.services.i_wallet_behaviour import IHardwareWalletBehaviour
from portefeuille.domain.value_objects.params import HardwareWalletConnectParams
from portefeuille.domain.value_objects.transaction import (
    SignedTransaction,
    Transaction,
)
from portefeuille.infrastructure.devices import DeviceHandle
from portefeuille.infrastructure.reporting import Emoji


class HardwareWallet(BaseWallet, IHardwareWalletBehaviour):
    """
    Wallet backed by a hardware signing device.

    The device session is owned through a DeviceHandle: opened lazily
    on first use, released on disconnect and on failed connect.
    """

    def __init__(
        self,
        metadata: WalletMetadata,
        options: WalletOptions,
        device: IHardwareDevice,
    ):
        super().__init__(metadata, options)
        self.device = device
        self.handle = DeviceHandle(device, reporter=self.reporter)
        self.derivation_path: Optional[str] = None

    def _probe_availability(self) -> bool:
        return self.device.is_supported()

    async def _setup(self) -> List[AccountState]:
        if not self.device.is_supported():
            raise SignerUnavailableError(
                "Hardware devices are not supported in this environment"
            )

        accounts = await super()._setup()
        if accounts and not self.derivation_path:
            self.reporter.warning(
                f"{Emoji.WARNING} Persisted session has no derivation path, "
                "discarding it",
                context=self._context,
            )
            await self.storage.remove(self._session_key)
            return []
        return accounts

    async def _authorize(self, params: Optional[Any]) -> SessionGrant:
        if not isinstance(params, HardwareWalletConnectParams):
            raise ValidationError(
                "params",
                "hardware wallets require HardwareWalletConnectParams",
            )

        self.reporter.info(
            f"{Emoji.WALLET.DEVICE} Reading public key at {params.derivation_path}",
            context=self._context,
            verbose_level=2,
        )
        async with self.handle as device:
            public_key = await device.get_public_key(params.derivation_path)

        self.derivation_path = params.derivation_path
        return SessionGrant(accounts=[AccountState(params.account_id, public_key)])

    async def _sign(self, transaction: Transaction) -> SignedTransaction:
        account = self._account_for(transaction.signer_id)

        self.reporter.info(
            f"{Emoji.WALLET.DEVICE} Confirm transaction on device",
            context=self._context,
            verbose_level=2,
        )
        async with self.handle as device:
            signature = await device.sign(transaction.to_bytes(), self.derivation_path)

        return SignedTransaction(
            transaction=transaction,
            signature=signature,
            public_key=account.public_key,
        )

    async def _release_resources(self) -> None:
        self.derivation_path = None
        await self.handle.release()

    def _session_extra(self) -> Dict[str, Any]:
        return {"derivation_path": self.derivation_path}

    def _restore_extra(self, extra: Dict[str, Any]) -> None:
        self.derivation_path = extra.get("derivation_path")
