"""
WalletModule - Factory describing one wallet kind.

Hosts enumerate modules (id, name, icon, type) before creating any
wallet instance.
"""

from typing import Callable

from portefeuille.application.wallet_options import WalletOptions
from portefeuille.domain.entities.wallet_metadata import WalletMetadata, WalletType
from portefeuille.domain.services.i_wallet_behaviour import IWalletBehaviour

WalletFactory = Callable[[WalletMetadata, WalletOptions], IWalletBehaviour]


class WalletModule:
    """
    Metadata plus factory for a wallet variant.

    Usage:
        module = InjectedWallet.module(metadata, extension=ext, download_url=url)
        wallet = module.wallet(options)
    """

    def __init__(self, metadata: WalletMetadata, factory: WalletFactory):
        self.metadata = metadata
        self._factory = factory

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def description(self):
        return self.metadata.description

    @property
    def icon_url(self) -> str:
        return self.metadata.icon_url

    @property
    def type(self) -> WalletType:
        return self.metadata.type

    def wallet(self, options: WalletOptions) -> IWalletBehaviour:
        """
        Construct a wallet instance (no I/O).

        Args:
            options: Collaborators handed to the wallet

        Returns:
            Wallet instance matching this module's metadata

        Raises:
            TypeError: If the factory produced a mismatching instance
        """
        instance = self._factory(self.metadata, options)

        if not isinstance(instance, IWalletBehaviour):
            raise TypeError(
                f"Factory for '{self.id}' returned {type(instance).__name__}, "
                "expected a wallet"
            )

        if instance.type != self.metadata.type:
            raise TypeError(
                f"Factory for '{self.id}' returned a {instance.type.value} wallet, "
                f"metadata declares {self.metadata.type.value}"
            )

        return instance

    def __repr__(self) -> str:
        return f"WalletModule(id={self.id!r}, type={self.type.value!r})"
