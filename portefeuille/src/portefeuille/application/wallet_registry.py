"""
WalletRegistry - Host-side catalogue of wallet modules.

Modules are kept in registration order. Ids are unique.
"""

from typing import Dict, List, Optional

from portefeuille.application.wallet_module import WalletModule
from portefeuille.application.wallet_options import WalletOptions
from portefeuille.domain.entities.wallet_metadata import WalletType
from portefeuille.domain.exceptions import DuplicateWalletError, WalletNotFoundError
from portefeuille.domain.services.i_wallet_behaviour import IWalletBehaviour
from portefeuille.infrastructure.reporting import Emoji, SystemReporter


class WalletRegistry:
    """
    Registry of wallet modules offered by a host application.

    Usage:
        registry = WalletRegistry()
        registry.register(HardwareWallet.module(metadata, device=device))
        wallets = registry.build_available(options)
    """

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self._modules: Dict[str, WalletModule] = {}
        self.reporter = reporter

    def register(self, module: WalletModule) -> None:
        """
        Add module to the registry.

        Raises:
            DuplicateWalletError: If a module with the same id exists
        """
        if module.id in self._modules:
            raise DuplicateWalletError(module.id)

        self._modules[module.id] = module
        if self.reporter:
            self.reporter.info(
                f"{Emoji.SYSTEM.REGISTER} Registered {module.type.value} "
                f"wallet '{module.id}'",
                context="WalletRegistry",
                verbose_level=2,
            )

    def unregister(self, wallet_id: str) -> WalletModule:
        """
        Remove module from the registry.

        Raises:
            WalletNotFoundError: If no module has this id
        """
        module = self.get(wallet_id)
        del self._modules[wallet_id]
        return module

    def get(self, wallet_id: str) -> WalletModule:
        """
        Get module by id.

        Raises:
            WalletNotFoundError: If no module has this id
        """
        module = self._modules.get(wallet_id)
        if module is None:
            raise WalletNotFoundError(wallet_id)
        return module

    def list_modules(self, wallet_type: Optional[WalletType] = None) -> List[WalletModule]:
        """List modules in registration order, optionally filtered by type."""
        modules = list(self._modules.values())
        if wallet_type is None:
            return modules
        wallet_type = WalletType(wallet_type)
        return [module for module in modules if module.type == wallet_type]

    def build(self, wallet_id: str, options: WalletOptions) -> IWalletBehaviour:
        """Construct the wallet registered under wallet_id (no I/O)."""
        return self.get(wallet_id).wallet(options)

    def build_available(self, options: WalletOptions) -> List[IWalletBehaviour]:
        """
        Construct every module and keep the available instances.

        Returns:
            Wallets whose is_available() is true, in registration order
        """
        available = []
        for module in self._modules.values():
            wallet = module.wallet(options)
            if wallet.is_available():
                available.append(wallet)
            elif self.reporter:
                self.reporter.debug(
                    f"{Emoji.SYSTEM.DISCOVER} Wallet '{module.id}' not available",
                    context="WalletRegistry",
                )
        return available

    def __contains__(self, wallet_id: object) -> bool:
        return wallet_id in self._modules

    def __len__(self) -> int:
        return len(self._modules)
