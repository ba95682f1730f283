"""
WalletOptions - Collaborators injected into every wallet instance.
"""

from dataclasses import dataclass
from typing import Optional

from portefeuille.config.settings import NetworkOptions, get_settings
from portefeuille.domain.services.i_persistent_storage import IPersistentStorage
from portefeuille.domain.services.i_provider import IProvider
from portefeuille.infrastructure.events import EventEmitter
from portefeuille.infrastructure.providers import JsonRpcProvider
from portefeuille.infrastructure.reporting import SystemReporter
from portefeuille.infrastructure.storage import InMemoryStorage


@dataclass(frozen=True)
class WalletOptions:
    """
    Immutable configuration bundle handed to a wallet at construction.

    Attributes:
        options: Network and application configuration
        provider: RPC capability used to broadcast signed transactions
        emitter: Shared event channel (referenced, not owned)
        logger: Reporter used for lifecycle logging
        storage: Key/value storage for session persistence
    """

    options: NetworkOptions
    provider: IProvider
    emitter: EventEmitter
    logger: SystemReporter
    storage: IPersistentStorage

    @classmethod
    def build(
        cls,
        options: Optional[NetworkOptions] = None,
        provider: Optional[IProvider] = None,
        emitter: Optional[EventEmitter] = None,
        logger: Optional[SystemReporter] = None,
        storage: Optional[IPersistentStorage] = None,
    ) -> "WalletOptions":
        """
        Build options, defaulting every collaborator that is not given.

        Defaults: settings singleton, JsonRpcProvider on the configured
        node, fresh EventEmitter, stdout reporter, InMemoryStorage.
        No I/O is performed.
        """
        options = options or get_settings()
        logger = logger or SystemReporter.from_level_name(
            "portefeuille",
            options.log_level,
            log_dir=options.log_dir,
            verbose=3 if options.debug else 1,
        )
        return cls(
            options=options,
            provider=provider
            or JsonRpcProvider(
                options.node_url,
                timeout=options.rpc_timeout,
                reporter=logger,
            ),
            emitter=emitter or EventEmitter(reporter=logger),
            logger=logger,
            storage=storage or InMemoryStorage(),
        )
