"""
Wallet lifecycle machinery shared by all variants.

BaseWallet owns the state machine, the per-instance busy guard,
session persistence, event emission and the ordered signing loop.
Variants plug in through the underscore hooks (_probe_availability,
_setup, _authorize, _sign, _teardown, _release_resources,
_bind_session).
"""

import asyncio
import json
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Optional, Set, Tuple

from portefeuille.application.wallet_module import WalletModule
from portefeuille.application.wallet_options import WalletOptions
from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.entities.wallet_metadata import WalletMetadata
from portefeuille.domain.events import (
    AccountsChangedData,
    AccountsChangedEvent,
    ConnectedData,
    ConnectedEvent,
    DisconnectedEvent,
    InitData,
    InitEvent,
    NetworkChangedEvent,
    UninstalledEvent,
)
from portefeuille.domain.exceptions import (
    BusyError,
    ConnectionRejectedError,
    InitializationError,
    NotConnectedError,
    RequestRejectedError,
    SignerUnavailableError,
    SigningRejectedError,
    UnavailableError,
    ValidationError,
)
from portefeuille.domain.services.i_wallet_behaviour import IWalletBehaviour
from portefeuille.domain.value_objects.params import (
    SignAndSendTransactionParams,
    SignAndSendTransactionsParams,
)
from portefeuille.domain.value_objects.transaction import (
    ExecutionOutcome,
    SignedTransaction,
    Transaction,
)
from portefeuille.domain.value_objects.wallet_state import WalletState
from portefeuille.infrastructure.events import SubscriptionScope
from portefeuille.infrastructure.reporting import Emoji


@dataclass(frozen=True)
class SessionGrant:
    """
    Result of a successful authorization request.

    Attributes:
        accounts: Authorized accounts (empty while pending)
        pending: Authorization awaits external confirmation
    """

    accounts: List[AccountState] = field(default_factory=list)
    pending: bool = False


class BaseWallet(IWalletBehaviour):
    """
    Common implementation of the wallet behaviour contract.

    Concurrency: init, connect and signing are serialized by a lock;
    a call arriving while another is in flight fails with BusyError.
    disconnect is never guarded and never raises.

    Batch semantics: transactions are signed and submitted one by one
    in input order. On the first failure the error is re-raised
    unchanged; earlier transactions stay submitted, later ones are
    never signed nor submitted.
    """

    SESSION_KEY = "session"

    def __init__(self, metadata: WalletMetadata, options: WalletOptions):
        """
        Initialize wallet (pure construction, no I/O).

        Args:
            metadata: Static wallet description (type must match variant)
            options: Injected collaborators

        Raises:
            ValueError: If metadata type does not match the variant
        """
        if metadata.type != self.type:
            raise ValueError(
                f"{self.__class__.__name__} is a {self.type.value} wallet, "
                f"metadata declares {metadata.type.value}"
            )

        self._metadata = metadata
        self._options = options
        self.reporter = options.logger

        self._state = WalletState.UNINITIALIZED
        self._accounts: List[AccountState] = []
        self._pending = False
        self._lock = asyncio.Lock()

        # Listeners bound to the current session / to the instance lifetime
        self._session_scope: Optional[SubscriptionScope] = None
        self._lifetime_scope: SubscriptionScope = options.emitter.scope()
        self._background: Set[asyncio.Task] = set()

    @classmethod
    def module(cls, metadata: WalletMetadata, **collaborators) -> WalletModule:
        """
        Build a WalletModule producing this variant.

        Args:
            metadata: Static wallet description
            **collaborators: Variant collaborators (extension, device, ...)

        Returns:
            WalletModule whose factory constructs this class
        """

        def factory(module_metadata: WalletMetadata, options: WalletOptions):
            return cls(module_metadata, options, **collaborators)

        return WalletModule(metadata, factory)

    # ================================================================
    # Properties
    # ================================================================

    @property
    def metadata(self) -> WalletMetadata:
        return self._metadata

    @property
    def id(self) -> str:
        return self._metadata.id

    @property
    def name(self) -> str:
        return self._metadata.name

    @property
    def state(self) -> WalletState:
        return self._state

    @property
    def pending(self) -> bool:
        """Check if the session awaits external confirmation."""
        return self._pending

    @property
    def options(self) -> WalletOptions:
        return self._options

    @property
    def network(self):
        return self._options.options

    @property
    def provider(self):
        return self._options.provider

    @property
    def storage(self):
        return self._options.storage

    @property
    def emitter(self):
        return self._options.emitter

    @property
    def _context(self) -> str:
        return f"Wallet:{self.id}"

    # ================================================================
    # Contract operations
    # ================================================================

    async def init(self) -> None:
        """
        Prepare the wallet and restore a persisted session.

        A second call is a no-op.

        Raises:
            InitializationError: If preparation fails
            BusyError: If another operation is in flight
        """
        async with self._guard("init"):
            self._ensure_installed()
            if self._state is not WalletState.UNINITIALIZED:
                self.reporter.debug(
                    "init() already done, ignoring",
                    context=self._context,
                )
                return
            await self._initialize()

    def is_available(self) -> bool:
        """Check if the wallet can be offered (pure, never raises)."""
        if self._state is WalletState.UNINSTALLED:
            return False
        try:
            return bool(self._probe_availability())
        except Exception:
            return False

    async def connect(self, params: Optional[Any] = None) -> None:
        """
        Request authorization and open a session.

        Runs init() first if it was not called. Connecting while a
        session is open replaces it (the old one is disconnected).

        Raises:
            ConnectionRejectedError: If the user or device declines
            UnavailableError: If the wallet disappeared mid-flow
            BusyError: If another operation is in flight
        """
        async with self._guard("connect"):
            self._ensure_installed()
            await self._settle_background()
            if self._state is WalletState.UNINITIALIZED:
                await self._initialize()

            if self._state is WalletState.CONNECTED:
                await self._close_session(notify_remote=True)

            self.reporter.info(
                f"{Emoji.WALLET.CONNECT} Requesting authorization",
                context=self._context,
                verbose_level=2,
            )

            try:
                grant = await self._authorize(params)
            except RequestRejectedError as e:
                await self._abort_connect()
                self.reporter.warning(
                    f"{Emoji.WALLET.REJECTED} Connection rejected: {e.message}",
                    context=self._context,
                )
                raise ConnectionRejectedError(e.message, self.id) from e
            except SignerUnavailableError as e:
                await self._abort_connect()
                raise UnavailableError(e.message, self.id) from e
            except BaseException:
                await self._abort_connect()
                raise

            self._open_session(grant.accounts, pending=grant.pending)
            if not grant.pending:
                await self._save_session()

            if grant.pending:
                self.reporter.info(
                    f"{Emoji.WALLET.PENDING} Connection pending external confirmation",
                    context=self._context,
                )
            else:
                self.reporter.info(
                    f"{Emoji.WALLET.CONNECTED} Connected "
                    f"({self._account_ids_text()})",
                    context=self._context,
                )
            self._emit(
                ConnectedEvent,
                data=ConnectedData(pending=grant.pending, accounts=self._accounts),
            )

    async def disconnect(self) -> None:
        """
        End the session. No-op when there is none; never raises.
        """
        if self._state is not WalletState.CONNECTED:
            self.reporter.debug(
                f"disconnect() ignored in state {self._state.value}",
                context=self._context,
            )
            return

        await self._close_session(notify_remote=True)

    async def get_accounts(self) -> List[AccountState]:
        return list(self._accounts)

    async def sign_and_send_transaction(
        self,
        params: SignAndSendTransactionParams,
    ) -> Optional[ExecutionOutcome]:
        """
        Sign and broadcast one transaction.

        Raises:
            NotConnectedError: If there is no active session
            SigningRejectedError: If the user or device declines
            ValidationError: If no receiver can be resolved
            BusyError: If another operation is in flight
        """
        async with self._guard("sign_and_send_transaction"):
            self._ensure_session()
            transaction = self._resolve(params.to_transaction())
            return await self._sign_and_submit(transaction, index=None)

    async def sign_and_send_transactions(
        self,
        params: SignAndSendTransactionsParams,
    ) -> Optional[List[ExecutionOutcome]]:
        """
        Sign and broadcast transactions sequentially, in input order.

        All transactions are resolved before the first one is signed,
        so invalid input fails without side effects. Stops at the first
        failure and re-raises it unchanged.
        """
        async with self._guard("sign_and_send_transactions"):
            self._ensure_session()
            transactions = [self._resolve(tx) for tx in params.transactions]

            outcomes: List[ExecutionOutcome] = []
            for index, transaction in enumerate(transactions):
                try:
                    outcomes.append(await self._sign_and_submit(transaction, index))
                except Exception:
                    self.reporter.warning(
                        f"{Emoji.ERROR} Batch stopped at transaction {index + 1}/"
                        f"{len(transactions)} ({len(outcomes)} already submitted)",
                        context=self._context,
                    )
                    raise
            return outcomes

    # ================================================================
    # Hooks (override in variants)
    # ================================================================

    def _probe_availability(self) -> bool:
        """Side-effect free availability probe."""
        return True

    async def _setup(self) -> List[AccountState]:
        """
        Prepare SDK/extension/device support.

        Returns:
            Accounts of a restored session (empty if none)
        """
        accounts, extra = await self._load_session()
        if accounts:
            self._restore_extra(extra)
        return accounts

    async def _authorize(self, params: Optional[Any]) -> SessionGrant:
        """Ask the signer for authorization."""
        raise NotImplementedError

    async def _sign(self, transaction: Transaction) -> SignedTransaction:
        """Sign a resolved transaction in-process."""
        raise NotImplementedError(
            f"{self.__class__.__name__} does not sign in-process"
        )

    async def _teardown(self) -> None:
        """Revoke the remote session (sign out, close relay)."""

    async def _release_resources(self) -> None:
        """Release exclusively owned resources (device handles)."""

    def _bind_session(self, scope: SubscriptionScope) -> None:
        """Register collaborator listeners for the session lifetime."""

    def _session_extra(self) -> Dict[str, Any]:
        """Variant data persisted with the session."""
        return {}

    def _restore_extra(self, extra: Dict[str, Any]) -> None:
        """Restore variant data persisted with the session."""

    # ================================================================
    # Notifications from collaborators
    # ================================================================

    def _handle_accounts_changed(self, accounts: List[AccountState]) -> None:
        """Account set changed on the signer side."""
        if self._state is not WalletState.CONNECTED or self._pending:
            return

        accounts = list(accounts)
        if not accounts:
            self._handle_external_disconnect()
            return

        if accounts == self._accounts:
            return

        self._accounts = accounts
        self.reporter.info(
            f"{Emoji.WALLET.ACCOUNTS} Accounts changed ({self._account_ids_text()})",
            context=self._context,
        )
        self._emit(
            AccountsChangedEvent,
            data=AccountsChangedData(accounts=self._accounts),
        )
        self._schedule(self._save_session())

    def _handle_network_changed(self) -> None:
        """Signer switched network; state is unaffected."""
        if self._state is WalletState.UNINSTALLED:
            return

        self.reporter.info(
            f"{Emoji.WALLET.NETWORK} Network changed",
            context=self._context,
        )
        self._emit(NetworkChangedEvent)

    def _handle_external_disconnect(self) -> None:
        """Session revoked on the signer side."""
        if self._state is not WalletState.CONNECTED:
            return

        self.reporter.info(
            f"{Emoji.WALLET.DISCONNECT} Session revoked externally",
            context=self._context,
        )
        self._finish_session(WalletState.DISCONNECTED)
        self._schedule(self._cleanup_session(notify_remote=False))

    def _handle_uninstalled(self) -> None:
        """Wallet software removed; terminal."""
        if self._state is WalletState.UNINSTALLED:
            return

        self.reporter.warning(
            f"{Emoji.WALLET.UNINSTALLED} Wallet uninstalled",
            context=self._context,
        )
        had_session = self._state is WalletState.CONNECTED
        self._finish_session(WalletState.UNINSTALLED)
        self._lifetime_scope.close()
        if had_session:
            self._schedule(self._cleanup_session(notify_remote=False))

    def _complete_pending_session(self, accounts: List[AccountState]) -> None:
        """External confirmation arrived for a pending connection."""
        if self._state is not WalletState.CONNECTED or not self._pending:
            return

        accounts = list(accounts)
        if not accounts:
            self._handle_external_disconnect()
            return

        self._accounts = accounts
        self._pending = False
        self.reporter.info(
            f"{Emoji.WALLET.CONNECTED} Connection confirmed "
            f"({self._account_ids_text()})",
            context=self._context,
        )
        self._emit(ConnectedEvent, data=ConnectedData(accounts=self._accounts))
        self._schedule(self._save_session())

    async def _confirm_session(self, accounts: List[AccountState]) -> None:
        """
        Finish a connection confirmed outside connect().

        Used after a redirect round trip (the page may have been
        reloaded, so there may be no pending session) or an explicit
        relay approval.
        """
        accounts = list(accounts)
        if not accounts:
            raise ValidationError("accounts", "at least one account is required")

        self._ensure_installed()
        await self._settle_background()
        if self._state is WalletState.UNINITIALIZED:
            await self._initialize()

        if self._state is WalletState.CONNECTED and not self._pending:
            self._handle_accounts_changed(accounts)
            return

        if self._state is WalletState.CONNECTED:
            self._accounts = accounts
            self._pending = False
        else:
            self._open_session(accounts, pending=False)

        await self._save_session()
        self.reporter.info(
            f"{Emoji.WALLET.CONNECTED} Connection confirmed "
            f"({self._account_ids_text()})",
            context=self._context,
        )
        self._emit(ConnectedEvent, data=ConnectedData(accounts=self._accounts))

    async def wait_background_tasks(self) -> None:
        """Wait for scheduled persistence/cleanup tasks to finish."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    async def _settle_background(self) -> None:
        """
        Finish work scheduled for an earlier session.

        Cleanup and save tasks act on whatever session is current when
        they run, so they must complete before a session opens or closes.
        """
        current = asyncio.current_task()
        tasks = [task for task in self._background if task is not current]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # ================================================================
    # Internals
    # ================================================================

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        if self._lock.locked():
            raise BusyError(operation, self.id)
        async with self._lock:
            yield

    def _ensure_installed(self) -> None:
        if self._state is WalletState.UNINSTALLED:
            raise UnavailableError("Wallet has been uninstalled", self.id)

    def _ensure_session(self) -> None:
        self._ensure_installed()
        if self._state is not WalletState.CONNECTED:
            raise NotConnectedError("No active session", self.id)
        if self._pending:
            raise NotConnectedError("Session awaits confirmation", self.id)

    async def _initialize(self) -> None:
        await self._settle_background()
        try:
            accounts = await self._setup()
        except InitializationError:
            raise
        except Exception as e:
            message = getattr(e, "message", None) or str(e) or e.__class__.__name__
            self.reporter.error(
                f"{Emoji.ERROR} Initialization failed: {message}",
                context=self._context,
            )
            raise InitializationError(message, self.id) from e

        if accounts:
            self._open_session(accounts, pending=False)
        else:
            self._state = WalletState.INITIALIZED

        self.reporter.info(
            f"{Emoji.SYSTEM.INIT} Initialized "
            f"(restored accounts: {len(self._accounts)})",
            context=self._context,
            verbose_level=2,
        )
        self._emit(InitEvent, data=InitData(accounts=self._accounts))

    def _open_session(self, accounts: List[AccountState], pending: bool) -> None:
        self._accounts = list(accounts)
        self._pending = pending
        self._state = WalletState.CONNECTED
        self._session_scope = self.emitter.scope()
        self._bind_session(self._session_scope)

    async def _abort_connect(self) -> None:
        try:
            await self._release_resources()
        except Exception as e:
            self.reporter.warning(
                f"{Emoji.WARNING} Resource release failed: {e}",
                context=self._context,
            )

    async def _close_session(self, notify_remote: bool) -> None:
        # State changes first so a re-entrant disconnect is a no-op
        self._state = WalletState.DISCONNECTED
        await self._settle_background()
        self.reporter.info(
            f"{Emoji.WALLET.DISCONNECT} Disconnecting",
            context=self._context,
            verbose_level=2,
        )
        await self._cleanup_session(notify_remote=notify_remote)
        self._finish_session(WalletState.DISCONNECTED)

    def _finish_session(self, new_state: WalletState) -> None:
        """Clear local session state, emit, then drop session listeners."""
        self._accounts = []
        self._pending = False
        self._state = new_state

        if new_state is WalletState.UNINSTALLED:
            self._emit(UninstalledEvent)
        else:
            self._emit(DisconnectedEvent)

        if self._session_scope is not None:
            self._session_scope.close()
            self._session_scope = None

    async def _cleanup_session(self, notify_remote: bool) -> None:
        """Remote teardown, resource release and storage cleanup; never raises."""
        if notify_remote:
            try:
                await self._teardown()
            except Exception as e:
                self.reporter.warning(
                    f"{Emoji.WARNING} Remote teardown failed: {e}",
                    context=self._context,
                )

        try:
            await self._release_resources()
        except Exception as e:
            self.reporter.warning(
                f"{Emoji.WARNING} Resource release failed: {e}",
                context=self._context,
            )

        try:
            await self.storage.remove(self._session_key)
        except Exception as e:
            self.reporter.warning(
                f"{Emoji.WARNING} Could not clear persisted session: {e}",
                context=self._context,
            )

    def _resolve(self, transaction: Transaction) -> Transaction:
        """Fill in default signer and receiver."""
        account_ids = [account.account_id for account in self._accounts]

        signer_id = transaction.signer_id or account_ids[0]
        if signer_id not in account_ids:
            raise NotConnectedError(
                f"Account {signer_id} is not part of the session",
                self.id,
            )

        receiver_id = transaction.receiver_id or self.network.contract_id
        if not receiver_id:
            raise ValidationError(
                "receiver_id",
                "not given and no default contract_id configured",
            )

        return transaction.with_parties(signer_id, receiver_id)

    async def _sign_and_submit(
        self,
        transaction: Transaction,
        index: Optional[int],
    ) -> ExecutionOutcome:
        self.reporter.info(
            f"{Emoji.WALLET.SIGN} Signing tx {transaction.signer_id} -> "
            f"{transaction.receiver_id} ({len(transaction.actions)} actions)",
            context=self._context,
            verbose_level=2,
        )

        try:
            signed = await self._sign(transaction)
        except RequestRejectedError as e:
            self.reporter.warning(
                f"{Emoji.WALLET.REJECTED} Signing rejected: {e.message}",
                context=self._context,
            )
            raise SigningRejectedError(e.message, self.id, index) from e
        except SignerUnavailableError as e:
            raise UnavailableError(e.message, self.id) from e

        # Provider errors propagate unwrapped
        return await self.provider.submit(signed)

    def _account_for(self, account_id: str) -> AccountState:
        for account in self._accounts:
            if account.account_id == account_id:
                return account
        raise NotConnectedError(f"Account {account_id} is not part of the session", self.id)

    @property
    def _session_key(self) -> str:
        return self.network.storage_key(self.id, self.SESSION_KEY)

    async def _save_session(self) -> None:
        # A save scheduled before the session ended must not resurrect it
        if self._state is not WalletState.CONNECTED or self._pending:
            return

        document = {
            "accounts": [account.to_dict() for account in self._accounts],
            "extra": self._session_extra(),
        }
        await self.storage.set(self._session_key, json.dumps(document))

    async def _load_session(self) -> Tuple[List[AccountState], Dict[str, Any]]:
        raw = await self.storage.get(self._session_key)
        if not raw:
            return [], {}

        try:
            document = json.loads(raw)
            accounts = [AccountState.from_dict(item) for item in document["accounts"]]
            extra = document.get("extra") or {}
        except (KeyError, TypeError, ValueError) as e:
            self.reporter.warning(
                f"{Emoji.WARNING} Discarding corrupt persisted session: {e}",
                context=self._context,
            )
            await self.storage.remove(self._session_key)
            return [], {}
        return accounts, extra

    def _emit(self, event_cls, **payload) -> None:
        self.emitter.emit(event_cls.create(self.id, **payload))

    def _schedule(self, coro) -> None:
        """Run coroutine in the background; failures are reported."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            self.reporter.warning(
                f"{Emoji.WARNING} No running event loop, skipped background task",
                context=self._context,
            )
            return

        task = loop.create_task(coro)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self.reporter.error(
                f"{Emoji.ERROR} Background task failed: {error}",
                context=self._context,
            )

    def _account_ids_text(self) -> str:
        return ", ".join(account.account_id for account in self._accounts) or "none"
