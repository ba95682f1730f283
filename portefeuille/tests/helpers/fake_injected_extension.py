"""
Injected extension double with controllable notifications.
"""

import asyncio
from typing import Callable, Dict, List, Optional, Sequence

from portefeuille.domain.entities.account_state import AccountState
from portefeuille.domain.exceptions import RequestRejectedError
from portefeuille.domain.services.i_injected_extension import IInjectedExtension
from portefeuille.domain.value_objects.transaction import Transaction


class FakeInjectedExtension(IInjectedExtension):
    """In-memory extension; push() fires notifications to listeners."""

    def __init__(
        self,
        installed: bool = True,
        accounts: Sequence[AccountState] = (),
        sign_in_accounts: Sequence[AccountState] = (),
    ):
        self.installed = installed
        self.accounts = list(accounts)
        self.sign_in_accounts = list(sign_in_accounts)
        self.reject_sign_in = False
        self.reject_signing = False
        self.fail_sign_out = False
        self.fail_get_accounts: Optional[Exception] = None
        self.sign_in_requests: List[tuple] = []
        self.signed: List[Transaction] = []
        self.sign_out_calls = 0
        self.listeners: Dict[str, List[Callable]] = {}
        # Set to an unset Event to hold sign-in and signing requests
        self.gate: Optional[asyncio.Event] = None

    def is_installed(self) -> bool:
        return self.installed

    async def get_accounts(self) -> List[AccountState]:
        if self.fail_get_accounts is not None:
            raise self.fail_get_accounts
        return list(self.accounts)

    async def request_sign_in(self, contract_id, method_names) -> List[AccountState]:
        self.sign_in_requests.append((contract_id, tuple(method_names)))
        if self.gate is not None:
            await self.gate.wait()
        if self.reject_sign_in:
            raise RequestRejectedError("User rejected the request")
        self.accounts = list(self.sign_in_accounts)
        return list(self.accounts)

    async def sign_out(self) -> None:
        self.sign_out_calls += 1
        if self.fail_sign_out:
            raise RuntimeError("extension crashed")
        self.accounts = []

    async def sign_transaction(self, transaction: Transaction) -> bytes:
        if self.gate is not None:
            await self.gate.wait()
        if self.reject_signing:
            raise RequestRejectedError("User rejected the transaction")
        self.signed.append(transaction)
        return b"extension-signature"

    def on(self, event: str, listener: Callable) -> Callable[[], None]:
        self.listeners.setdefault(event, []).append(listener)

        def unsubscribe() -> None:
            self.listeners[event].remove(listener)

        return unsubscribe

    def listener_count(self, event: str = None) -> int:
        if event is None:
            return sum(len(items) for items in self.listeners.values())
        return len(self.listeners.get(event, []))

    def push(self, event: str, *args) -> None:
        for listener in list(self.listeners.get(event, [])):
            listener(*args)
