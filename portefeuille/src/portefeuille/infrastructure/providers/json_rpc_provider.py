"""
JSON-RPC provider for broadcasting signed transactions.

Talks to a ledger RPC node over HTTP. No retries: callers decide
whether a failed submission may be resent.
"""

import asyncio
import itertools
from typing import Any, Dict, List, Optional

import aiohttp

from portefeuille.domain.exceptions import (
    ProviderConnectionError,
    ProviderTimeoutError,
    RpcError,
)
from portefeuille.domain.services.i_provider import IProvider
from portefeuille.domain.value_objects.transaction import (
    ExecutionOutcome,
    SignedTransaction,
)
from portefeuille.infrastructure.reporting import Emoji, SystemReporter


class JsonRpcProvider(IProvider):
    """
    JSON-RPC 2.0 client for an RPC node.

    Features:
    - broadcast_tx_commit submission
    - Timeout protection
    - Errors mapped onto the ProviderError hierarchy
    """

    BROADCAST_METHOD = "broadcast_tx_commit"

    def __init__(
        self,
        node_url: str,
        timeout: float = 10.0,
        reporter: Optional[SystemReporter] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize provider.

        Args:
            node_url: RPC node URL
            timeout: Total timeout per call in seconds
            reporter: Optional reporter for submission logs
            session: Optional shared aiohttp session (not closed by close())
        """
        self.node_url = node_url
        self.timeout = timeout
        self.reporter = reporter
        self._session = session
        self._owns_session = session is None
        self._ids = itertools.count(1)

    async def submit(self, transaction: SignedTransaction) -> ExecutionOutcome:
        """
        Broadcast signed transaction and wait for its final outcome.

        Raises:
            ProviderConnectionError: On connection error
            ProviderTimeoutError: On timeout
            RpcError: If the node returns an error or a malformed result
        """
        if self.reporter:
            self.reporter.debug(
                f"{Emoji.WALLET.SUBMIT} Broadcasting tx "
                f"{transaction.signer_id} -> {transaction.transaction.receiver_id}",
                context="JsonRpcProvider",
            )

        result = await self.call(self.BROADCAST_METHOD, [transaction.encode()])

        try:
            outcome = ExecutionOutcome.from_rpc(result)
        except (KeyError, TypeError, ValueError) as e:
            raise RpcError(
                f"Malformed execution outcome: {e}",
                details={"method": self.BROADCAST_METHOD},
            )

        if self.reporter:
            self.reporter.info(
                f"{Emoji.WALLET.OUTCOME} Tx {outcome.transaction_hash} "
                f"status={outcome.status.value}",
                context="JsonRpcProvider",
                verbose_level=2,
            )
        return outcome

    async def call(self, method: str, params: List[Any]) -> Dict[str, Any]:
        """
        Perform one JSON-RPC call.

        Args:
            method: RPC method name
            params: Positional parameters

        Returns:
            The 'result' member of the response
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }

        try:
            session = self._get_session()
            async with session.post(
                self.node_url,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                response.raise_for_status()
                body = await response.json()

        except asyncio.TimeoutError:
            raise ProviderTimeoutError(
                f"RPC timeout: {method}",
                details={"method": method, "timeout": self.timeout},
            )
        except aiohttp.ClientError as e:
            raise ProviderConnectionError(
                f"RPC connection error: {str(e)}",
                details={"method": method, "url": self.node_url},
            )

        if body.get("error"):
            error = body["error"]
            if isinstance(error, dict):
                message = error.get("message", "unknown error")
            else:
                message = str(error)
            raise RpcError(
                f"RPC error for {method}: {message}",
                details={"method": method, "error": error},
            )

        if "result" not in body:
            raise RpcError(
                f"RPC response for {method} has no result",
                details={"method": method},
            )
        return body["result"]

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this provider created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
