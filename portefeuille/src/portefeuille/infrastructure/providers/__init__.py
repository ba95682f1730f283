"""RPC provider infrastructure."""

from portefeuille.infrastructure.providers.json_rpc_provider import JsonRpcProvider

__all__ = ["JsonRpcProvider"]
