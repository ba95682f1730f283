"""
RPC provider exceptions.
"""

from typing import Optional


class ProviderError(Exception):
    """Base exception for RPC provider operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ProviderConnectionError(ProviderError):
    """RPC node connection failed."""


class ProviderTimeoutError(ProviderError):
    """RPC call exceeded its timeout."""


class RpcError(ProviderError):
    """RPC node answered with a JSON-RPC error object."""
