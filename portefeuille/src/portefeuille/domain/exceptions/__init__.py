"""
Domain exceptions package.
"""

# Base exceptions
from portefeuille.domain.exceptions.base import (
    PortefeuilleException,
    ValidationError,
)

# Provider exceptions
from portefeuille.domain.exceptions.provider import (
    ProviderConnectionError,
    ProviderError,
    ProviderTimeoutError,
    RpcError,
)

# Registry exceptions
from portefeuille.domain.exceptions.registry import (
    DuplicateWalletError,
    WalletNotFoundError,
)

# Signer collaborator exceptions
from portefeuille.domain.exceptions.signer import (
    RequestRejectedError,
    SignerError,
    SignerUnavailableError,
)

# Wallet contract exceptions
from portefeuille.domain.exceptions.wallet import (
    BusyError,
    ConnectionRejectedError,
    InitializationError,
    NotConnectedError,
    SigningRejectedError,
    UnavailableError,
    WalletError,
)

__all__ = [
    # Base
    "PortefeuilleException",
    "ValidationError",
    # Wallet
    "WalletError",
    "InitializationError",
    "UnavailableError",
    "ConnectionRejectedError",
    "NotConnectedError",
    "SigningRejectedError",
    "BusyError",
    # Signer
    "SignerError",
    "RequestRejectedError",
    "SignerUnavailableError",
    # Registry
    "DuplicateWalletError",
    "WalletNotFoundError",
    # Provider
    "ProviderError",
    "ProviderConnectionError",
    "ProviderTimeoutError",
    "RpcError",
]
