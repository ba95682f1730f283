"""
Signer collaborator exceptions.

Raised by extensions, devices, relays and navigators. The wallet
lifecycle translates them into contract errors depending on the phase
(connect, signing) in which they occur.
"""

from typing import Optional

from portefeuille.domain.exceptions.base import PortefeuilleException


class SignerError(PortefeuilleException):
    """Base exception for signer collaborator failures."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class RequestRejectedError(SignerError):
    """User declined the request in the wallet UI or on the device."""


class SignerUnavailableError(SignerError):
    """Device unplugged, extension removed or relay unreachable."""
