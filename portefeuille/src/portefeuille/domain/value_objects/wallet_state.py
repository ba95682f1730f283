"""
WalletState value object - Lifecycle states of a wallet instance.
"""

from enum import Enum


class WalletState(str, Enum):
    """
    Wallet lifecycle states.

    uninitialized -> initialized -> connected <-> disconnected,
    plus terminal uninstalled reachable from any state.
    """

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    UNINSTALLED = "uninstalled"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return self is WalletState.UNINSTALLED

    @property
    def has_session(self) -> bool:
        """Check if the state carries an active session."""
        return self is WalletState.CONNECTED
