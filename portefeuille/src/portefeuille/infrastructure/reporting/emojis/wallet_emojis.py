"""
Wallet lifecycle and signing emoji definitions.
"""

from portefeuille.infrastructure.reporting.emojis.base_emojis import ComponentEmoji


class WalletEmoji(ComponentEmoji):
    """Wallet lifecycle, signing and device events."""

    # ============================================================
    # Session
    # ============================================================
    CONNECT = "🔗"
    CONNECTED = "🟢"
    PENDING = "⏳"
    DISCONNECT = "🔌"
    ACCOUNTS = "👥"
    NETWORK = "🌐"
    UNINSTALLED = "🗑️"

    # ============================================================
    # Signing
    # ============================================================
    SIGN = "✍️"
    SUBMIT = "📤"
    OUTCOME = "📥"
    REJECTED = "🚫"
    REDIRECT = "↪️"

    # ============================================================
    # Devices & relays
    # ============================================================
    DEVICE = "🔐"
    RELAY = "📡"
