"""
Emoji registry for reporter messages.

Usage:
    >>> from portefeuille.infrastructure.reporting.emojis import Emoji
    >>> Emoji.WALLET.CONNECTED
    '🟢'
"""

from portefeuille.infrastructure.reporting.emojis.base_emojis import ComponentEmoji
from portefeuille.infrastructure.reporting.emojis.system_emojis import SystemEmoji
from portefeuille.infrastructure.reporting.emojis.wallet_emojis import WalletEmoji


class Emoji:
    """
    Central emoji registry with semantic categories.

    Categories:
        SYSTEM: Configuration, registry and lifecycle
        WALLET: Sessions, signing, devices and relays
    """

    SYSTEM = SystemEmoji
    WALLET = WalletEmoji

    # Shortcuts
    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"

    @classmethod
    def format(cls, category: str, name: str, message: str) -> str:
        """
        Prefix message with an emoji looked up by category and name.

        Example:
            >>> Emoji.format('WALLET', 'SIGN', 'Signing tx')
            '✍️ Signing tx'
        """
        emoji = getattr(getattr(cls, category.upper()), name.upper())
        return f"{emoji} {message}"


__all__ = ["Emoji", "ComponentEmoji", "SystemEmoji", "WalletEmoji"]
