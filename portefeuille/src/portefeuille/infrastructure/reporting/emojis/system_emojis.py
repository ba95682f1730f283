"""
System-level operations and lifecycle emoji definitions.
"""

from portefeuille.infrastructure.reporting.emojis.base_emojis import ComponentEmoji


class SystemEmoji(ComponentEmoji):
    """System-level operations and lifecycle events."""

    # ============================================================
    # Lifecycle Operations
    # ============================================================
    STARTUP = "🚀"
    SHUTDOWN = "🛑"
    READY = "✅"
    INIT = "🆕"

    # ============================================================
    # Configuration
    # ============================================================
    CONFIG = "⚙️"
    CONFIG_LOAD = "📋"

    # ============================================================
    # Registry
    # ============================================================
    REGISTER = "📝"
    DISCOVER = "🔍"
    CLEANUP = "🧹"
