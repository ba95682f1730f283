"""Logging infrastructure."""

from portefeuille.infrastructure.reporting.emojis import Emoji
from portefeuille.infrastructure.reporting.system_reporter import SystemReporter

__all__ = ["SystemReporter", "Emoji"]
