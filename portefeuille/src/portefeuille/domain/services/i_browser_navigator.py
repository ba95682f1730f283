"""Browser navigation interface used by redirect wallets."""

from abc import ABC, abstractmethod


class IBrowserNavigator(ABC):
    """Abstract page navigator."""

    @abstractmethod
    def current_url(self) -> str:
        """URL of the current page (used as redirect target)."""

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """
        Leave the current page for url.

        Control may never come back to the caller's execution context.
        """
