"""
Browser navigator double recording visited URLs.
"""

from typing import List

from portefeuille.domain.services.i_browser_navigator import IBrowserNavigator


class FakeBrowserNavigator(IBrowserNavigator):
    def __init__(self, url: str = "https://dapp.example/app"):
        self.url = url
        self.visited: List[str] = []

    def current_url(self) -> str:
        return self.url

    async def navigate(self, url: str) -> None:
        self.visited.append(url)
