# themekit/providers/static_provider.py
"""
Non-interactive provider that hands back a request fixed up front.
"""
from typing import Optional

from themekit.providers.base import ThemeDetailsProvider
from themekit.schemas.theme import ThemeRequest


class StaticThemeDetailsProvider(ThemeDetailsProvider):
    """Returns the same request every time; used for command-line flags."""

    def __init__(self, name: str, is_dark: bool = True):
        self.request = ThemeRequest(name=name, is_dark=is_dark)

    def request_theme_details(self) -> Optional[ThemeRequest]:
        return self.request
