from .base import ThemeDetailsProvider
from .prompt_provider import PromptThemeDetailsProvider
from .static_provider import StaticThemeDetailsProvider

__all__ = [
    "ThemeDetailsProvider",
    "PromptThemeDetailsProvider",
    "StaticThemeDetailsProvider",
]
