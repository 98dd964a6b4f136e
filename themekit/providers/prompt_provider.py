# themekit/providers/prompt_provider.py
"""
Interactive terminal provider built on Typer prompts.
"""
from typing import Optional

import typer
from rich.console import Console

from themekit.generator import ThemeFileNameGenerator
from themekit.providers.base import ThemeDetailsProvider
from themekit.schemas.theme import ThemeRequest
from themekit.utils.logger import setup_logger

logger = setup_logger(__name__)
console = Console()


class PromptThemeDetailsProvider(ThemeDetailsProvider):
    """
    Asks for the theme name and the dark flag on the terminal.

    A name that fails validation is reported and asked for again, so the user
    can correct it without starting over. Ctrl-C or end of input cancels.
    """

    def __init__(self, generator: ThemeFileNameGenerator, default_dark: bool = True):
        self.generator = generator
        self.default_dark = default_dark

    def _ask_name(self) -> str:
        while True:
            name = typer.prompt("Theme name", default="", show_default=False)
            result = self.generator.validate(name)
            if result.ok:
                return name
            console.print(f"[red]{result.message}[/red]")

    def request_theme_details(self) -> Optional[ThemeRequest]:
        try:
            name = self._ask_name()
            is_dark = typer.confirm("Dark theme?", default=self.default_dark)
        except typer.Abort:
            logger.info("Theme creation cancelled at the prompt.")
            return None
        return ThemeRequest(name=name, is_dark=is_dark)
