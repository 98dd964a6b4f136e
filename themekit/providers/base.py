# themekit/providers/base.py
"""
Defines the abstract base class for theme detail providers.
"""
from abc import ABC, abstractmethod
from typing import Optional

from themekit.schemas.theme import ThemeRequest


class ThemeDetailsProvider(ABC):
    """
    Supplies the name and dark/light choice for a new theme. Concrete
    providers wrap whatever front end collects the input (terminal prompts,
    command-line flags, a GUI form).
    """

    @abstractmethod
    def request_theme_details(self) -> Optional[ThemeRequest]:
        """
        Asks for the details of a new theme.

        :return: The request, or None if the user cancelled.
        """
        pass
