# themekit/registry.py
"""
Hook for registering a freshly created theme file with the running host.

Registration semantics depend on the host application, so only the hook
and a no-op default live here.
"""
from abc import ABC, abstractmethod
from pathlib import Path

from themekit.utils.logger import setup_logger

logger = setup_logger(__name__)


class ThemeRegistry(ABC):
    """Receives each theme file after it has been created."""

    @abstractmethod
    def register(self, path: Path) -> None:
        pass


class NoOpThemeRegistry(ThemeRegistry):
    """Default registry: records the call and does nothing else."""

    def register(self, path: Path) -> None:
        logger.debug(f"No theme registry configured; skipping registration of '{path}'")
