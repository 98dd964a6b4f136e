# themekit/action.py
"""
The "New Theme" action: ask for theme details, generate the theme JSON file
from its template, and hand the file to the theme registry.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from themekit.generator import ThemeFileNameGenerator
from themekit.providers.base import ThemeDetailsProvider
from themekit.registry import NoOpThemeRegistry, ThemeRegistry
from themekit.schemas.config import ThemeKitSettings
from themekit.schemas.theme import ThemeRequest
from themekit.utils.logger import setup_logger
from themekit.utils.template_renderer import TemplateRenderer
from themekit.utils.template_store import THEME_JSON_TEMPLATE, TemplateStore

logger = setup_logger(__name__)


class NewThemeAction:
    """
    Wires the generator to its collaborators.

    Every collaborator can be swapped; `from_settings` builds the default set
    from the loaded configuration.
    """

    def __init__(
        self,
        provider: ThemeDetailsProvider,
        generator: Optional[ThemeFileNameGenerator] = None,
        store: Optional[TemplateStore] = None,
        renderer: Optional[TemplateRenderer] = None,
        registry: Optional[ThemeRegistry] = None,
        template_name: str = THEME_JSON_TEMPLATE,
    ):
        self.provider = provider
        self.generator = generator or ThemeFileNameGenerator()
        self.store = store or TemplateStore()
        self.renderer = renderer or TemplateRenderer()
        self.registry = registry or NoOpThemeRegistry()
        self.template_name = template_name

    @classmethod
    def from_settings(
        cls,
        settings: ThemeKitSettings,
        provider: ThemeDetailsProvider,
        generator: Optional[ThemeFileNameGenerator] = None,
        registry: Optional[ThemeRegistry] = None,
    ) -> "NewThemeAction":
        return cls(
            provider=provider,
            generator=generator or ThemeFileNameGenerator(settings.themes),
            store=TemplateStore(settings.templates.dir),
            registry=registry,
            template_name=settings.templates.theme_json,
        )

    def create_theme_json(self, request: ThemeRequest, directory: Union[str, Path]) -> Path:
        """Generates the theme file for `request` inside `directory`.

        :raises ThemeValidationError: If the theme name is invalid.
        :raises TemplateError: If the template is missing or fails to render.
        :raises ThemeFileExistsError: If the target file already exists.
        """
        generated = self.generator.generate(request)
        template = self.store.get_template(self.template_name)
        return self.renderer.create_from_template(
            template, generated.file_name, generated.properties, directory
        )

    def perform(self, directory: Union[str, Path]) -> Optional[Path]:
        """Runs the whole action. Returns None if the user cancelled."""
        request = self.provider.request_theme_details()
        if request is None:
            logger.info("New theme action cancelled; nothing was written.")
            return None

        path = self.create_theme_json(request, directory)
        self.registry.register(path)
        return path
