# themekit/utils/template_store.py
"""
Resolves named file templates.

Templates are looked up in an optional user directory first and then in the
templates bundled with the package, so a user can override `ThemeJson.json`
by dropping a file with the same name into their templates directory.
"""
import json
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
)

from themekit.exceptions import TemplateNotFoundError, TemplateRenderError
from themekit.utils.logger import setup_logger

logger = setup_logger(__name__)

THEME_JSON_TEMPLATE = "ThemeJson.json"
BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def json_string(value: object) -> str:
    """Escapes a value for use between the quotes of a JSON string literal.

    Lone surrogates (undecodable bytes from argv on POSIX) cannot be written
    as UTF-8, so they are emitted as \\uXXXX escapes like json.dumps does in
    ASCII mode.
    """
    escaped = json.dumps(str(value), ensure_ascii=False)[1:-1]
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", escaped)


class TemplateStore:
    """
    Jinja2-backed template lookup with a user override directory.
    """

    def __init__(self, templates_dir: Optional[Union[str, Path]] = None):
        self.templates_dir = Path(templates_dir) if templates_dir else None
        self._bundled_loader = FileSystemLoader(str(BUNDLED_TEMPLATES_DIR))
        self._user_loader = (
            FileSystemLoader(str(self.templates_dir)) if self.templates_dir else None
        )

        loaders = [self._bundled_loader]
        if self._user_loader is not None:
            loaders.insert(0, self._user_loader)

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters["json_string"] = json_string

    def get_template(self, name: str = THEME_JSON_TEMPLATE) -> Template:
        """Loads and compiles a template by name.

        :param name: The template file name, e.g. ``ThemeJson.json``.
        :type name: str
        :return: The compiled Jinja2 template.
        :rtype: jinja2.Template
        :raises TemplateNotFoundError: If no loader knows the template.
        :raises TemplateRenderError: If the template has a syntax error.
        """
        logger.debug(f"Resolving template: {name}")
        try:
            return self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(f"Template not found: '{name}'") from e
        except TemplateSyntaxError as e:
            raise TemplateRenderError(
                f"Template '{name}' has a syntax error on line {e.lineno}: {e.message}"
            ) from e

    def list_templates(self) -> List[Tuple[str, str]]:
        """Returns (name, source) pairs; a user template shadows a bundled one."""
        found = {}
        for name in self._bundled_loader.list_templates():
            found[name] = "bundled"
        if self._user_loader is not None and self.templates_dir.is_dir():
            for name in self._user_loader.list_templates():
                found[name] = "user"
        return sorted(found.items())
