# themekit/utils/template_renderer.py
"""
Materializes a template into a new file in a destination directory.
"""
from pathlib import Path
from typing import Mapping, Union

from jinja2 import Template, TemplateError as JinjaTemplateError

from themekit.exceptions import TemplateRenderError, ThemeFileExistsError, ThemeFileWriteError
from themekit.utils.logger import setup_logger

logger = setup_logger(__name__)


class TemplateRenderer:
    """Expands templates with a property map and writes the result exactly once."""

    def render(self, template: Template, properties: Mapping[str, str]) -> str:
        """Expands `template` with `properties` and returns the text.

        :raises TemplateRenderError: If a placeholder is undefined or rendering fails.
        """
        try:
            content = template.render(**properties)
        except JinjaTemplateError as e:
            raise TemplateRenderError(f"Failed to render template '{template.name}': {e}") from e
        if not content.endswith("\n"):
            content += "\n"
        return content

    def create_from_template(
        self,
        template: Template,
        file_name: str,
        properties: Mapping[str, str],
        directory: Union[str, Path],
    ) -> Path:
        """Renders `template` into `directory / file_name`.

        The content is rendered before anything touches the disk, and the
        file is opened in exclusive-create mode so an existing file is never
        overwritten.

        :param template: Compiled template from the template store.
        :type template: jinja2.Template
        :param file_name: Bare file name; must not contain a path separator.
        :type file_name: str
        :param properties: Placeholder values for the template.
        :type properties: Mapping[str, str]
        :param directory: Destination directory, created if missing.
        :type directory: Union[str, Path]
        :return: Path of the created file.
        :rtype: Path
        :raises ThemeFileExistsError: If the file already exists.
        :raises ThemeFileWriteError: If the directory or file cannot be created or written.
        :raises TemplateRenderError: If the file name is not a bare name or rendering fails.
        """
        if not file_name or Path(file_name).name != file_name:
            raise TemplateRenderError(f"Invalid file name: '{file_name}'")

        content = self.render(template, properties)
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise TemplateRenderError(
                f"Template '{template.name}' produced text that is not valid UTF-8: {e}"
            ) from e

        directory = Path(directory)
        target = directory / file_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ThemeFileWriteError(f"Cannot create directory '{directory}': {e}") from e

        try:
            f = target.open("xb")
        except FileExistsError as e:
            raise ThemeFileExistsError(f"File already exists: '{target}'") from e
        except OSError as e:
            raise ThemeFileWriteError(f"Cannot create '{target}': {e}") from e

        try:
            with f:
                f.write(data)
        except OSError as e:
            # A partial file would block every retry with "already exists".
            target.unlink(missing_ok=True)
            raise ThemeFileWriteError(f"Failed to write '{target}': {e}") from e

        logger.info(
            f"Created '{target}' from template '{template.name}'",
            extra={"path": str(target), "template": template.name},
        )
        return target
