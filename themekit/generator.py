# themekit/generator.py
"""
Derives the file name and template properties for a new theme.

The module-level functions hold the actual rules; `ThemeFileNameGenerator`
binds them to the configured replacement character and length bound so the
action and the CLI share one instance.
"""
import re
from typing import Dict, Optional

from themekit.exceptions import ThemeValidationError
from themekit.schemas.config import ILLEGAL_FILENAME_CHARS, ThemeDefaults
from themekit.schemas.theme import (
    GeneratedFile,
    ThemeRequest,
    ValidationIssue,
    ValidationResult,
)
from themekit.utils.logger import setup_logger

logger = setup_logger(__name__)

THEME_JSON_SUFFIX = ".theme.json"
FALLBACK_NAME = "theme"
EMPTY_NAME_MESSAGE = "Theme name is empty"

# Most filesystems cap a single path component at 255 bytes.
MAX_FILE_NAME_BYTES = 255

_WHITESPACE_RUN = re.compile(r"\s+")

_RESERVED_DEVICE_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
    + [f"{port}{digit}" for port in ("COM", "LPT") for digit in "\u00b9\u00b2\u00b3"]
)


def _truncate_utf8(text: str, max_bytes: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    # Cutting mid-sequence leaves a partial character; drop it.
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def sanitize_name(raw: str, replacement: str = "") -> str:
    """Turns arbitrary user input into a string usable as a file-name stem.

    Illegal characters are replaced by `replacement` (removed by default),
    whitespace runs collapse to one space, surrounding spaces and dots are
    trimmed, and Windows device names such as ``CON`` get a leading
    underscore. The stem is cut so that the full ``.theme.json`` name fits
    in `MAX_FILE_NAME_BYTES`. An input with nothing usable left becomes
    `FALLBACK_NAME`. The result is stable under a second application.

    :param raw: The name exactly as the user typed it.
    :type raw: str
    :param replacement: Substitute for each illegal character. Must itself be legal.
    :type replacement: str
    :return: A non-empty, filesystem-safe stem.
    :rtype: str
    """
    name = ILLEGAL_FILENAME_CHARS.sub(replacement, raw)
    name = _WHITESPACE_RUN.sub(" ", name)
    name = name.strip(" .")
    if not name:
        name = FALLBACK_NAME

    # Windows ignores trailing spaces before the extension: "CON .dark" is still CON.
    if name.split(".", 1)[0].rstrip(" ").upper() in _RESERVED_DEVICE_NAMES:
        name = "_" + name

    name = _truncate_utf8(name, MAX_FILE_NAME_BYTES - len(THEME_JSON_SUFFIX))
    # Truncation can expose trailing spaces or dots; the leading character is never cut.
    return name.rstrip(" .")


def build_file_name(raw: str, replacement: str = "") -> str:
    """Returns the sanitized stem of `raw` followed by ``.theme.json``."""
    return sanitize_name(raw, replacement) + THEME_JSON_SUFFIX


def build_properties(name: str, is_dark: bool) -> Dict[str, str]:
    """Builds the template property map.

    The name is passed through untouched; the bundled template escapes it
    for JSON when rendering.
    """
    return {"NAME": name, "IS_DARK": "true" if is_dark else "false"}


def validate(name: str, max_length: Optional[int] = None) -> ValidationResult:
    """Checks that a theme name is usable.

    :param name: The name as entered.
    :type name: str
    :param max_length: Optional upper bound on the trimmed name length.
    :type max_length: Optional[int]
    :return: A successful result, or one carrying the issue and a user-facing message.
    :rtype: ValidationResult
    """
    trimmed = name.strip()
    if not trimmed:
        return ValidationResult.failure(ValidationIssue.EMPTY_NAME, EMPTY_NAME_MESSAGE)
    if max_length is not None and len(trimmed) > max_length:
        return ValidationResult.failure(
            ValidationIssue.NAME_TOO_LONG,
            f"Theme name must be at most {max_length} characters",
        )
    return ValidationResult.success()


class ThemeFileNameGenerator:
    """
    Turns a `ThemeRequest` into the `GeneratedFile` handed to the template renderer.
    """

    def __init__(self, defaults: Optional[ThemeDefaults] = None):
        self.defaults = defaults or ThemeDefaults()

    def sanitize_name(self, raw: str) -> str:
        return sanitize_name(raw, self.defaults.replacement)

    def build_file_name(self, raw: str) -> str:
        return build_file_name(raw, self.defaults.replacement)

    def build_properties(self, name: str, is_dark: bool) -> Dict[str, str]:
        return build_properties(name, is_dark)

    def validate(self, name: str) -> ValidationResult:
        return validate(name, self.defaults.max_name_length)

    def generate(self, request: ThemeRequest) -> GeneratedFile:
        """Validates the request and derives its file name and properties.

        :raises ThemeValidationError: If the name fails validation.
        """
        result = self.validate(request.name)
        if not result.ok:
            logger.warning(f"Rejected theme name {request.name!r}: {result.message}")
            raise ThemeValidationError(result.message or "Invalid theme name", result=result)

        generated = GeneratedFile(
            file_name=self.build_file_name(request.name),
            properties=self.build_properties(request.name, request.is_dark),
        )
        logger.debug(
            f"Derived file name '{generated.file_name}' for theme {request.name!r}",
            extra={"file_name": generated.file_name, "is_dark": request.is_dark},
        )
        return generated
