# themekit/exceptions.py
"""
Defines custom exception classes for themekit.

Library code raises these; the CLI is the only place that turns them into
user-facing messages and exit codes.
"""
from typing import Optional, Any


class ThemeKitError(Exception):
    """Base exception class for all custom errors in themekit."""

    pass


class ConfigurationError(ThemeKitError):
    """Raised when config.yaml or an environment override cannot be parsed
    or fails validation.
    """

    pass


class ThemeValidationError(ThemeKitError, ValueError):
    """Raised when a theme request fails validation.

    Carries the `ValidationResult` so callers can show the same message the
    interactive prompt shows. Inherits from `ValueError` so plain callers can
    treat it as bad input.
    """

    def __init__(self, message: str, result: Optional[Any] = None):
        """Initializes the error with the failed validation result."""
        super().__init__(message)
        self.result = result


class TemplateError(ThemeKitError):
    """Base exception for errors related to template handling."""

    pass


class TemplateNotFoundError(TemplateError, KeyError):
    """Raised when a named template cannot be resolved by the template store."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument
        return str(self.args[0]) if self.args else ""


class TemplateRenderError(TemplateError):
    """Raised when a template fails to parse or render with the given properties."""

    pass


class ThemeFileExistsError(ThemeKitError, FileExistsError):
    """Raised when the target theme file already exists in the destination directory."""

    pass


class ThemeFileWriteError(ThemeKitError, OSError):
    """Raised when the theme file cannot be created or written in the destination directory."""

    pass
