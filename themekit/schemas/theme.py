# themekit/schemas/theme.py
"""
Pydantic schemas for theme creation requests and their generated output.
"""
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ThemeRequest(BaseModel):
    """
    What the user asked for: a theme name and whether it is a dark theme.

    The name is kept exactly as entered; it may contain characters that are
    illegal in file names.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The theme name as entered by the user.")
    is_dark: bool = Field(True, description="Whether the theme is a dark theme.")


class GeneratedFile(BaseModel):
    """
    The file name and template properties produced for a `ThemeRequest`.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(..., description="Sanitized file name ending in '.theme.json'.")
    properties: Dict[str, str] = Field(
        ..., description="Template placeholder values (NAME, IS_DARK)."
    )


class ValidationIssue(str, Enum):
    EMPTY_NAME = "EmptyName"
    NAME_TOO_LONG = "NameTooLong"


class ValidationResult(BaseModel):
    """Outcome of validating a theme name. `issue` is None when the name is acceptable."""

    model_config = ConfigDict(frozen=True)

    issue: Optional[ValidationIssue] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, issue: ValidationIssue, message: str) -> "ValidationResult":
        return cls(issue=issue, message=message)
