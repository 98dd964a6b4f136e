# themekit/schemas/config.py
"""
Pydantic schema for the typed view of config.yaml.
"""
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters that may never appear in a file-name component: path separators,
# Windows-reserved punctuation, C0/C1 control characters and lone surrogates
# (which cannot be encoded to a file name at all).
ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\:*?"<>|\x00-\x1f\x7f-\x9f\ud800-\udfff]')


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str = Field("info", description="Root log level name (debug, info, warning, error).")


class TemplateSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dir: Optional[str] = Field(
        None,
        description="Directory searched for templates before the bundled ones.",
    )
    theme_json: str = Field(
        "ThemeJson.json", description="Name of the template used for new theme files."
    )


class ThemeDefaults(BaseModel):
    model_config = ConfigDict(extra="ignore")

    default_dark: bool = Field(True, description="Initial answer for the 'Dark theme?' prompt.")
    replacement: str = Field(
        "", description="Substitute for characters that are illegal in file names."
    )
    max_name_length: Optional[int] = Field(
        None, description="If set, theme names longer than this fail validation."
    )

    @field_validator("replacement")
    @classmethod
    def check_replacement_is_legal(cls, v: str) -> str:
        if ILLEGAL_FILENAME_CHARS.search(v):
            raise ValueError("Replacement must not contain characters illegal in file names.")
        return v

    @field_validator("max_name_length")
    @classmethod
    def check_positive_length(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("Maximum name length must be a positive integer.")
        return v


class ThemeKitSettings(BaseModel):
    """
    Validated configuration for a themekit run.

    Built from the merged config.yaml and environment overrides by
    `themekit.utils.config.load_settings`.
    """

    model_config = ConfigDict(extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    themes: ThemeDefaults = Field(default_factory=ThemeDefaults)
