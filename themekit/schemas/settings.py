# themekit/schemas/settings.py
"""
Environment overrides using pydantic-settings.

Values are read from `THEMEKIT_*` environment variables or a `.env` file in
the working directory. They take precedence over config.yaml.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvOverrides(BaseSettings):
    """
    Environment variables that override config.yaml.

    :ivar log_level: Overrides `logging.level` (THEMEKIT_LOG_LEVEL).
    :vartype log_level: Optional[str]
    :ivar templates_dir: Overrides `templates.dir` (THEMEKIT_TEMPLATES_DIR).
    :vartype templates_dir: Optional[str]
    """

    log_level: Optional[str] = None
    templates_dir: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="THEMEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
