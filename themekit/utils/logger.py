# themekit/utils/logger.py
"""
Centralized logging setup for themekit.

This module configures the root logger once with a JSON formatter on stderr,
so stdout stays reserved for command output (rendered previews, tables).
Every module obtains its logger through `setup_logger(__name__)`.
"""
import logging
import sys
from typing import Any, MutableMapping

from pythonjsonlogger import jsonlogger

from themekit.exceptions import ConfigurationError
from themekit.utils.config import get_config

_LOGGING_CONFIGURED = False


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Extends the standard logging adapter to support structured logging.

    Structured data passed via `extra` is nested under an `extra_data` key so
    it never collides with the reserved `LogRecord` attributes.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Wraps any `extra` mapping under `extra_data`.

        :param msg: The original log message.
        :type msg: str
        :param kwargs: The keyword arguments passed to the log call.
        :type kwargs: MutableMapping[str, Any]
        :return: The processed message and keyword arguments.
        :rtype: tuple[str, MutableMapping[str, Any]]
        """
        original_extra_content = kwargs.get("extra")
        if original_extra_content is not None:
            kwargs["extra"] = {"extra_data": original_extra_content}
        return msg, kwargs


def _configured_level_name() -> str:
    try:
        config = get_config()
    except ConfigurationError:
        return "INFO"
    return str((config.get("logging") or {}).get("level", "info")).upper()


def setup_logger(
    name: str,
) -> StructuredLoggerAdapter:
    """Sets up the root logger and returns a structured child logger.

    On the first call the root logger gets a single JSON stderr handler at
    the configured level. Subsequent calls only look up the named logger.

    :param name: The name of the logger, typically `__name__`.
    :type name: str
    :return: A `StructuredLoggerAdapter` instance ready for use.
    :rtype: StructuredLoggerAdapter
    """
    global _LOGGING_CONFIGURED

    if not _LOGGING_CONFIGURED:
        root_logger = logging.getLogger()

        log_level_str = _configured_level_name()
        level = getattr(logging, log_level_str, logging.INFO)
        root_logger.setLevel(level)

        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"
        )
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        root_logger.debug(f"Root logger configured with JSON stderr handler. Level: {log_level_str}")
        _LOGGING_CONFIGURED = True

    logger_instance = logging.getLogger(name)
    return StructuredLoggerAdapter(logger_instance, {})


def set_level(level: int) -> None:
    """Overrides the root log level after setup (used by the CLI `--debug` flag)."""
    logging.getLogger().setLevel(level)
