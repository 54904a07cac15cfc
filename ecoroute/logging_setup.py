"""Logging configuration driven by ObservabilityConfig.

Modules log through ``logging.getLogger(__name__)`` with structured
context in ``extra``. This module installs the single handler on the
``ecoroute`` logger, either with a plain text format or as JSON lines.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

ROOT_LOGGER_NAME = "ecoroute"


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {name!r}",
            setting_name="ECOROUTE_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    return level


def _make_formatter(config: ObservabilityConfig) -> logging.Formatter:
    if config.structured:
        from pythonjsonlogger.json import JsonFormatter

        return JsonFormatter(config.format)
    return logging.Formatter(config.format)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure the package logger once; later calls only update the level.

    Args:
        config: Logging settings, defaults to the application config.

    Returns:
        The configured ``ecoroute`` logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_parse_level(config.level))

    # Prevent duplicate handlers on repeated calls
    if getattr(logger, "_configured", False):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(_make_formatter(config))
    logger.addHandler(handler)
    logger.propagate = False

    logger._configured = True  # type: ignore[attr-defined]
    return logger
