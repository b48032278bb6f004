"""
Logging utilities for Bot Forge.
Uses Rich for colored console output.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

FORGE_THEME = Theme({
    "logging.level.debug": "dim cyan",
    "logging.level.info": "blue",
    "logging.level.warning": "yellow",
    "logging.level.error": "red",
    "logging.level.critical": "bold red",
})

console = Console(theme=FORGE_THEME)

# Overrides the DEBUG environment flag once the config is loaded
_default_level: Optional[int] = None


def set_default_level(level: int) -> None:
    """Set the level used by loggers created afterwards and re-level existing ones."""
    global _default_level
    _default_level = level

    for name in list(logging.root.manager.loggerDict):
        logger = logging.getLogger(name)
        if any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)


def _resolve_level() -> int:
    if _default_level is not None:
        return _default_level
    return logging.DEBUG if os.getenv("DEBUG", "false").lower() == "true" else logging.INFO


def setup_logging(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with RichHandler.

    Args:
        name: Logger name
        level: Logging level (default: INFO, DEBUG when DEBUG=true)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = _resolve_level()

    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers = []

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="[%(name)s] %(message)s", datefmt="%H:%M:%S"))

    logger.addHandler(handler)

    return logger


class LoggerMixin:
    """Mixin class that provides logger functionality."""

    def __init__(self, name: str):
        self._logger = get_logger(name)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, configuring it on first use."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        return setup_logging(name)
    return logger
