"""
Utility modules for Bot Forge.
"""

from .logger import LoggerMixin, get_logger, set_default_level, setup_logging
from .discord import DiscordUtils
from .error_handler import ErrorHandler, get_error_handler, setup_error_handler

__all__ = [
    "LoggerMixin",
    "get_logger",
    "set_default_level",
    "setup_logging",
    "DiscordUtils",
    "ErrorHandler",
    "get_error_handler",
    "setup_error_handler",
]
