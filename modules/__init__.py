"""
Pluggable bot modules.
"""

from .base_module import BaseModule
from .logging_module import LoggingModule
from .stats_module import StatsModule

__all__ = ["BaseModule", "LoggingModule", "StatsModule"]
