"""
Command system for Bot Forge.
"""

from .command_registry import Command, CommandDefinition, CommandRegistry
from .command_handler import CommandContext, CommandHandler, parse_args
from .basic_commands import register_basic_commands

__all__ = [
    "Command",
    "CommandDefinition",
    "CommandRegistry",
    "CommandContext",
    "CommandHandler",
    "parse_args",
    "register_basic_commands",
]
