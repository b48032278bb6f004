"""
Base Module
Base class for pluggable bot modules with lifecycle hooks
"""

from typing import TYPE_CHECKING, Optional

from utils.logger import LoggerMixin

if TYPE_CHECKING:
    from bot.core import Bot
    from bot.session import MessageEvent
    from commands.command_handler import CommandContext


class BaseModule(LoggerMixin):
    """
    Base class for all modules.

    Subclasses set ``name`` and ``version`` and override the hooks they need.
    ``initialize`` and ``shutdown`` may raise; the bot logs the failure and
    moves on to the next module.
    """

    name = "Module"
    version = "1.0.0"

    def __init__(self):
        super().__init__(self.name)
        self.bot: Optional["Bot"] = None
        self.enabled = False

    async def initialize(self, bot: "Bot") -> None:
        self.bot = bot
        self.enabled = True

    async def shutdown(self) -> None:
        self.enabled = False

    async def on_message(self, event: "MessageEvent") -> None:
        """Called for every inbound message before command dispatch."""

    async def on_command(self, ctx: "CommandContext") -> None:
        """Called after a command handler has run."""

    @property
    def status(self) -> str:
        return "Running" if self.enabled else "Stopped"
