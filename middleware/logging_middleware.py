"""
Logging Middleware
Logs every command invocation that reaches it
"""

from typing import TYPE_CHECKING

from middleware.base import Middleware, Next
from utils.logger import get_logger

if TYPE_CHECKING:
    from commands.command_handler import CommandContext


class LoggingMiddleware(Middleware):
    name = "Logging"

    def __init__(self):
        self.logger = get_logger("Command")

    async def process(self, ctx: "CommandContext", next_: Next) -> None:
        event = ctx.event
        self.logger.info(
            f"Command executed by {event.author_name} in channel {event.channel_id}: {event.content}"
        )
        await next_()
