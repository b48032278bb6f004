"""
Owner-only Middleware
Restricts commands to the configured bot owner
"""

from typing import TYPE_CHECKING

from middleware.base import Middleware, Next

if TYPE_CHECKING:
    from commands.command_handler import CommandContext


class OwnerOnlyMiddleware(Middleware):
    name = "OwnerOnly"

    def __init__(self, owner_id: str):
        self.owner_id = owner_id

    async def process(self, ctx: "CommandContext", next_: Next) -> None:
        if ctx.event.author_id != self.owner_id:
            await ctx.notify("❌ This command is restricted to the bot owner.")
            return

        await next_()
