"""
Permission Middleware
Checks the invoking user's channel permissions before running a command
"""

from typing import TYPE_CHECKING, Iterable, List

from bot.errors import PermissionResolutionError
from middleware.base import Middleware, Next
from utils.discord import DiscordUtils

if TYPE_CHECKING:
    from commands.command_handler import CommandContext


class PermissionMiddleware(Middleware):
    """Declines unless the user holds every required permission tag."""

    name = "Permission"

    def __init__(self, permissions: Iterable[str] = ()):
        self.required_permissions: List[str] = list(permissions)

    def _required_for(self, ctx: "CommandContext") -> List[str]:
        required = list(self.required_permissions)
        for tag in sorted(ctx.command.permissions):
            if tag not in required:
                required.append(tag)
        return required

    async def process(self, ctx: "CommandContext", next_: Next) -> None:
        required = self._required_for(ctx)
        if not required:
            await next_()
            return

        user_id = ctx.event.author_id
        channel_id = ctx.event.channel_id
        try:
            permissions = await ctx.bot.session.resolve_permissions(user_id, channel_id)
        except PermissionResolutionError:
            raise
        except Exception as error:
            raise PermissionResolutionError(user_id, channel_id, str(error)) from error

        for tag in required:
            if not DiscordUtils.has_permission(permissions, tag):
                await ctx.notify("❌ You don't have permission to use this command.")
                return

        await next_()
