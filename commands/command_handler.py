"""
Command Handler
Parses prefixed messages and runs commands through the middleware chain
"""

from typing import TYPE_CHECKING, Any, List, Optional

from bot.errors import MiddlewareError
from bot.session import MessageEvent
from commands.command_registry import Command
from middleware.base import MiddlewareChain
from utils.discord import DiscordUtils
from utils.logger import get_logger

if TYPE_CHECKING:
    from bot.core import Bot

GENERIC_ERROR_NOTICE = "❌ An error occurred while executing the command."


def parse_args(content: str) -> List[str]:
    """
    Split command text into arguments, keeping double-quoted spans together.

    Quote characters toggle the quoted state and are dropped. An unbalanced
    quote keeps the rest of the input in one token.

    Args:
        content: Message content with the prefix already stripped

    Returns:
        List of non-empty tokens
    """
    args: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in content:
        if char == '"':
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        args.append("".join(current))

    return args


class CommandContext:
    """Everything a middleware step or command handler needs about one invocation."""

    def __init__(self, bot: "Bot", event: MessageEvent, command: Command, args: List[str]):
        self.bot = bot
        self.event = event
        self.command = command
        self.args = args

    @property
    def session(self) -> Any:
        return self.bot.session

    @property
    def channel_id(self) -> str:
        return self.event.channel_id

    async def reply(self, content: str) -> Any:
        """Send a message to the originating channel. Errors propagate."""
        return await self.bot.session.send_message(self.event.channel_id, content)

    async def edit(self, message_id: str, content: str) -> Any:
        return await self.bot.session.edit_message(self.event.channel_id, message_id, content)

    async def notify(self, content: str) -> Optional[Any]:
        """Send a notice to the originating channel, logging send failures."""
        return await DiscordUtils.safe_send(self.bot.session, self.event.channel_id, content)


class CommandHandler:
    """Handles command parsing and execution."""

    def __init__(self, bot: "Bot"):
        self.logger = get_logger("Command")
        self.bot = bot

    def parse_command(self, content: str) -> Optional[List[str]]:
        """
        Strip the prefix and tokenize.

        Returns:
            Tokens (command name first), or None if the text is not a command
        """
        prefix = self.bot.config.PREFIX
        if not content.startswith(prefix):
            return None

        args = parse_args(content[len(prefix):])
        return args or None

    async def handle(self, event: MessageEvent) -> None:
        """
        Handle an incoming message.

        Args:
            event: Inbound message event
        """
        # Ignore bot messages, including our own
        if event.author_bot:
            return

        parts = self.parse_command(event.content)
        if not parts:
            return

        command_name, args = parts[0], parts[1:]

        command = self.bot.registry.get(command_name)
        if not command:
            return

        ctx = CommandContext(self.bot, event, command, args)

        async def execute() -> None:
            await self._execute(ctx)

        chain = MiddlewareChain(self.bot.middleware, execute)
        try:
            await chain.run(ctx)
        except MiddlewareError as error:
            self.bot.error_handler.handle_exception(error.cause, f"middleware:{error.step_name}")

    async def _execute(self, ctx: CommandContext) -> None:
        name = ctx.command.name
        try:
            self.logger.debug(f"Executing: {name}")
            await ctx.command.execute(ctx, ctx.args)
        except Exception as error:
            self.bot.error_handler.handle_exception(error, f"command:{name}")
            await ctx.notify(GENERIC_ERROR_NOTICE)
        finally:
            await self.bot.notify_command(ctx)
