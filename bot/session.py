"""
Session facade over the discord.py client.
Commands and middleware only talk to the platform through this interface.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

import discord

from bot.errors import PermissionResolutionError, SessionOpenError
from utils.logger import get_logger

logger = get_logger("Session")


@dataclass(frozen=True)
class MessageEvent:
    """Inbound text message as seen by the dispatcher."""

    message_id: str
    author_id: str
    author_name: str
    author_bot: bool
    channel_id: str
    content: str
    guild_id: Optional[str] = None

    @classmethod
    def from_message(cls, message: discord.Message) -> "MessageEvent":
        """Build an event from a discord.py message."""
        return cls(
            message_id=str(message.id),
            author_id=str(message.author.id),
            author_name=str(message.author),
            author_bot=message.author.bot,
            channel_id=str(message.channel.id),
            content=message.content,
            guild_id=str(message.guild.id) if message.guild else None,
        )


class Session(ABC):
    """Outbound operations the bot core needs from the chat platform."""

    #: Called with the error (or None) when an open connection drops unexpectedly.
    on_connection_lost: Optional[Callable[[Optional[BaseException]], None]] = None

    @abstractmethod
    async def open(self) -> None:
        """Connect to the platform. Raises SessionOpenError on failure."""

    @abstractmethod
    async def close(self) -> None:
        """Disconnect from the platform."""

    @abstractmethod
    async def send_message(self, channel_id: str, content: str) -> Any:
        """Send a text message, returning a handle with an ``id``."""

    @abstractmethod
    async def edit_message(self, channel_id: str, message_id: str, content: str) -> Any:
        """Replace the content of a previously sent message."""

    @abstractmethod
    async def resolve_permissions(self, user_id: str, channel_id: str) -> discord.Permissions:
        """Resolve a user's effective permissions in a channel."""

    @property
    def latency(self) -> float:
        """Gateway heartbeat latency in seconds."""
        return 0.0

    @property
    def guild_count(self) -> int:
        return 0

    @property
    def is_open(self) -> bool:
        return False


class DiscordSession(Session):
    """Session backed by a discord.py client."""

    def __init__(self, client: discord.Client, token: str):
        self.client = client
        self.token = token
        self._connect_task: Optional[asyncio.Task] = None

    async def open(self) -> None:
        """
        Log in and wait until the gateway reports ready.

        Raises:
            SessionOpenError: If login fails or the gateway connection ends
                before the client becomes ready
        """
        try:
            await self.client.login(self.token)
        except (discord.LoginFailure, discord.HTTPException) as error:
            raise SessionOpenError(f"error opening connection: {error}") from error

        connect_task = asyncio.ensure_future(self.client.connect())
        ready_task = asyncio.ensure_future(self.client.wait_until_ready())
        await asyncio.wait({connect_task, ready_task}, return_when=asyncio.FIRST_COMPLETED)

        if not ready_task.done():
            ready_task.cancel()
            error = None if connect_task.cancelled() else connect_task.exception()
            await self.client.close()
            reason = error or "gateway closed before ready"
            raise SessionOpenError(f"error opening connection: {reason}") from error

        self._connect_task = connect_task
        connect_task.add_done_callback(self._on_connect_done)

    def _on_connect_done(self, task: asyncio.Task) -> None:
        # close() detaches the task first, so only unexpected endings get here
        if task.cancelled() or task is not self._connect_task:
            return
        self._connect_task = None
        error = task.exception()
        if error:
            logger.error(f"Gateway connection ended: {error}")
        else:
            logger.warning("Gateway connection closed")
        if self.on_connection_lost is not None:
            self.on_connection_lost(error)

    async def close(self) -> None:
        task, self._connect_task = self._connect_task, None
        await self.client.close()
        if task is None or task.done():
            return
        try:
            await task
        except asyncio.CancelledError:
            pass
        except (discord.DiscordException, OSError) as error:
            logger.debug(f"Connection closed with error: {error}")

    async def _get_channel(self, channel_id: str) -> Any:
        channel = self.client.get_channel(int(channel_id))
        if channel is None:
            channel = await self.client.fetch_channel(int(channel_id))
        return channel

    async def send_message(self, channel_id: str, content: str) -> discord.Message:
        channel = await self._get_channel(channel_id)
        return await channel.send(content)

    async def edit_message(self, channel_id: str, message_id: str, content: str) -> discord.Message:
        channel = await self._get_channel(channel_id)
        return await channel.get_partial_message(int(message_id)).edit(content=content)

    async def resolve_permissions(self, user_id: str, channel_id: str) -> discord.Permissions:
        try:
            channel = await self._get_channel(channel_id)
            guild = getattr(channel, "guild", None)
            if guild is None:
                return channel.permissions_for(discord.Object(id=int(user_id)))

            member = guild.get_member(int(user_id))
            if member is None:
                member = await guild.fetch_member(int(user_id))
            return channel.permissions_for(member)
        except (discord.DiscordException, ValueError) as error:
            raise PermissionResolutionError(user_id, channel_id, str(error)) from error

    @property
    def latency(self) -> float:
        return self.client.latency

    @property
    def guild_count(self) -> int:
        return len(self.client.guilds)

    @property
    def is_open(self) -> bool:
        return not self.client.is_closed()
