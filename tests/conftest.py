"""Shared fixtures: a mocked session facade and a bot wired to it."""

from typing import List, Optional
from unittest.mock import AsyncMock, Mock

import discord
import pytest

from bot.config import Config
from bot.core import Bot
from bot.session import MessageEvent
from commands.command_registry import Command
from utils.error_handler import ErrorHandler

CHANNEL_ID = "200"
USER_ID = "100"


def make_event(
    content: str,
    author_id: str = USER_ID,
    channel_id: str = CHANNEL_ID,
    author_bot: bool = False,
    author_name: str = "tester#0001",
) -> MessageEvent:
    return MessageEvent(
        message_id="1",
        author_id=author_id,
        author_name=author_name,
        author_bot=author_bot,
        channel_id=channel_id,
        content=content,
    )


def make_command(
    name: str,
    calls: Optional[List[List[str]]] = None,
    category: str = "General",
    permissions=(),
    error: Optional[Exception] = None,
) -> Command:
    """Command that records its args into ``calls`` (or raises ``error``)."""

    async def handler(ctx, args):
        if calls is not None:
            calls.append(list(args))
        if error is not None:
            raise error

    return Command.from_config(
        {
            "name": name,
            "description": f"{name} command",
            "category": category,
            "permissions": permissions,
        },
        handler,
    )


def sent_texts(session) -> List[str]:
    return [call.args[1] for call in session.send_message.call_args_list]


@pytest.fixture
def session():
    session = Mock()
    session.open = AsyncMock()
    session.close = AsyncMock()
    session.send_message = AsyncMock(return_value=Mock(id=999))
    session.edit_message = AsyncMock()
    session.resolve_permissions = AsyncMock(return_value=discord.Permissions.none())
    session.latency = 0.042
    session.guild_count = 3
    return session


@pytest.fixture
def config():
    return Config(DISCORD_BOT_TOKEN="test-token", PREFIX="!", OWNER_ID="1")


@pytest.fixture
def bot(config, session):
    return Bot(config, session, error_handler=ErrorHandler())
