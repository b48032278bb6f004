"""Unit tests for the discord.py client, run_bot and entry-point wiring."""

from unittest.mock import AsyncMock, Mock

import pytest

import bot.client as client_module
from bot.client import ForgeClient, run_bot
from bot.config import Config
from bot.errors import ConfigError, SessionOpenError
from bot.session import MessageEvent
from main import build_bot
from middleware import CooldownMiddleware, LoggingMiddleware, OwnerOnlyMiddleware

from conftest import make_event, sent_texts


@pytest.fixture
def error_setup(monkeypatch):
    setup = Mock()
    monkeypatch.setattr(client_module, "setup_error_handler", setup)
    return setup


def make_dashboard():
    return Mock(start=AsyncMock(), stop=AsyncMock())


# ForgeClient


@pytest.mark.asyncio
async def test_client_forwards_messages_as_events():
    client = ForgeClient()
    client.bot = Mock(handle_message=AsyncMock())
    message = Mock(id=1, author=Mock(id=100, bot=False), channel=Mock(id=200), content="!ping", guild=None)

    await client.on_message(message)

    (event,) = client.bot.handle_message.await_args.args
    assert isinstance(event, MessageEvent)
    assert event.author_id == "100"
    assert event.content == "!ping"


@pytest.mark.asyncio
async def test_client_without_bot_ignores_messages():
    client = ForgeClient()

    await client.on_message(Mock())


def test_client_requests_message_content_intent():
    assert ForgeClient().intents.message_content


# run_bot


@pytest.mark.asyncio
async def test_run_bot_validates_config_first(error_setup):
    bot = Mock(config=Config(DISCORD_BOT_TOKEN=""), run=AsyncMock())
    dashboard = make_dashboard()

    with pytest.raises(ConfigError):
        await run_bot(bot, dashboard)

    error_setup.assert_not_called()
    dashboard.start.assert_not_awaited()
    bot.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_bot_stops_dashboard_when_bot_fails(error_setup):
    bot = Mock(config=Config(DISCORD_BOT_TOKEN="abc"), run=AsyncMock(side_effect=SessionOpenError("no gateway")))
    dashboard = make_dashboard()

    with pytest.raises(SessionOpenError):
        await run_bot(bot, dashboard)

    error_setup.assert_called_once_with(on_shutdown=bot.stop)
    dashboard.start.assert_awaited_once()
    dashboard.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_bot_without_dashboard(error_setup):
    bot = Mock(config=Config(DISCORD_BOT_TOKEN="abc"), run=AsyncMock())

    await run_bot(bot)

    bot.run.assert_awaited_once()


# Entry-point wiring


def test_build_bot_without_owner():
    bot = build_bot(Config(DISCORD_BOT_TOKEN="abc"))

    assert [type(step) for step in bot.middleware] == [CooldownMiddleware, LoggingMiddleware]
    assert {"ping", "help", "info"} <= {cmd.name for cmd in bot.registry.get_all()}
    assert [module.name for module in bot.modules] == ["Logging", "Statistics"]


def test_build_bot_with_owner_gates_commands_first():
    bot = build_bot(Config(DISCORD_BOT_TOKEN="abc", OWNER_ID="42"))

    owner_step = bot.middleware[0]
    assert isinstance(owner_step, OwnerOnlyMiddleware)
    assert owner_step.owner_id == "42"


@pytest.mark.asyncio
async def test_owner_bot_refuses_other_users(session):
    bot = build_bot(Config(DISCORD_BOT_TOKEN="abc", OWNER_ID="42"))
    bot.session = session

    await bot.handle_message(make_event("!info", author_id="7"))

    assert sent_texts(session) == ["❌ This command is restricted to the bot owner."]
