"""
Discord client setup using discord.py.
"""

from typing import Optional

import discord

from bot.config import Config
from bot.core import Bot
from bot.dashboard import DashboardServer
from bot.session import DiscordSession, MessageEvent
from utils.error_handler import setup_error_handler
from utils.logger import get_logger

logger = get_logger("Client")


class ForgeClient(discord.Client):
    """discord.py client that forwards messages to a Bot."""

    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)
        self.bot: Optional[Bot] = None

    async def on_ready(self):
        logger.info(f"Logged in as: {self.user} ({len(self.guilds)} servers)")

    async def on_message(self, message: discord.Message):
        if self.bot is None:
            return
        await self.bot.handle_message(MessageEvent.from_message(message))


def create_bot(config: Config) -> Bot:
    """Create a bot wired to a discord.py session."""
    client = ForgeClient()
    bot = Bot(config, DiscordSession(client, config.DISCORD_BOT_TOKEN))
    client.bot = bot
    return bot


async def run_bot(bot: Bot, dashboard: Optional[DashboardServer] = None) -> None:
    """
    Run the bot (and optional dashboard) until SIGINT/SIGTERM.

    Raises:
        ConfigError: If the configuration is invalid
        SessionOpenError: If the Discord connection cannot be opened
    """
    bot.config.validate()
    setup_error_handler(on_shutdown=bot.stop)

    if dashboard:
        await dashboard.start()

    try:
        await bot.run()
    finally:
        if dashboard:
            await dashboard.stop()
