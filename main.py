"""
Entry point for DiscordBotForge.
"""

import asyncio
import logging
import sys

from bot.client import create_bot, run_bot
from bot.config import Config, config
from bot.core import Bot
from bot.dashboard import DashboardServer
from bot.errors import BotForgeError
from commands.basic_commands import register_basic_commands
from middleware import CooldownMiddleware, LoggingMiddleware, OwnerOnlyMiddleware
from modules import LoggingModule, StatsModule
from utils.logger import get_logger, set_default_level

logger = get_logger("Main")


def build_bot(config: Config) -> Bot:
    """Create the bot with the built-in commands, modules and middleware."""
    bot = create_bot(config)

    register_basic_commands(bot)

    bot.register_module(LoggingModule(config.LOG_FILE))
    bot.register_module(StatsModule())

    # A configured owner turns this into a private bot
    if config.OWNER_ID:
        bot.add_middleware(OwnerOnlyMiddleware(config.OWNER_ID))
    bot.add_middleware(CooldownMiddleware(config.COOLDOWN_SECONDS))
    bot.add_middleware(LoggingMiddleware())

    return bot


def main():
    """Main entry point."""
    if config.DEBUG:
        set_default_level(logging.DEBUG)

    bot = build_bot(config)
    dashboard = DashboardServer(bot, config.HOST, config.PORT)

    try:
        asyncio.run(run_bot(bot, dashboard))
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
        sys.exit(0)
    except BotForgeError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
