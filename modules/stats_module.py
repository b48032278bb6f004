"""
Statistics Module
Message and command counters plus process metrics
"""

import threading
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict

import psutil

from modules.base_module import BaseModule
from utils.discord import DiscordUtils

if TYPE_CHECKING:
    from bot.core import Bot
    from bot.session import MessageEvent
    from commands.command_handler import CommandContext


class StatsModule(BaseModule):
    """Tracks bot statistics. Counters are safe to bump from concurrent handlers."""

    name = "Statistics"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()
        self.start_time = time.time()
        self.message_count = 0
        self.command_count = 0

    async def initialize(self, bot: "Bot") -> None:
        await super().initialize(bot)
        self.info("Statistics module initialized")

    async def shutdown(self) -> None:
        await super().shutdown()
        self.info("Statistics module shutdown")

    async def on_message(self, event: "MessageEvent") -> None:
        if event.author_bot:
            return
        with self._lock:
            self.message_count += 1

    async def on_command(self, ctx: "CommandContext") -> None:
        self.increment_command_count()

    def increment_command_count(self) -> None:
        with self._lock:
            self.command_count += 1

    def get_stats(self) -> Dict[str, Any]:
        """
        Get current statistics.

        Returns:
            Dict with uptime, message/command counts, server count and memory usage
        """
        with self._lock:
            messages = self.message_count
            commands = self.command_count

        servers = self.bot.session.guild_count if self.bot else 0
        memory_mb = round(psutil.Process().memory_info().rss / 1024 / 1024, 1)

        return {
            "uptime": DiscordUtils.format_duration(int(time.time() - self.start_time)),
            "messages": messages,
            "commands": commands,
            "servers": servers,
            "memory_mb": memory_mb,
            "start_time": datetime.fromtimestamp(self.start_time).strftime("%Y-%m-%d %H:%M:%S"),
        }
