"""
Logging Module
Mirrors chat messages into a log file
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from modules.base_module import BaseModule

if TYPE_CHECKING:
    from bot.core import Bot
    from bot.session import MessageEvent


class LoggingModule(BaseModule):
    """Appends one line per user message to ``log_file``."""

    name = "Logging"
    version = "1.0.0"

    def __init__(self, log_file: str = "discord-bot-forge.log"):
        super().__init__()
        self.log_file = log_file
        self._file_logger: Optional[logging.Logger] = None
        self._file_handler: Optional[logging.FileHandler] = None

    async def initialize(self, bot: "Bot") -> None:
        # Raises OSError if the file cannot be opened
        handler = logging.FileHandler(self.log_file, mode="a", encoding="utf-8")
        handler.setFormatter(logging.Formatter("[DiscordBotForge] %(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S"))

        file_logger = logging.getLogger(f"MessageLog.{id(self)}")
        file_logger.setLevel(logging.INFO)
        file_logger.propagate = False
        file_logger.addHandler(handler)

        self._file_handler = handler
        self._file_logger = file_logger
        await super().initialize(bot)

        self.log("Logging module initialized")

    async def shutdown(self) -> None:
        if self._file_logger and self._file_handler:
            self.log("Logging module shutting down")
            self._file_logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
            self._file_logger = None
        await super().shutdown()

    async def on_message(self, event: "MessageEvent") -> None:
        if event.author_bot:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] {event.author_name} in #{event.channel_id}: {event.content}"
        self.log(line)
        self.debug(f"Message: {line}")

    def log(self, message: str) -> None:
        """Write a line to the log file if the module is initialized."""
        if self._file_logger:
            self._file_logger.info(message)
