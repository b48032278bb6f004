"""
Bot context: owns config, session, command registry, middleware and modules.
"""

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bot.config import Config
from bot.session import MessageEvent, Session
from commands.command_handler import CommandContext, CommandHandler
from commands.command_registry import Command, CommandRegistry
from middleware.base import Middleware
from modules.base_module import BaseModule
from utils.discord import DiscordUtils
from utils.error_handler import ErrorHandler, get_error_handler
from utils.logger import get_logger

logger = get_logger("Bot")


class Bot:
    """Main Bot Forge instance."""

    def __init__(
        self,
        config: Config,
        session: Session,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.config = config
        self.session = session
        self.version = config.VERSION
        self.registry = CommandRegistry()
        self.middleware: List[Middleware] = []
        self.modules: List[BaseModule] = []
        self.error_handler = error_handler or get_error_handler()
        self.command_handler = CommandHandler(self)

        self.start_time: Optional[float] = None
        self._stop_event: Optional[asyncio.Event] = None

    # Registration

    def register_command(self, command: Command) -> None:
        self.registry.register(command)

    def register_module(self, module: BaseModule) -> None:
        self.modules.append(module)
        logger.info(f"🔧 Registered module: {module.name}")

    def add_middleware(self, middleware: Middleware) -> None:
        self.middleware.append(middleware)
        logger.info(f"🛡️ Added middleware: {middleware.name}")

    def get_module(self, name: str) -> Optional[BaseModule]:
        for module in self.modules:
            if module.name == name:
                return module
        return None

    # Events

    async def handle_message(self, event: MessageEvent) -> None:
        """Entry point for every inbound message."""
        for module in self.modules:
            if not module.enabled:
                continue
            try:
                await module.on_message(event)
            except Exception as error:
                self.error_handler.handle_exception(error, f"module:{module.name}")

        await self.command_handler.handle(event)

    async def notify_command(self, ctx: CommandContext) -> None:
        for module in self.modules:
            if not module.enabled:
                continue
            try:
                await module.on_command(ctx)
            except Exception as error:
                self.error_handler.handle_exception(error, f"module:{module.name}")

    # Lifecycle

    async def start(self) -> None:
        """
        Open the session and initialize modules.

        Raises:
            SessionOpenError: If the session cannot be opened
        """
        logger.info(f"🔥 DiscordBotForge v{self.version} starting up...")

        self.session.on_connection_lost = self._on_connection_lost
        await self.session.open()
        self.start_time = time.time()

        for module in self.modules:
            try:
                await module.initialize(self)
            except Exception as error:
                self.error_handler.handle_exception(error, f"module:{module.name}")
                logger.error(f"Error initializing module {module.name}: {error}")
            else:
                logger.info(f"✅ Module '{module.name}' v{module.version} initialized")

        logger.info("🚀 DiscordBotForge is now running! Press CTRL+C to exit.")

    async def shutdown(self) -> None:
        """Shut down every module, then close the session."""
        logger.info("🛑 Shutting down DiscordBotForge...")

        for module in self.modules:
            try:
                await module.shutdown()
            except Exception as error:
                self.error_handler.handle_exception(error, f"module:{module.name}")
                logger.error(f"Error shutting down module {module.name}: {error}")
            else:
                logger.info(f"✅ Module '{module.name}' shutdown complete")

        await self.session.close()
        self.start_time = None

    async def run(self) -> None:
        """Start, wait until ``stop()`` is called, then shut down."""
        self._stop_event = asyncio.Event()
        await self.start()
        try:
            await self._stop_event.wait()
        finally:
            await self.shutdown()

    async def stop(self) -> None:
        if self._stop_event:
            self._stop_event.set()

    def _on_connection_lost(self, error: Optional[BaseException]) -> None:
        if error is not None:
            self.error_handler.handle_exception(error, "session")
        logger.error("Connection to Discord lost, stopping bot")
        if self._stop_event:
            self._stop_event.set()

    # Status

    @property
    def running(self) -> bool:
        return self.start_time is not None

    @property
    def uptime(self) -> str:
        if self.start_time is None:
            return "0s"
        return DiscordUtils.format_duration(int(time.time() - self.start_time))

    def get_status(self) -> Dict[str, Any]:
        """Snapshot of the bot state for the dashboard and info command."""
        stats_module = self.get_module("Statistics")
        stats = stats_module.get_stats() if stats_module is not None else {}

        return {
            "running": self.running,
            "version": self.version,
            "uptime": self.uptime,
            "commands": len(self.registry),
            "modules": len(self.modules),
            "middleware": len(self.middleware),
            "errors": self.error_handler.total_errors,
            "stats": stats,
            "last_update": datetime.now(timezone.utc).isoformat(),
        }

    def get_commands_info(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": cmd.name,
                "description": cmd.description,
                "usage": cmd.usage,
                "category": cmd.category,
                "cooldown": cmd.cooldown,
                "permissions": sorted(cmd.permissions),
            }
            for cmd in self.registry.get_all()
        ]

    def get_modules_info(self) -> List[Dict[str, Any]]:
        return [
            {"name": module.name, "version": module.version, "status": module.status}
            for module in self.modules
        ]
