"""
Read-only web dashboard over the bot state.
JSON endpoints plus a WebSocket that pushes periodic status snapshots.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Optional

import uvicorn
from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from utils.logger import get_logger

if TYPE_CHECKING:
    from bot.core import Bot

logger = get_logger("Dashboard")


def create_dashboard(bot: "Bot", interval: float = 5.0) -> FastAPI:
    """
    Build the dashboard app for a bot.

    Args:
        bot: Bot whose state is exposed
        interval: Seconds between WebSocket status pushes
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Dashboard starting...")
        yield
        logger.info("Dashboard shutting down...")

    app = FastAPI(
        title="DiscordBotForge Dashboard",
        description="Read-only status of a DiscordBotForge bot",
        version=bot.version,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root():
        return {
            "name": "DiscordBotForge",
            "version": bot.version,
            "status": "running" if bot.running else "stopped",
        }

    @app.get("/api/status")
    async def status():
        return bot.get_status()

    @app.get("/api/commands")
    async def commands():
        return bot.get_commands_info()

    @app.get("/api/modules")
    async def modules():
        return bot.get_modules_info()

    @app.websocket("/ws")
    async def status_feed(websocket: WebSocket):
        await websocket.accept()
        logger.info("WebSocket client connected")

        async def push_status() -> None:
            while True:
                await websocket.send_json(bot.get_status())
                await asyncio.sleep(interval)

        sender = asyncio.create_task(push_status())
        try:
            # Only used to notice the client going away
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
            logger.info("WebSocket client disconnected")
        finally:
            sender.cancel()
            try:
                await sender
            except asyncio.CancelledError:
                pass
            except (WebSocketDisconnect, RuntimeError) as error:
                logger.debug(f"WebSocket write error: {error}")

    return app


class DashboardServer:
    """Runs the dashboard with uvicorn as a background task."""

    def __init__(self, bot: "Bot", host: str, port: int, interval: float = 5.0):
        self.host = host
        self.port = port
        self.app = create_dashboard(bot, interval)
        self._server: Optional[uvicorn.Server] = None
        self._task: Optional[asyncio.Task] = None

    async def start(self) -> None:
        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level="warning",
            access_log=False,
        )
        self._server = uvicorn.Server(config)
        self._task = asyncio.create_task(self._server.serve())
        logger.info(f"🌐 Dashboard listening on http://{self.host}:{self.port}")

    async def stop(self) -> None:
        if self._server:
            self._server.should_exit = True
        if self._task:
            await self._task
            self._task = None
