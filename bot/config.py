"""
Configuration management for Bot Forge.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from bot.errors import ConfigError

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Discord
    DISCORD_BOT_TOKEN: str

    # Commands
    PREFIX: str = "!"
    OWNER_ID: str = ""
    COOLDOWN_SECONDS: float = 1.0

    # Dashboard
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_FILE: str = "discord-bot-forge.log"
    DEBUG: bool = False

    VERSION: str = "1.0.0"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DISCORD_BOT_TOKEN=os.getenv("DISCORD_BOT_TOKEN", ""),
            PREFIX=os.getenv("BOT_PREFIX", "!"),
            OWNER_ID=os.getenv("BOT_OWNER_ID", ""),
            COOLDOWN_SECONDS=float(os.getenv("COOLDOWN_SECONDS", "1.0")),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=int(os.getenv("PORT", "8080")),
            LOG_FILE=os.getenv("LOG_FILE", "discord-bot-forge.log"),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
            VERSION=os.getenv("BOT_VERSION", "1.0.0"),
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_BOT_TOKEN:
            raise ConfigError("DISCORD_BOT_TOKEN environment variable is required")
        if not self.PREFIX:
            raise ConfigError("BOT_PREFIX must not be empty")


# Global config instance
config = Config.from_env()
