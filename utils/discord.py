"""
Discord Utilities
Helper functions for Discord interactions
"""

from typing import Any, Dict, Optional, Union

import discord

from utils.logger import get_logger

logger = get_logger("DiscordUtils")

# Permission tags understood by PermissionMiddleware, mapped to discord.Permissions flags
PERMISSION_FLAGS: Dict[str, str] = {
    "ADMINISTRATOR": "administrator",
    "MANAGE_MESSAGES": "manage_messages",
    "MANAGE_CHANNELS": "manage_channels",
    "MANAGE_ROLES": "manage_roles",
    "KICK_MEMBERS": "kick_members",
    "BAN_MEMBERS": "ban_members",
}


class DiscordUtils:
    """Utility class for Discord-related helper functions."""

    @staticmethod
    async def safe_send(session: Any, channel_id: str, content: str) -> Optional[Any]:
        """
        Send a message through the session, logging instead of raising on failure.

        Args:
            session: Session facade
            channel_id: Target channel ID
            content: Message content

        Returns:
            Sent message handle or None if failed
        """
        try:
            return await session.send_message(channel_id, content)
        except Exception as error:
            logger.warning(f"Failed to send message to {channel_id}: {error}")
            return None

    @staticmethod
    def has_permission(permissions: Union[discord.Permissions, int], tag: str) -> bool:
        """
        Check a permission tag against a permission set.

        Args:
            permissions: discord.Permissions or raw permission bits
            tag: Tag such as "MANAGE_MESSAGES"; unknown tags never match

        Returns:
            True if the flag is set
        """
        flag = PERMISSION_FLAGS.get(tag)
        if flag is None:
            return False
        if isinstance(permissions, int):
            permissions = discord.Permissions(permissions)
        return bool(getattr(permissions, flag))

    @staticmethod
    def format_duration(seconds: int) -> str:
        """
        Format duration in human readable format.

        Args:
            seconds: Duration in seconds

        Returns:
            Formatted duration string, e.g. "2h 15m 3s"
        """
        days = seconds // 86400
        hours = (seconds % 86400) // 3600
        mins = (seconds % 3600) // 60
        secs = seconds % 60

        parts = []
        if days > 0:
            parts.append(f"{days}d")
        if hours > 0:
            parts.append(f"{hours}h")
        if mins > 0:
            parts.append(f"{mins}m")
        if secs > 0 or not parts:
            parts.append(f"{secs}s")

        return " ".join(parts)
