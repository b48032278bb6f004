"""
Bot Forge exceptions.
"""


class BotForgeError(Exception):
    """Base class for all Bot Forge errors."""


class ConfigError(BotForgeError):
    """Required configuration is missing or invalid."""


class SessionOpenError(BotForgeError):
    """The chat platform session could not be opened."""


class PermissionResolutionError(BotForgeError):
    """A user's channel permissions could not be resolved."""

    def __init__(self, user_id: str, channel_id: str, reason: str = ""):
        self.user_id = user_id
        self.channel_id = channel_id
        message = f"error getting permissions for user {user_id} in channel {channel_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MiddlewareError(BotForgeError):
    """A middleware step failed while processing a command."""

    def __init__(self, step_name: str, cause: BaseException):
        self.step_name = step_name
        self.cause = cause
        super().__init__(f"middleware {step_name} failed: {cause}")
