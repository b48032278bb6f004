"""
Middleware steps run before every command.
"""

from .base import Middleware, MiddlewareChain
from .cooldown_middleware import CooldownMiddleware
from .logging_middleware import LoggingMiddleware
from .owner_middleware import OwnerOnlyMiddleware
from .permission_middleware import PermissionMiddleware

__all__ = [
    "Middleware",
    "MiddlewareChain",
    "CooldownMiddleware",
    "LoggingMiddleware",
    "OwnerOnlyMiddleware",
    "PermissionMiddleware",
]
