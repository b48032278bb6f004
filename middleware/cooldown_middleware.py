"""
Cooldown Middleware
Per-user, per-channel rate limiting for commands
"""

import threading
import time
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from middleware.base import Middleware, Next

if TYPE_CHECKING:
    from commands.command_handler import CommandContext


class CooldownMiddleware(Middleware):
    """Declines a command if the same user ran one in the same channel too recently."""

    name = "Cooldown"

    def __init__(self, duration: float, clock: Callable[[], float] = time.monotonic):
        """
        Create CooldownMiddleware instance.

        Args:
            duration: Minimum seconds between commands per user/channel pair
            clock: Monotonic time source in seconds
        """
        self.duration = duration
        self._clock = clock
        # (user_id, channel_id) -> last invocation time; never evicted automatically
        self._cooldowns: Dict[Tuple[str, str], float] = {}
        self._lock = threading.Lock()

    def check_and_set(self, user_id: str, channel_id: str) -> Optional[float]:
        """
        Atomically check the cooldown and record this invocation if allowed.

        Returns:
            None if allowed, otherwise remaining seconds to wait
        """
        key = (user_id, channel_id)
        with self._lock:
            now = self._clock()
            last_used = self._cooldowns.get(key)
            if last_used is not None:
                elapsed = now - last_used
                if elapsed < self.duration:
                    return self.duration - elapsed
            self._cooldowns[key] = now
        return None

    async def process(self, ctx: "CommandContext", next_: Next) -> None:
        remaining = self.check_and_set(ctx.event.author_id, ctx.event.channel_id)
        if remaining is not None:
            await ctx.notify(f"⏰ Please wait {remaining:.1f} seconds before using another command.")
            return

        await next_()

    def prune(self, older_than: float) -> int:
        """
        Drop entries whose last invocation is more than ``older_than`` seconds old.

        Returns:
            Number of removed entries
        """
        with self._lock:
            cutoff = self._clock() - older_than
            stale = [key for key, last_used in self._cooldowns.items() if last_used < cutoff]
            for key in stale:
                del self._cooldowns[key]
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cooldowns)
