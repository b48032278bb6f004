"""
Error Handler
Central "log and continue" error reporting plus process signal wiring
"""

import asyncio
import signal
import threading
import traceback
from typing import Any, Awaitable, Callable, Dict, Optional

from utils.logger import get_logger


class ErrorHandler:
    """Logs recoverable errors and keeps per-context counts."""

    def __init__(self):
        self.logger = get_logger("ErrorHandler")
        self.error_counts: Dict[str, int] = {}
        self._lock = threading.Lock()
        self._shutdown_callback: Optional[Callable[[], Awaitable[Any]]] = None
        self._shutdown_task: Optional[asyncio.Future] = None

    def initialize(
        self,
        loop: asyncio.AbstractEventLoop,
        on_shutdown: Optional[Callable[[], Awaitable[Any]]] = None,
    ) -> None:
        """Install the loop exception handler and SIGINT/SIGTERM handlers."""
        self._shutdown_callback = on_shutdown
        loop.set_exception_handler(self._async_exception_handler)

        try:
            loop.add_signal_handler(signal.SIGINT, self._signal_handler, signal.SIGINT)
            loop.add_signal_handler(signal.SIGTERM, self._signal_handler, signal.SIGTERM)
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass

        self.logger.info("Error handlers initialized")

    def _signal_handler(self, sig: signal.Signals) -> None:
        self.logger.info(f"Received signal {sig.name}, shutting down...")
        if self._shutdown_callback:
            self._shutdown_task = asyncio.ensure_future(self._shutdown_callback())

    def _async_exception_handler(self, loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
        exception = context.get("exception")
        if exception:
            self.handle_exception(exception, "async")
        else:
            self.logger.error(f"Async error: {context.get('message', 'Unknown async error')}")

    def handle_exception(self, error: BaseException, context: str = "") -> int:
        """
        Log an exception and bump its counter.

        Args:
            error: The exception that occurred
            context: Where it happened (e.g. "command:ping", "middleware:Permission")

        Returns:
            Number of times this context/type pair has been seen
        """
        error_key = f"{context}:{type(error).__name__}"

        if context:
            self.logger.error(f"[{context}] {error}")
        else:
            self.logger.error(f"{error}")

        self.logger.debug(
            "Traceback:\n" + "".join(traceback.format_exception(type(error), error, error.__traceback__))
        )

        with self._lock:
            count = self.error_counts.get(error_key, 0) + 1
            self.error_counts[error_key] = count
        return count

    @property
    def total_errors(self) -> int:
        with self._lock:
            return sum(self.error_counts.values())

    def reset(self) -> None:
        with self._lock:
            self.error_counts.clear()


_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler


def setup_error_handler(
    loop: Optional[asyncio.AbstractEventLoop] = None,
    on_shutdown: Optional[Callable[[], Awaitable[Any]]] = None,
) -> ErrorHandler:
    """Set up the global error handler on the running loop."""
    handler = get_error_handler()
    handler.initialize(loop or asyncio.get_running_loop(), on_shutdown)
    return handler
