"""
Middleware base class and chain driver.

A step receives the command context and a continuation. Awaiting the
continuation runs the remaining steps and finally the command; returning
without awaiting it halts the chain.
"""

import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Awaitable, Callable, Sequence

from bot.errors import MiddlewareError

if TYPE_CHECKING:
    from commands.command_handler import CommandContext

Next = Callable[[], Awaitable[None]]


class Middleware(ABC):
    """A chain stage that may veto progression to the next stage."""

    name = "Middleware"

    @abstractmethod
    async def process(self, ctx: "CommandContext", next_: Next) -> None:
        """Handle the invocation, awaiting ``next_()`` to continue."""


class MiddlewareChain:
    """Runs steps in order, ending with the terminal action."""

    def __init__(self, steps: Sequence[Middleware], terminal: Next):
        self.steps = tuple(steps)
        self.terminal = terminal

    async def run(self, ctx: "CommandContext") -> None:
        await self._call(ctx, 0)

    async def _call(self, ctx: "CommandContext", index: int) -> None:
        if index >= len(self.steps):
            await self.terminal()
            return

        step = self.steps[index]
        try:
            await step.process(ctx, functools.partial(self._call, ctx, index + 1))
        except MiddlewareError:
            raise
        except Exception as error:
            raise MiddlewareError(step.name, error) from error
