"""
Command Registry
Centralized command registration and category grouping
"""

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, FrozenSet, Iterable, List, Optional

from utils.logger import get_logger

if TYPE_CHECKING:
    from commands.command_handler import CommandContext

# Command handler type alias: handler(ctx, args)
CommandFunc = Callable[["CommandContext", List[str]], Awaitable[Any]]

DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class CommandDefinition:
    """Definition of a command."""

    name: str
    description: str = ""
    usage: str = ""
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    cooldown: float = 0.0
    category: str = DEFAULT_CATEGORY


class Command:
    """Registered command with definition and handler."""

    def __init__(self, definition: CommandDefinition, handler: CommandFunc):
        self.definition = definition
        self.handler = handler

    @classmethod
    def from_config(cls, config: Dict[str, Any], handler: CommandFunc) -> "Command":
        """
        Build a command from a configuration dict.

        Args:
            config: Command configuration dict with keys:
                - name: Command name (required)
                - description: Command description
                - usage: Usage string without the prefix
                - permissions: Iterable of permission tags
                - cooldown: Cooldown in seconds (informational)
                - category: Command category
            handler: Async function taking (ctx, args)
        """
        definition = CommandDefinition(
            name=config["name"],
            description=config.get("description", ""),
            usage=config.get("usage", config["name"]),
            permissions=frozenset(config.get("permissions", ())),
            cooldown=float(config.get("cooldown", 0)),
            category=config.get("category", DEFAULT_CATEGORY),
        )
        return cls(definition, handler)

    async def execute(self, ctx: "CommandContext", args: List[str]) -> Any:
        return await self.handler(ctx, args)

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def usage(self) -> str:
        return self.definition.usage

    @property
    def permissions(self) -> FrozenSet[str]:
        return self.definition.permissions

    @property
    def cooldown(self) -> float:
        return self.definition.cooldown

    @property
    def category(self) -> str:
        return self.definition.category

    def __repr__(self) -> str:
        return f"<Command name={self.name!r} category={self.category!r}>"


class CommandRegistry:
    """Maps command names to commands. The last registration for a name wins."""

    def __init__(self, commands: Optional[Iterable[Command]] = None):
        self.logger = get_logger("CommandRegistry")
        self._commands: Dict[str, Command] = {}
        self._lock = threading.Lock()

        for command in commands or ():
            self.register(command)

    def register(self, command: Command) -> "CommandRegistry":
        """
        Register a command, replacing any earlier command with the same name.

        Returns:
            Self for chaining
        """
        with self._lock:
            self._commands[command.name] = command
        self.logger.info(f"⚡ Registered command: {command.name}")
        return self

    def get(self, name: str) -> Optional[Command]:
        """Get a command by its exact name."""
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def get_all(self) -> List[Command]:
        """Get all registered commands, ordered by name."""
        with self._lock:
            return sorted(self._commands.values(), key=lambda cmd: cmd.name)

    def get_categories(self) -> Dict[str, List[Command]]:
        """
        Group all commands by category.

        Commands with an empty category land in "General".

        Returns:
            Mapping of category name to its commands
        """
        categories: Dict[str, List[Command]] = {}
        for command in self.get_all():
            category = command.category or DEFAULT_CATEGORY
            categories.setdefault(category, []).append(command)
        return categories

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands
