"""Unit tests for the command registry."""

import pytest

from commands.command_registry import Command, CommandDefinition, CommandRegistry

from conftest import make_command


def test_register_and_get():
    registry = CommandRegistry()
    registry.register(make_command("ping"))

    assert registry.get("ping").name == "ping"
    assert registry.has("ping")
    assert "ping" in registry
    assert registry.get("pong") is None
    assert len(registry) == 1


def test_lookup_is_exact():
    registry = CommandRegistry()
    registry.register(make_command("ping"))

    assert registry.get("PING") is None


def test_last_registration_wins():
    registry = CommandRegistry()
    first = make_command("ban", category="Moderation")
    second = make_command("ban", category="Admin")

    registry.register(first)
    registry.register(second)

    assert registry.get("ban") is second
    assert len(registry) == 1
    categories = registry.get_categories()
    assert "Moderation" not in categories
    assert categories["Admin"] == [second]


def test_empty_category_goes_to_general():
    registry = CommandRegistry()
    uncategorized = make_command("roll", category="")
    registry.register(uncategorized)
    registry.register(make_command("kick", category="Moderation"))

    categories = registry.get_categories()

    assert uncategorized in categories["General"]
    assert [cmd.name for cmd in categories["Moderation"]] == ["kick"]


def test_register_logs(caplog):
    registry = CommandRegistry()
    with caplog.at_level("INFO", logger="CommandRegistry"):
        registry.register(make_command("ping"))

    assert "Registered command: ping" in caplog.text


def test_from_config_defaults():
    async def handler(ctx, args):
        pass

    command = Command.from_config({"name": "roll"}, handler)

    assert command.usage == "roll"
    assert command.category == "General"
    assert command.cooldown == 0
    assert command.permissions == frozenset()


def test_definition_is_immutable():
    definition = CommandDefinition(name="ping")
    with pytest.raises(AttributeError):
        definition.name = "pong"


def test_fractional_cooldown_is_kept():
    async def handler(ctx, args):
        pass

    command = Command.from_config({"name": "roll", "cooldown": 1.5}, handler)

    assert command.cooldown == 1.5
