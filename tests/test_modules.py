"""Unit tests for the logging and statistics modules."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from modules import LoggingModule, StatsModule

from conftest import make_command, make_event


@pytest.mark.asyncio
async def test_logging_module_writes_user_messages(bot, tmp_path):
    log_file = tmp_path / "forge.log"
    module = LoggingModule(str(log_file))

    await module.initialize(bot)
    await module.on_message(make_event("hello world", author_name="alice#1", channel_id="55"))
    await module.on_message(make_event("beep", author_bot=True))
    await module.shutdown()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging module initialized" in text
    assert "alice#1 in #55: hello world" in text
    assert "beep" not in text
    assert "Logging module shutting down" in text
    assert text.startswith("[DiscordBotForge]")


@pytest.mark.asyncio
async def test_logging_module_appends(bot, tmp_path):
    log_file = tmp_path / "forge.log"
    log_file.write_text("previous run\n", encoding="utf-8")
    module = LoggingModule(str(log_file))

    await module.initialize(bot)
    await module.shutdown()

    assert log_file.read_text(encoding="utf-8").startswith("previous run\n")


@pytest.mark.asyncio
async def test_logging_module_init_fails_for_bad_path(bot, tmp_path):
    module = LoggingModule(str(tmp_path / "missing" / "forge.log"))

    with pytest.raises(OSError):
        await module.initialize(bot)

    assert not module.enabled


@pytest.mark.asyncio
async def test_logging_module_failure_is_best_effort(bot, tmp_path):
    bot.register_module(LoggingModule(str(tmp_path / "missing" / "forge.log")))
    stats = StatsModule()
    bot.register_module(stats)

    await bot.start()

    assert stats.enabled
    assert bot.get_modules_info() == [
        {"name": "Logging", "version": "1.0.0", "status": "Stopped"},
        {"name": "Statistics", "version": "1.0.0", "status": "Running"},
    ]


@pytest.mark.asyncio
async def test_stats_module_counts(bot):
    stats = StatsModule()
    bot.register_module(stats)
    bot.register_command(make_command("ping", []))
    await bot.start()

    await bot.handle_message(make_event("hi"))
    await bot.handle_message(make_event("!ping"))
    await bot.handle_message(make_event("!ping", author_bot=True))

    result = stats.get_stats()
    assert result["messages"] == 2
    assert result["commands"] == 1
    assert result["servers"] == 3
    assert result["memory_mb"] > 0
    assert bot.get_status()["stats"]["commands"] == 1


def test_stats_counter_is_thread_safe():
    stats = StatsModule()

    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(1000):
            pool.submit(stats.increment_command_count)

    assert stats.command_count == 1000


def test_stats_without_bot():
    stats = StatsModule()

    result = stats.get_stats()

    assert result["servers"] == 0
    assert result["uptime"] == "0s"
