"""
Basic Commands
ping, help and info
"""

from typing import TYPE_CHECKING, List

from commands.command_registry import Command

if TYPE_CHECKING:
    from bot.core import Bot
    from commands.command_handler import CommandContext


async def ping_command(ctx: "CommandContext", args: List[str]) -> None:
    """
    Reply with pong, then edit the reply with the gateway latency.

    Args:
        ctx: Command context
        args: Command arguments (ignored)
    """
    message = await ctx.reply("🏓 Pong!")
    latency_ms = ctx.session.latency * 1000
    await ctx.edit(str(message.id), f"🏓 Pong! Latency: {latency_ms:.0f}ms")


async def help_command(ctx: "CommandContext", args: List[str]) -> None:
    """
    Show all commands grouped by category, or details for one command.

    Args:
        ctx: Command context
        args: Optional command name
    """
    bot = ctx.bot
    prefix = bot.config.PREFIX

    if args:
        cmd = bot.registry.get(args[0])
        if not cmd:
            await ctx.reply("❌ Command not found.")
            return

        lines = [
            f"📖 **Command:** `{cmd.name}`",
            "",
            f"**Description:** {cmd.description}",
            f"**Usage:** `{prefix}{cmd.usage}`",
            f"**Category:** {cmd.category or 'General'}",
            f"**Cooldown:** {cmd.cooldown:g} seconds",
        ]
        if cmd.permissions:
            lines.append(f"**Permissions:** {', '.join(sorted(cmd.permissions))}")
        await ctx.reply("\n".join(lines))
        return

    lines = [
        "🔥 **DiscordBotForge Commands**",
        f"Use `{prefix}help <command>` for detailed information",
        "",
    ]
    for category, commands in bot.registry.get_categories().items():
        lines.append(f"**{category}:**")
        for cmd in commands:
            lines.append(f"• **{cmd.name}** - {cmd.description}")
        lines.append("")
    lines.append(f"DiscordBotForge v{bot.version}")

    await ctx.reply("\n".join(lines))


async def info_command(ctx: "CommandContext", args: List[str]) -> None:
    """Show bot information."""
    bot = ctx.bot
    status = bot.get_status()

    await ctx.reply(
        "\n".join([
            "🔥 **DiscordBotForge**",
            "A modular framework for forging Discord bots",
            "",
            f"**Version:** {status['version']}",
            f"**Commands:** {status['commands']}",
            f"**Modules:** {status['modules']}",
            f"**Middleware:** {status['middleware']}",
            f"**Prefix:** {bot.config.PREFIX}",
            f"**Debug Mode:** {str(bot.config.DEBUG).lower()}",
            f"**Uptime:** {status['uptime']}",
        ])
    )


BASIC_COMMANDS = [
    Command.from_config(
        {
            "name": "ping",
            "description": "Pong! Check bot latency",
            "usage": "ping",
            "category": "General",
        },
        ping_command,
    ),
    Command.from_config(
        {
            "name": "help",
            "description": "Show available commands",
            "usage": "help [command]",
            "category": "General",
        },
        help_command,
    ),
    Command.from_config(
        {
            "name": "info",
            "description": "Show DiscordBotForge information",
            "usage": "info",
            "category": "General",
        },
        info_command,
    ),
]


def register_basic_commands(bot: "Bot") -> None:
    """Register ping, help and info on the bot."""
    for command in BASIC_COMMANDS:
        bot.register_command(command)
