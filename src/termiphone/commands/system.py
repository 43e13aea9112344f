"""System commands."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime

from termiphone.core.router import CommandRouter
from termiphone.core.types import CLEAR_SCREEN, FunctionCommand, ParsedCommand, command, command_flags

EXIT_MESSAGE = "Goodbye!"


@command("clear", "Clear the terminal screen")
async def clear(_invocation: ParsedCommand) -> str:
    return CLEAR_SCREEN


@command("date", "Show current date")
async def date(_invocation: ParsedCommand) -> str:
    return datetime.now().strftime("%a %b %d %Y")


@command("time", "Show current time")
async def time_of_day(_invocation: ParsedCommand) -> str:
    return datetime.now().strftime("%H:%M:%S")


@command("echo", "Print arguments")
async def echo(invocation: ParsedCommand) -> str:
    return " ".join(invocation.args)


def exit_command(on_exit: Callable[[], None] | None = None) -> FunctionCommand:
    @command("exit", "Exit the terminal")
    async def _exit(_invocation: ParsedCommand) -> str:
        if on_exit is not None:
            on_exit()
        return EXIT_MESSAGE

    return _exit


def whoami_command(user: str) -> FunctionCommand:
    @command("whoami", "Show current user")
    async def _whoami(_invocation: ParsedCommand) -> str:
        return user

    return _whoami


def uptime_command(started_at: float | None = None) -> FunctionCommand:
    start = time.monotonic() if started_at is None else started_at

    @command("uptime", "Show session uptime")
    async def _uptime(_invocation: ParsedCommand) -> str:
        elapsed = int(time.monotonic() - start)
        hours, remainder = divmod(elapsed, 3600)
        return f"up {hours}h {remainder // 60}m"

    return _uptime


def help_command(router: CommandRouter) -> FunctionCommand:
    @command("help", "Show available commands")
    async def _help(invocation: ParsedCommand) -> str:
        if invocation.args:
            return _describe(router, invocation.args[0])
        return _overview(router)

    return _help


def _overview(router: CommandRouter) -> str:
    commands = router.get_all_commands()
    aliases = router.get_aliases()
    width = max((len(item.name) for item in commands), default=0)
    lines = ["Available commands:"]
    lines.extend(f"  {item.name.ljust(width)}  {item.description}" for item in commands)
    if aliases:
        lines.append("")
        lines.append("Aliases:")
        lines.extend(f"  {alias} -> {aliases[alias]}" for alias in sorted(aliases))
    lines.append("")
    lines.append("Type 'help <command>' for details.")
    return "\n".join(lines)


def _describe(router: CommandRouter, name: str) -> str:
    target = router.get_command(name)
    if target is None:
        return f"No help for '{name}'"

    lines: list[str] = []
    alias_target = router.get_aliases().get(name)
    if alias_target is not None:
        lines.append(f"{name} is an alias for '{alias_target}'")
    lines.append(f"{target.name} - {target.description}")
    flags = command_flags(target)
    if flags:
        lines.append(f"flags: {', '.join(sorted(flags))}")
    return "\n".join(lines)
