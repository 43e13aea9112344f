"""Command registry and routing."""

from __future__ import annotations

import time

from loguru import logger

from termiphone.core.parser import parse_command
from termiphone.core.types import Command, CommandResult, ParsedCommand
from termiphone.errors import AliasError

UNKNOWN_ERROR = "Unknown error occurred"


def _not_found(name: str) -> str:
    return f"Command not found: {name}. Type 'help' for available commands."


class CommandRouter:
    """Registry of named commands and aliases.

    Alias targets are command lines. Resolving an alias parses its target
    once, so ``mom -> "call -u mom"`` resolves to ``call`` with the target's
    args and flags prepended to whatever the user typed. The target command
    is never looked up as an alias again.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}

    def register(self, command: Command) -> None:
        replaced = command.name in self._commands
        self._commands[command.name] = command
        logger.debug("command.register name={} replaced={}", command.name, replaced)

    def register_alias(self, alias: str, target: str) -> None:
        if not alias or any(ch.isspace() for ch in alias):
            raise AliasError(f"invalid alias name: {alias!r}")
        if not parse_command(target).command:
            raise AliasError(f"alias '{alias}' has an empty target")
        self._aliases[alias] = target
        logger.debug("alias.register alias={} target={}", alias, target)

    def unregister_alias(self, alias: str) -> None:
        if self._aliases.pop(alias, None) is not None:
            logger.debug("alias.unregister alias={}", alias)

    def get_aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def has_alias(self, name: str) -> bool:
        return name in self._aliases

    def get_command(self, name: str) -> Command | None:
        target = self._aliases.get(name)
        if target is not None:
            name = parse_command(target).command
        return self._commands.get(name)

    def get_all_commands(self) -> list[Command]:
        return [self._commands[name] for name in sorted(self._commands)]

    def get_command_names(self) -> list[str]:
        return sorted(set(self._commands) | set(self._aliases))

    def resolve(self, parsed: ParsedCommand) -> ParsedCommand:
        """Expand an alias invocation into the command it stands for."""

        target = self._aliases.get(parsed.command)
        if target is None:
            return parsed

        expanded = parse_command(target)
        return ParsedCommand(
            command=expanded.command,
            args=[*expanded.args, *parsed.args],
            flags={**expanded.flags, **parsed.flags},
            raw=parsed.raw,
        )

    async def route(self, parsed: ParsedCommand) -> CommandResult:
        if not parsed.command:
            return CommandResult(output="")

        resolved = self.resolve(parsed)
        command = self._commands.get(resolved.command)
        if command is None:
            logger.debug("command.not_found name={}", parsed.command)
            return CommandResult(output="", error=_not_found(parsed.command))

        logger.debug(
            "command.call.start name={} args={} flags={}",
            resolved.command,
            resolved.args,
            resolved.flags,
        )
        start = time.monotonic()
        try:
            output = await command.execute(resolved)
        except Exception as exc:
            logger.opt(exception=True).debug("command.call.error name={}", resolved.command)
            logger.info("command.call.error name={} error={!r}", resolved.command, exc)
            return CommandResult(output="", error=str(exc) or UNKNOWN_ERROR)
        finally:
            duration = time.monotonic() - start
            logger.debug("command.call.end name={} duration={:.3f}ms", resolved.command, duration * 1000)

        return CommandResult(output="" if output is None else str(output))
