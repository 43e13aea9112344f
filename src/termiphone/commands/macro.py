"""In-memory command macros."""

from __future__ import annotations

from loguru import logger

from termiphone.core.parser import parse_command
from termiphone.core.router import CommandRouter
from termiphone.core.types import FunctionCommand, ParsedCommand, command
from termiphone.errors import CommandError

MACRO_USAGE = (
    "Usage: macro create <name> <line>... | macro list | macro show <name> | macro delete <name> | macro run <name>"
)


class MacroBook:
    """Named sequences of command lines, kept for the life of the session."""

    def __init__(self, router: CommandRouter) -> None:
        self._router = router
        self._macros: dict[str, list[str]] = {}
        self._running: set[str] = set()

    def define(self, name: str, lines: list[str]) -> None:
        self._macros[name] = list(lines)
        logger.debug("macro.define name={} lines={}", name, len(lines))

    def delete(self, name: str) -> bool:
        return self._macros.pop(name, None) is not None

    def get(self, name: str) -> list[str] | None:
        lines = self._macros.get(name)
        return None if lines is None else list(lines)

    def names(self) -> list[str]:
        return sorted(self._macros)

    async def run(self, name: str) -> str:
        lines = self._macros.get(name)
        if lines is None:
            raise CommandError(f"macro not found: {name}")
        if name in self._running:
            raise CommandError(f"macro '{name}' is already running")

        self._running.add(name)
        outputs: list[str] = []
        try:
            for line in lines:
                result = await self._router.route(parse_command(line))
                if result.error is not None:
                    raise CommandError(f"macro '{name}' failed at '{line}': {result.error}")
                if result.output:
                    outputs.append(result.output)
        finally:
            self._running.discard(name)
        logger.debug("macro.run name={} lines={}", name, len(lines))
        return "\n".join(outputs)


def macro_command(book: MacroBook) -> FunctionCommand:
    @command("macro", "Create, inspect and run command macros")
    async def _macro(invocation: ParsedCommand) -> str:
        if not invocation.args:
            return MACRO_USAGE

        subcommand, *rest = invocation.args
        if subcommand == "list":
            names = book.names()
            return "\n".join(names) if names else "No macros defined"
        if subcommand == "create":
            if len(rest) < 2:
                return "Usage: macro create <name> <line>..."
            name, *lines = rest
            book.define(name, lines)
            return f"Macro '{name}' saved ({len(lines)} lines)"
        if subcommand not in {"show", "delete", "run"}:
            return f"Unknown subcommand: {subcommand}"
        if not rest:
            return f"Usage: macro {subcommand} <name>"

        name = rest[0]
        if subcommand == "run":
            return await book.run(name)
        if subcommand == "delete":
            return f"Macro '{name}' deleted" if book.delete(name) else f"Macro '{name}' not found"
        lines = book.get(name)
        if lines is None:
            return f"Macro '{name}' not found"
        return "\n".join(f"{idx}. {line}" for idx, line in enumerate(lines, start=1))

    return _macro


def run_command(book: MacroBook) -> FunctionCommand:
    @command("run", "Run a macro")
    async def _run(invocation: ParsedCommand) -> str:
        if not invocation.args:
            return "Usage: run <name>"
        return await book.run(invocation.args[0])

    return _run
