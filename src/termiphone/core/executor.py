"""Top-level command execution façade."""

from __future__ import annotations

from termiphone.core.parser import autocomplete, parse_command
from termiphone.core.router import CommandRouter
from termiphone.core.types import CommandResult


class CommandExecutor:
    """Parses, routes and records input lines for one shell session."""

    def __init__(self, router: CommandRouter | None = None) -> None:
        self._router = router or CommandRouter()
        self._history: list[str] = []

    @property
    def router(self) -> CommandRouter:
        return self._router

    async def execute(self, line: str) -> CommandResult:
        if line.strip():
            self._history.append(line)

        parsed = parse_command(line)
        return await self._router.route(parsed)

    def get_history(self) -> list[str]:
        return list(self._history)

    def autocomplete(self, line: str) -> list[str]:
        return autocomplete(line, self._router.get_command_names())

    def clear_history(self) -> None:
        self._history.clear()
