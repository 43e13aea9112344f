"""Interactive shell loop."""

from __future__ import annotations

from termiphone.app import ShellSession
from termiphone.commands import EXIT_MESSAGE

from .render import Renderer


class InteractiveShell:
    """Read lines, run them through the session, render results."""

    def __init__(self, session: ShellSession, renderer: Renderer | None = None) -> None:
        self._session = session
        self._renderer = renderer or Renderer(complete=session.executor.autocomplete)

    async def run(self) -> None:
        self._renderer.welcome(self._session.settings.welcome)
        while not self._session.exit_requested:
            try:
                line = await self._renderer.get_user_input(self._session.settings.prompt)
            except (KeyboardInterrupt, EOFError):
                self._renderer.info(EXIT_MESSAGE)
                break
            result = await self._session.handle_input(line)
            self._renderer.result(result)
