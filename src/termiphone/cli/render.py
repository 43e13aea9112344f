"""CLI renderer for termiphone."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console
from rich.markup import escape

from termiphone.core import CLEAR_SCREEN, CommandResult


class CommandCompleter(Completer):
    """Completes command names through the executor's autocomplete."""

    def __init__(self, complete: Callable[[str], list[str]]) -> None:
        self._complete = complete

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        word = text.lstrip()
        for name in self._complete(text):
            yield Completion(name, start_position=-len(word))


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, complete: Callable[[str], list[str]] | None = None, console: Console | None = None) -> None:
        self.console: Console = console or Console()
        self._completer = CommandCompleter(complete) if complete is not None else None
        self._prompt_session: PromptSession[str] | None = None

    def welcome(self, message: str) -> None:
        """Render welcome message."""
        self.console.print(f"[bold green]{escape(message)}[/bold green]")

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def error(self, message: str) -> None:
        """Render an error line."""
        self.console.print(f"[bold red]error:[/bold red] {escape(message)}")

    def result(self, result: CommandResult) -> None:
        """Render one command result; empty output renders nothing."""
        if result.error is not None:
            self.error(result.error)
            return
        if result.output == CLEAR_SCREEN:
            self.console.clear()
            return
        if result.output:
            self.console.print(result.output, markup=False, highlight=False)

    async def get_user_input(self, prompt: str) -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession(completer=self._completer)
        with patch_stdout(raw=True):
            return await self._prompt_session.prompt_async(prompt)
