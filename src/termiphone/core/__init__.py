"""Command interpretation pipeline."""

from .executor import CommandExecutor
from .lexer import tokenize
from .parser import autocomplete, parse_command
from .router import CommandRouter
from .types import CLEAR_SCREEN, Command, CommandResult, FunctionCommand, ParsedCommand, command

__all__ = [
    "CLEAR_SCREEN",
    "Command",
    "CommandExecutor",
    "CommandResult",
    "CommandRouter",
    "FunctionCommand",
    "ParsedCommand",
    "autocomplete",
    "command",
    "parse_command",
    "tokenize",
]
