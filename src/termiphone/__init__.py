"""termiphone - terminal-style command shell."""

from .core import CommandExecutor, CommandResult, CommandRouter, ParsedCommand

__version__ = "0.1.0"

__all__ = ["CommandExecutor", "CommandResult", "CommandRouter", "ParsedCommand"]
