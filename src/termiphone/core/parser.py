"""Command parsing helpers."""

from __future__ import annotations

from collections.abc import Iterable

from termiphone.core.lexer import tokenize
from termiphone.core.types import FlagValue, ParsedCommand

FLAG_PREFIX = "-"


def parse_command(line: str) -> ParsedCommand:
    """Parse one input line into command name, positional args and flags."""

    tokens = tokenize(line)
    if not tokens:
        return ParsedCommand(command="", args=[], flags={}, raw=line)

    args, flags = parse_arguments(tokens[1:])
    return ParsedCommand(command=tokens[0], args=args, flags=flags, raw=line)


def parse_arguments(tokens: list[str]) -> tuple[list[str], dict[str, FlagValue]]:
    """Split argument tokens into positionals and flags."""

    args: list[str] = []
    flags: dict[str, FlagValue] = {}
    idx = 0
    while idx < len(tokens):
        token = tokens[idx]

        if token.startswith(FLAG_PREFIX):
            name = token.lstrip(FLAG_PREFIX)
            if idx + 1 < len(tokens) and not tokens[idx + 1].startswith(FLAG_PREFIX):
                flags[name] = tokens[idx + 1]
                idx += 2
                continue

            flags[name] = True
            idx += 1
            continue

        args.append(token)
        idx += 1

    return args, flags


def autocomplete(line: str, candidates: Iterable[str]) -> list[str]:
    """Complete the command name being typed; arguments are not completed."""

    text = line.lstrip()
    words = text.split()
    if len(words) > 1 or (words and text != text.rstrip()):
        return []

    prefix = words[0].lower() if words else ""
    return [name for name in candidates if name.lower().startswith(prefix)]
