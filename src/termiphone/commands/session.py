"""Commands that inspect or change the running session."""

from __future__ import annotations

from termiphone.core.executor import CommandExecutor
from termiphone.core.lexer import QUOTES, join_tokens, split_first_token, tokenize
from termiphone.core.router import CommandRouter
from termiphone.core.types import FlagValue, FunctionCommand, ParsedCommand, command

ALIAS_USAGE = "Usage: alias <name>=<command> | alias <name> <command>"


def history_command(executor: CommandExecutor) -> FunctionCommand:
    @command("history", "Show command history", flags={"-c"})
    async def _history(invocation: ParsedCommand) -> str:
        if invocation.has_flag("c"):
            executor.clear_history()
            return "History cleared"

        lines = executor.get_history()
        if not lines:
            return "No history"
        width = len(str(len(lines)))
        return "\n".join(f"{str(idx).rjust(width)}  {line}" for idx, line in enumerate(lines, start=1))

    return _history


def alias_command(router: CommandRouter) -> FunctionCommand:
    @command("alias", "Create or list command aliases")
    async def _alias(invocation: ParsedCommand) -> str:
        if not invocation.args:
            aliases = router.get_aliases()
            if not aliases:
                return "No aliases defined"
            return "\n".join(f"{name}='{aliases[name]}'" for name in sorted(aliases))

        name, target = _split_alias(invocation)
        if not name or not target:
            return ALIAS_USAGE

        router.register_alias(name, target)
        return f"alias {name}='{target}'"

    return _alias


def unalias_command(router: CommandRouter) -> FunctionCommand:
    @command("unalias", "Remove an alias")
    async def _unalias(invocation: ParsedCommand) -> str:
        if not invocation.args:
            return "Usage: unalias <name>"

        name = invocation.args[0]
        if not router.has_alias(name):
            return f"unalias: {name}: not found"
        router.unregister_alias(name)
        return f"Alias '{name}' removed"

    return _unalias


def _split_alias(invocation: ParsedCommand) -> tuple[str, str]:
    line = invocation.raw or join_tokens([invocation.command, *invocation.args, *_flag_tokens(invocation.flags)])
    _, rest = split_first_token(line)
    first, _ = split_first_token(rest)
    if "=" in first and not rest.startswith(QUOTES):
        name, _, target = rest.partition("=")
    else:
        name, target = split_first_token(rest)
    return name.strip(), _unquote(target.strip())


def _unquote(target: str) -> str:
    tokens = tokenize(target)
    if len(tokens) == 1 and target.startswith(QUOTES):
        return tokens[0].strip()
    return target


def _flag_tokens(flags: dict[str, FlagValue]) -> list[str]:
    tokens: list[str] = []
    for key, value in flags.items():
        tokens.append(f"-{key}")
        if isinstance(value, str):
            tokens.append(value)
    return tokens
