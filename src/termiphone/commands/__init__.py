"""Built-in command set."""

from __future__ import annotations

from collections.abc import Callable

from termiphone.config import Settings
from termiphone.core.executor import CommandExecutor
from termiphone.plugins.host import PluginHost

from .macro import MacroBook, macro_command, run_command
from .plugin import plugin_command
from .session import alias_command, history_command, unalias_command
from .system import (
    EXIT_MESSAGE,
    clear,
    date,
    echo,
    exit_command,
    help_command,
    time_of_day,
    uptime_command,
    whoami_command,
)


def register_builtin_commands(
    executor: CommandExecutor,
    *,
    settings: Settings,
    plugins: PluginHost | None = None,
    on_exit: Callable[[], None] | None = None,
) -> None:
    """Register the built-in commands on the executor's router."""

    router = executor.router
    macros = MacroBook(router)
    for builtin in (
        help_command(router),
        clear,
        exit_command(on_exit),
        history_command(executor),
        alias_command(router),
        unalias_command(router),
        whoami_command(settings.user),
        uptime_command(),
        date,
        time_of_day,
        echo,
        macro_command(macros),
        run_command(macros),
    ):
        router.register(builtin)
    if plugins is not None:
        router.register(plugin_command(plugins))


__all__ = ["EXIT_MESSAGE", "register_builtin_commands"]
