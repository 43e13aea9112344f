"""Session bootstrap helpers."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from termiphone.commands import register_builtin_commands
from termiphone.config import Settings, load_settings
from termiphone.core import CommandExecutor, CommandResult
from termiphone.errors import AliasError
from termiphone.plugins.builtin import load_builtin_plugins
from termiphone.plugins.host import PluginHost


@dataclass
class ShellSession:
    """Everything one shell needs: settings, executor and plugin host."""

    settings: Settings
    executor: CommandExecutor
    plugins: PluginHost
    exit_requested: bool = False

    def request_exit(self) -> None:
        self.exit_requested = True

    async def handle_input(self, line: str) -> CommandResult:
        return await self.executor.execute(line)


def build_session(settings: Settings | None = None) -> ShellSession:
    """Build a session with built-in commands, plugins and configured aliases."""

    settings = settings or load_settings()
    executor = CommandExecutor()
    plugins = PluginHost(executor.router)
    session = ShellSession(settings=settings, executor=executor, plugins=plugins)

    register_builtin_commands(executor, settings=settings, plugins=plugins, on_exit=session.request_exit)
    load_builtin_plugins(plugins, disabled=settings.disabled_plugins)
    for alias, target in settings.aliases.items():
        try:
            executor.router.register_alias(alias, target)
        except AliasError:
            logger.opt(exception=True).warning("settings.alias_rejected alias={}", alias)

    logger.info(
        "session.ready commands={} aliases={}",
        len(executor.router.get_all_commands()),
        len(executor.router.get_aliases()),
    )
    return session
