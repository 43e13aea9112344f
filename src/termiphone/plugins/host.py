"""Plugin host that feeds plugin commands into the router."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pluggy
from loguru import logger

from termiphone.core.router import CommandRouter
from termiphone.core.types import Command, FunctionCommand, ParsedCommand, command_flags
from termiphone.errors import AliasError, PluginError
from termiphone.plugins.hookspecs import HOOK_NAMESPACE, TermiphoneHookSpecs


@dataclass(frozen=True)
class PluginInfo:
    """Public view of one loaded plugin."""

    name: str
    version: str
    enabled: bool


@dataclass
class _LoadedPlugin:
    name: str
    version: str
    enabled: bool
    commands: list[Command] = field(default_factory=list)
    aliases: dict[str, str] = field(default_factory=dict)

    def info(self) -> PluginInfo:
        return PluginInfo(name=self.name, version=self.version, enabled=self.enabled)


def disabled_placeholder(command: Command, plugin_name: str) -> FunctionCommand:
    """Build the stand-in registered while a plugin is disabled."""

    async def _handler(_invocation: ParsedCommand) -> str:
        return f"{command.name}: plugin '{plugin_name}' is disabled"

    return FunctionCommand(
        name=command.name,
        description=f"{command.description} (disabled)",
        handler=_handler,
        flags=command_flags(command),
    )


class PluginHost:
    """Loads pluggy plugins and swaps their commands in and out of a router."""

    def __init__(self, router: CommandRouter) -> None:
        self._router = router
        self._plugin_manager = pluggy.PluginManager(HOOK_NAMESPACE)
        self._plugin_manager.add_hookspecs(TermiphoneHookSpecs)
        self._plugins: dict[str, _LoadedPlugin] = {}

    def add(self, plugin: Any, *, name: str, version: str = "0.0.0", enabled: bool = True) -> PluginInfo:
        if name in self._plugins:
            raise PluginError(f"plugin already loaded: {name}")

        self._plugin_manager.register(plugin, name=name)
        loaded = _LoadedPlugin(
            name=name,
            version=version,
            enabled=enabled,
            commands=self._collect_commands(name),
            aliases=self._collect_aliases(name),
        )
        self._plugins[name] = loaded
        self._apply(loaded)
        self._register_aliases(loaded)
        logger.info(
            "plugin.loaded name={} version={} enabled={} commands={}",
            name,
            version,
            enabled,
            [command.name for command in loaded.commands],
        )
        return loaded.info()

    def enable(self, name: str) -> bool:
        return self._set_enabled(name, True)

    def disable(self, name: str) -> bool:
        return self._set_enabled(name, False)

    def get(self, name: str) -> PluginInfo:
        loaded = self._plugins.get(name)
        if loaded is None:
            raise PluginError(f"plugin not found: {name}")
        return loaded.info()

    def list_plugins(self) -> list[PluginInfo]:
        return [loaded.info() for loaded in self._plugins.values()]

    def _set_enabled(self, name: str, enabled: bool) -> bool:
        loaded = self._plugins.get(name)
        if loaded is None:
            return False
        loaded.enabled = enabled
        self._apply(loaded)
        logger.info("plugin.state name={} enabled={}", name, enabled)
        return True

    def _apply(self, loaded: _LoadedPlugin) -> None:
        for command in loaded.commands:
            if loaded.enabled:
                self._router.register(command)
            else:
                self._router.register(disabled_placeholder(command, loaded.name))

    def _register_aliases(self, loaded: _LoadedPlugin) -> None:
        for alias, target in loaded.aliases.items():
            try:
                self._router.register_alias(alias, target)
            except AliasError:
                logger.opt(exception=True).warning("plugin.alias_rejected plugin={} alias={}", loaded.name, alias)

    def _collect_commands(self, name: str) -> list[Command]:
        commands: list[Command] = []
        for batch in self._call_plugin_hook(name, "provide_commands"):
            for candidate in batch or ():
                if not isinstance(candidate, Command):
                    logger.warning("plugin.invalid_command plugin={} value={!r}", name, candidate)
                    continue
                commands.append(candidate)
        return commands

    def _collect_aliases(self, name: str) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for mapping in self._call_plugin_hook(name, "provide_aliases"):
            aliases.update(mapping or {})
        return aliases

    def _call_plugin_hook(self, plugin_name: str, hook_name: str) -> list[Any]:
        hook = getattr(self._plugin_manager.hook, hook_name)
        results: list[Any] = []
        for impl in hook.get_hookimpls():
            if impl.plugin_name != plugin_name:
                continue
            try:
                results.append(impl.function())
            except Exception:
                logger.opt(exception=True).warning("plugin.hook_failed plugin={} hook={}", plugin_name, hook_name)
        return results
