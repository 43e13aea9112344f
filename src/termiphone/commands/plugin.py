"""Plugin management command."""

from __future__ import annotations

from termiphone.core.types import FunctionCommand, ParsedCommand, command
from termiphone.plugins.host import PluginHost

PLUGIN_USAGE = "Usage: plugin list | plugin info <name> | plugin enable <name> | plugin disable <name>"


def plugin_command(host: PluginHost) -> FunctionCommand:
    @command("plugin", "Manage plugins")
    async def _plugin(invocation: ParsedCommand) -> str:
        if not invocation.args:
            return PLUGIN_USAGE

        subcommand, *rest = invocation.args
        if subcommand == "list":
            return _list_plugins(host)
        if subcommand == "info":
            if not rest:
                return "Usage: plugin info <name>"
            return _describe_plugin(host, rest[0])
        if subcommand in {"enable", "disable"}:
            if not rest:
                return f"Usage: plugin {subcommand} <name>"
            name = rest[0]
            changed = host.enable(name) if subcommand == "enable" else host.disable(name)
            if not changed:
                return f"Plugin '{name}' not found"
            return f"Plugin '{name}' {subcommand}d"
        return f"Unknown subcommand: {subcommand}"

    return _plugin


def _describe_plugin(host: PluginHost, name: str) -> str:
    info = host.get(name)
    status = "enabled" if info.enabled else "disabled"
    return f"{info.name} v{info.version} ({status})"


def _list_plugins(host: PluginHost) -> str:
    plugins = host.list_plugins()
    if not plugins:
        return "No plugins installed"
    return "\n".join(f"{info.name} v{info.version} {'enabled' if info.enabled else 'disabled'}" for info in plugins)
