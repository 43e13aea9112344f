from __future__ import annotations

import pytest

from termiphone.commands.plugin import plugin_command
from termiphone.commands.system import help_command
from termiphone.core import CommandExecutor, ParsedCommand, command
from termiphone.errors import PluginError
from termiphone.plugins import PluginHost, hookimpl
from termiphone.plugins.builtin import load_builtin_plugins


@command("ping", "Reply with pong")
async def ping(_invocation: ParsedCommand) -> str:
    return "pong"


class PingPlugin:
    @hookimpl
    def provide_commands(self):
        return [ping]

    @hookimpl
    def provide_aliases(self):
        return {"pp": "ping"}


class BrokenPlugin:
    @hookimpl
    def provide_commands(self):
        raise RuntimeError("cannot build commands")


class NoisyPlugin:
    @hookimpl
    def provide_commands(self):
        return [ping, "not a command"]

    @hookimpl
    def provide_aliases(self):
        return {"bad alias": "ping"}


def _host() -> tuple[CommandExecutor, PluginHost]:
    executor = CommandExecutor()
    host = PluginHost(executor.router)
    executor.router.register(plugin_command(host))
    return executor, host


@pytest.mark.asyncio
async def test_enabled_plugin_registers_commands_and_aliases() -> None:
    executor, host = _host()
    info = host.add(PingPlugin(), name="ping", version="1.2.3")
    assert info.enabled is True
    assert (await executor.execute("ping")).output == "pong"
    assert (await executor.execute("pp")).output == "pong"


@pytest.mark.asyncio
async def test_disable_swaps_in_placeholder_and_enable_restores() -> None:
    executor, host = _host()
    host.add(PingPlugin(), name="ping")

    assert host.disable("ping") is True
    disabled = await executor.execute("ping")
    assert disabled.error is None
    assert disabled.output == "ping: plugin 'ping' is disabled"
    assert "ping" in executor.router.get_command_names()

    assert host.enable("ping") is True
    assert executor.router.get_command("ping") is ping


@pytest.mark.asyncio
async def test_plugin_loaded_disabled_registers_placeholder() -> None:
    executor, host = _host()
    host.add(PingPlugin(), name="ping", enabled=False)
    assert (await executor.execute("ping")).output == "ping: plugin 'ping' is disabled"


def test_unknown_plugin_state_change_returns_false() -> None:
    _, host = _host()
    assert host.enable("ghost") is False
    assert host.disable("ghost") is False
    with pytest.raises(PluginError):
        host.get("ghost")


def test_duplicate_plugin_name_is_rejected() -> None:
    _, host = _host()
    host.add(PingPlugin(), name="ping")
    with pytest.raises(PluginError):
        host.add(PingPlugin(), name="ping")


def test_failing_hooks_do_not_break_loading() -> None:
    executor, host = _host()
    host.add(BrokenPlugin(), name="broken")
    host.add(NoisyPlugin(), name="noisy")
    assert [info.name for info in host.list_plugins()] == ["broken", "noisy"]
    assert executor.router.get_command("ping") is ping
    assert "bad alias" not in executor.router.get_aliases()


@pytest.mark.asyncio
async def test_plugin_command_subcommands() -> None:
    executor, host = _host()
    assert (await executor.execute("plugin list")).output == "No plugins installed"
    load_builtin_plugins(host, disabled=["crypto"])

    assert (await executor.execute("plugin")).output.startswith("Usage: plugin list")
    assert (await executor.execute("plugin list")).output == "weather v1.0.0 enabled\ncrypto v1.0.0 disabled"
    assert (await executor.execute("plugin enable")).output == "Usage: plugin enable <name>"
    assert (await executor.execute("plugin enable crypto")).output == "Plugin 'crypto' enabled"
    assert (await executor.execute("plugin disable weather")).output == "Plugin 'weather' disabled"
    assert (await executor.execute("plugin disable ghost")).output == "Plugin 'ghost' not found"
    assert (await executor.execute("plugin frob")).output == "Unknown subcommand: frob"


@pytest.mark.asyncio
async def test_builtin_plugins_outputs() -> None:
    executor, host = _host()
    load_builtin_plugins(host)
    assert (await executor.execute("weather Paris")).output.startswith("Weather for Paris:")
    assert (await executor.execute("crypto doge")).output == "Cryptocurrency 'doge' not found"
    assert (await executor.execute("eth")).output.startswith("Ethereum (ETH)")


class Stopwatch:
    name = "stopwatch"
    description = "Report elapsed time"

    async def execute(self, invocation: ParsedCommand) -> str:
        return "0.0s"


class StopwatchPlugin:
    @hookimpl
    def provide_commands(self):
        return [Stopwatch()]


@pytest.mark.asyncio
async def test_plain_command_without_flags_is_accepted() -> None:
    executor, host = _host()
    executor.router.register(help_command(executor.router))
    host.add(StopwatchPlugin(), name="stopwatch")

    assert (await executor.execute("stopwatch")).output == "0.0s"
    help_text = await executor.execute("help stopwatch")
    assert help_text.error is None
    assert help_text.output == "stopwatch - Report elapsed time"

    host.disable("stopwatch")
    assert (await executor.execute("stopwatch")).output == "stopwatch: plugin 'stopwatch' is disabled"
    disabled_help = await executor.execute("help stopwatch")
    assert disabled_help.output == "stopwatch - Report elapsed time (disabled)"


@pytest.mark.asyncio
async def test_plugin_info_subcommand() -> None:
    executor, host = _host()
    host.add(PingPlugin(), name="ping", version="1.2.3")

    assert (await executor.execute("plugin info ping")).output == "ping v1.2.3 (enabled)"
    host.disable("ping")
    assert (await executor.execute("plugin info ping")).output == "ping v1.2.3 (disabled)"
    assert (await executor.execute("plugin info")).output == "Usage: plugin info <name>"

    missing = await executor.execute("plugin info ghost")
    assert missing.output == ""
    assert missing.error == "plugin not found: ghost"
