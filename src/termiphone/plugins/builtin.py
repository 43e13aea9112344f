"""Demo plugins bundled with the shell. Their outputs are canned."""

from __future__ import annotations

from collections.abc import Iterable

from termiphone.core.types import Command, ParsedCommand, command
from termiphone.plugins.hookspecs import hookimpl
from termiphone.plugins.host import PluginHost

COIN_PRICES: dict[str, tuple[str, str, str]] = {
    "btc": ("Bitcoin", "$43,250", "+2.4%"),
    "eth": ("Ethereum", "$2,680", "+1.8%"),
    "ada": ("Cardano", "$0.52", "-0.3%"),
    "sol": ("Solana", "$98.50", "+5.2%"),
}


@command("weather", "Get weather information")
async def weather(invocation: ParsedCommand) -> str:
    location = invocation.args[0] if invocation.args else "current location"
    return "\n".join(
        [
            f"Weather for {location}:",
            "Partly Cloudy",
            "Temperature: 24°C (feels like 26°C)",
            "Wind: 12 km/h NE",
            "Humidity: 65%",
        ]
    )


@command("crypto", "Get cryptocurrency prices")
async def crypto(invocation: ParsedCommand) -> str:
    coin = invocation.args[0].lower() if invocation.args else "btc"
    data = COIN_PRICES.get(coin)
    if data is None:
        return f"Cryptocurrency '{coin}' not found"

    name, price, change = data
    return "\n".join(
        [
            f"{name} ({coin.upper()})",
            f"Price: {price}",
            f"24h Change: {change}",
        ]
    )


class WeatherPlugin:
    @hookimpl
    def provide_commands(self) -> list[Command]:
        return [weather]


class CryptoPlugin:
    @hookimpl
    def provide_commands(self) -> list[Command]:
        return [crypto]

    @hookimpl
    def provide_aliases(self) -> dict[str, str]:
        return {"btc": "crypto btc", "eth": "crypto eth"}


BUILTIN_PLUGINS = (
    ("weather", "1.0.0", WeatherPlugin),
    ("crypto", "1.0.0", CryptoPlugin),
)


def load_builtin_plugins(host: PluginHost, *, disabled: Iterable[str] = ()) -> None:
    disabled_names = set(disabled)
    for name, version, factory in BUILTIN_PLUGINS:
        host.add(factory(), name=name, version=version, enabled=name not in disabled_names)
