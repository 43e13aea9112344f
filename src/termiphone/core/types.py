"""Shared core dataclasses and the command contract."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable

FlagValue: TypeAlias = str | bool

CLEAR_SCREEN = "\x1b[2J\x1b[H"


@dataclass(frozen=True)
class ParsedCommand:
    """Structured form of one input line."""

    command: str
    args: list[str] = field(default_factory=list)
    flags: dict[str, FlagValue] = field(default_factory=dict)
    raw: str = field(default="", compare=False)

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def flag(self, name: str, default: FlagValue | None = None) -> FlagValue | None:
        return self.flags.get(name, default)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of routing one parsed command."""

    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class Command(Protocol):
    """A named, asynchronous, string-producing unit of work.

    Implementations may also expose ``flags``, a set of recognized flag
    spellings used for help output only.
    """

    name: str
    description: str

    async def execute(self, invocation: ParsedCommand) -> str: ...


CommandHandler: TypeAlias = Callable[[ParsedCommand], Awaitable[str]]


def command_flags(target: Command) -> frozenset[str]:
    return frozenset(getattr(target, "flags", None) or ())


@dataclass(frozen=True)
class FunctionCommand:
    """Command backed by a plain async callable."""

    name: str
    description: str
    handler: CommandHandler
    flags: frozenset[str] = frozenset()

    async def execute(self, invocation: ParsedCommand) -> str:
        return await self.handler(invocation)


def command(
    name: str,
    description: str,
    *,
    flags: frozenset[str] | set[str] | None = None,
) -> Callable[[CommandHandler], FunctionCommand]:
    """Decorate an async handler into a ``FunctionCommand``."""

    def decorator(handler: CommandHandler) -> FunctionCommand:
        return FunctionCommand(
            name=name,
            description=description,
            handler=handler,
            flags=frozenset(flags or ()),
        )

    return decorator
