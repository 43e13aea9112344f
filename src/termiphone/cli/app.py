"""CLI entry points for termiphone."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from termiphone.app import ShellSession, build_session
from termiphone.config import load_settings
from termiphone.errors import ConfigurationError
from termiphone.logging_utils import LogProfile, configure_logging

from .interactive import InteractiveShell

app = typer.Typer(
    name="termiphone",
    help="Terminal-style command shell.",
    add_completion=False,
)


def _session(env_file: Path | None, *, profile: LogProfile = "default") -> ShellSession:
    try:
        settings = load_settings(env_file)
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(2) from exc
    configure_logging(profile=profile, level=settings.log_level)
    return build_session(settings)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    env_file: Path | None = typer.Option(None, "--env-file", help="Dotenv file with TERMIPHONE_ settings"),  # noqa: B008
) -> None:
    ctx.obj = env_file
    if ctx.invoked_subcommand is None:
        shell(ctx)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Start the interactive shell."""

    session = _session(ctx.obj, profile="shell")
    asyncio.run(InteractiveShell(session).run())


@app.command()
def run(
    ctx: typer.Context,
    lines: list[str] = typer.Argument(..., help="Command lines to execute in order"),  # noqa: B008
) -> None:
    """Execute command lines and print their output."""

    session = _session(ctx.obj)
    failed = asyncio.run(_run_lines(session, lines))
    if failed:
        raise typer.Exit(1)


async def _run_lines(session: ShellSession, lines: list[str]) -> bool:
    failed = False
    for line in lines:
        result = await session.handle_input(line)
        if result.error is not None:
            typer.echo(f"error: {result.error}", err=True)
            failed = True
        elif result.output:
            typer.echo(result.output)
        if session.exit_requested:
            break
    return failed


@app.command()
def commands(ctx: typer.Context) -> None:
    """List command and alias names."""

    session = _session(ctx.obj)
    for name in session.executor.router.get_command_names():
        typer.echo(name)
