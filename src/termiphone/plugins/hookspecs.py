"""Pluggy hook namespace and plugin hook specifications."""

from __future__ import annotations

import pluggy

from termiphone.core.types import Command

HOOK_NAMESPACE = "termiphone"
hookspec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(HOOK_NAMESPACE)


class TermiphoneHookSpecs:
    """Hook contract for command plugins."""

    @hookspec
    def provide_commands(self) -> list[Command] | None:
        """Return the commands this plugin contributes."""

    @hookspec
    def provide_aliases(self) -> dict[str, str] | None:
        """Return alias name to command line mappings."""
