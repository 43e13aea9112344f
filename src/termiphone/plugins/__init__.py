"""Plugin support."""

from .hookspecs import HOOK_NAMESPACE, hookimpl, hookspec
from .host import PluginHost, PluginInfo

__all__ = ["HOOK_NAMESPACE", "PluginHost", "PluginInfo", "hookimpl", "hookspec"]
