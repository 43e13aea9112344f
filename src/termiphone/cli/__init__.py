"""Command-line front end."""

from .app import app
from .interactive import InteractiveShell
from .render import CommandCompleter, Renderer

__all__ = ["CommandCompleter", "InteractiveShell", "Renderer", "app"]
