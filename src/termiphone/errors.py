"""Application-level exception types for termiphone."""

from __future__ import annotations


class TermiphoneError(Exception):
    """Base exception for termiphone."""


class ConfigurationError(TermiphoneError):
    """Raised when settings fail validation at startup."""


class CommandError(TermiphoneError):
    """Raised by a command body to report a failure as an error line."""


class AliasError(TermiphoneError):
    """Raised when an alias cannot be registered."""


class PluginError(TermiphoneError):
    """Raised for unknown or duplicate plugin names."""
