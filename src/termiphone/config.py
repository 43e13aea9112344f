"""Configuration management for termiphone."""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_ALIASES = {
    "cls": "clear",
    "q": "exit",
    "h": "help",
}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TERMIPHONE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shell
    prompt: str = Field(default="$ ", description="Prompt shown before each input line")
    user: str = Field(default="user@phone", description="Identity reported by whoami")
    welcome: str = Field(
        default="TermiPhone v1.0 - type 'help' for available commands",
        description="Banner printed when the interactive shell starts",
    )

    # Registry
    aliases: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ALIASES), description="Startup aliases")
    disabled_plugins: list[str] = Field(default_factory=list, description="Plugins loaded in disabled state")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from the environment and an optional dotenv file.

    Args:
        env_file: Dotenv file overriding the default ``.env`` lookup

    Returns:
        Settings instance

    Raises:
        ConfigurationError: When a value fails validation
    """
    try:
        if env_file is not None:
            return Settings(_env_file=env_file)
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
