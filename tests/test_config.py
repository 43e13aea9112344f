from pathlib import Path

import pytest

from termiphone.config import DEFAULT_ALIASES, load_settings
from termiphone.errors import ConfigurationError


def test_defaults() -> None:
    settings = load_settings()
    assert settings.prompt == "$ "
    assert settings.user == "user@phone"
    assert settings.aliases == DEFAULT_ALIASES
    assert settings.disabled_plugins == []
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMIPHONE_USER", "me@phone")
    monkeypatch.setenv("TERMIPHONE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMIPHONE_ALIASES", '{"mom": "call -u mom"}')
    monkeypatch.setenv("TERMIPHONE_DISABLED_PLUGINS", '["crypto"]')
    settings = load_settings()
    assert settings.user == "me@phone"
    assert settings.log_level == "DEBUG"
    assert settings.aliases == {"mom": "call -u mom"}
    assert settings.disabled_plugins == ["crypto"]


def test_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("TERMIPHONE_PROMPT='> '\n", encoding="utf-8")
    assert load_settings(env_file).prompt == "> "


def test_invalid_log_level_raises_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMIPHONE_LOG_LEVEL", "loud")
    with pytest.raises(ConfigurationError):
        load_settings()
