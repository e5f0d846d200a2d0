import pytest

from setterkit.infrastructure.capabilities.config import Config


def test_defaults_are_valid():
    Config.validate()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")
    with pytest.raises(ValueError, match="SETTERKIT_LOG_LEVEL"):
        Config.validate()


def test_invalid_theme(monkeypatch):
    monkeypatch.setattr(Config, "CLI_THEME", "neon")
    with pytest.raises(ValueError, match="SETTERKIT_CLI_THEME"):
        Config.validate()
