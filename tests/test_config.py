"""
Tests for environment-driven settings
"""

import pytest

from catalog_service.config import DEFAULT_GREETING, Settings


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 5000
    assert settings.DEBUG is False
    assert settings.GREETING == DEFAULT_GREETING
    assert settings.LOG_LEVEL == "INFO"


def test_values_from_environment():
    settings = Settings.from_env({
        "HOST": "127.0.0.1",
        "PORT": "8000",
        "FLASK_DEBUG": "True",
        "CATALOG_GREETING": "hi",
        "LOG_LEVEL": "debug",
    })
    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 8000
    assert settings.DEBUG is True
    assert settings.GREETING == "hi"
    assert settings.LOG_LEVEL == "DEBUG"


def test_invalid_port_raises():
    with pytest.raises(ValueError, match="PORT"):
        Settings.from_env({"PORT": "eighty"})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8123")
    assert Settings.from_env().PORT == 8123
