"""Unit tests for configuration."""

import logging

from placelens import logging_config
from placelens.config import Settings


def test_default_settings(monkeypatch):
    """Test that default settings are loaded correctly."""
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_name == "PlaceLens"
    assert settings.debug is False
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.place_extraction_temperature == 0.1
    assert settings.location_temperature == 0.2
    assert settings.link_summary_temperature == 0.5


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    settings = Settings(_env_file=None)

    assert settings.app_name == "TestApp"
    assert settings.debug is True
    assert settings.api_port == 9000
    assert settings.openai_api_key == "sk-test"


def test_configure_logging_runs_once(monkeypatch):
    monkeypatch.setattr(logging_config, "_configured", False)
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    previous_level = root_logger.level

    try:
        logging_config.configure_logging("debug")
        logging_config.configure_logging("debug")

        added = [h for h in root_logger.handlers if h not in before]
        assert len(added) == 1
        assert root_logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root_logger.setLevel(previous_level)
        for handler in root_logger.handlers[:]:
            if handler not in before:
                root_logger.removeHandler(handler)
