"""
Settings and logging setup tests.
"""

import logging

from todo_api.core.config import Settings
from todo_api.core.logging import LOGGER_NAME, configure_logging


def test_defaults(test_settings):
    settings = Settings(_env_file=None)
    assert settings.APP_NAME == "Todo-API"
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.SEED_PATH is None


def test_env_overrides(test_settings, monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.PORT == 9090
    assert settings.ENV == "prod"
    assert settings.LOG_LEVEL == "DEBUG"


def test_configure_logging_is_idempotent():
    configure_logging("DEBUG")
    logger = configure_logging("WARNING")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.WARNING
    assert len([h for h in logger.handlers if h.get_name() == LOGGER_NAME]) == 1
