"""Tests for card store settings."""

import logging
from unittest.mock import patch

from cardstore.config import Settings, configure_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    config = Settings(_env_file=None)
    assert config.database_url == "sqlite:///./cards.db"
    assert config.database_echo is False
    assert config.lock_timeout_ms == 5000
    assert config.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/cards")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = Settings(_env_file=None)
    assert config.database_url == "postgresql://u:p@db:5432/cards"
    assert config.log_level == "debug"


def test_configure_logging_uses_level():
    with patch("cardstore.config.logging.basicConfig") as basic_config:
        configure_logging(Settings(_env_file=None, log_level="warning"))
    assert basic_config.call_args.kwargs["level"] == logging.WARNING
