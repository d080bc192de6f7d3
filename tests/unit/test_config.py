"""
Unit Tests for Configuration and Logging Helpers
"""

import logging

import pytest

from core import config
from core.logger import ColoredFormatter


class TestConfig:
    """Test suite for environment getters."""

    def test_database_url_unset(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert config.get_database_url() is None

    def test_test_mode_switches_database(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/sales_trainer")
        monkeypatch.setenv("TEST_MODE", "true")
        assert config.get_database_url() == "postgresql://user:pw@db:5432/test_sales_trainer"

        monkeypatch.setenv("TEST_MODE", "false")
        assert config.get_database_url() == "postgresql://user:pw@db:5432/sales_trainer"

    def test_progress_api_settings(self, monkeypatch):
        monkeypatch.setenv("PROGRESS_API_URL", "https://trainer.example.com/")
        monkeypatch.setenv("PROGRESS_API_TIMEOUT", "2.5")
        monkeypatch.setenv("PROGRESS_API_TOKEN", "")
        assert config.get_progress_api_url() == "https://trainer.example.com"
        assert config.get_progress_api_timeout() == 2.5
        assert config.get_progress_api_token() is None

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_USER_ID", "QUIZ_SESSION_SIZE", "LOG_LEVEL", "PROGRESS_API_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_default_user_id() == "demo"
        assert config.get_quiz_session_size() == 15
        assert config.get_log_level() == "INFO"
        assert config.get_progress_api_timeout() == 5.0

    def test_session_size_override(self, monkeypatch):
        monkeypatch.setenv("QUIZ_SESSION_SIZE", "8")
        assert config.get_quiz_session_size() == 8


class TestColoredFormatter:
    """Test suite for the console log formatter."""

    @pytest.fixture
    def record(self):
        return logging.LogRecord(
            name="core.practice_session",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Quiz %s difficulty changed",
            args=("practice-quiz-fragen",),
            exc_info=None,
        )

    def test_plain_output(self, record):
        line = ColoredFormatter(use_colors=False).format(record)
        assert "WARNING" in line
        assert "core.practice_session" in line
        assert line.endswith("| Quiz practice-quiz-fragen difficulty changed")
        assert "\033[" not in line
