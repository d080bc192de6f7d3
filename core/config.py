"""
Environment configuration.

All settings come from environment variables (optionally from a .env file).
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from core.practice.constants import QUIZ_SESSION_SIZE

# Load environment
load_dotenv()


def get_database_url() -> Optional[str]:
    """
    Postgres connection string for the progress store, if configured.

    Uses TEST_MODE env var to determine which database to connect to.
    For test mode, replaces 'sales_trainer' with 'test_sales_trainer'
    in the connection string.
    """
    base_url = os.getenv("DATABASE_URL")
    if not base_url:
        return None
    if is_test_mode():
        return base_url.replace("sales_trainer", "test_sales_trainer")
    return base_url


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_progress_api_url() -> Optional[str]:
    """Base URL of the remote progress service, if configured."""
    url = os.getenv("PROGRESS_API_URL")
    return url.rstrip("/") if url else None


def get_progress_api_token() -> Optional[str]:
    return os.getenv("PROGRESS_API_TOKEN") or None


def get_progress_api_timeout() -> float:
    """Request timeout (seconds) for the progress service."""
    return float(os.getenv("PROGRESS_API_TIMEOUT", "5"))


def get_default_user_id() -> str:
    """Get default user id for scoping progress data."""
    return os.getenv("DEFAULT_USER_ID", "demo")


def get_quiz_session_size() -> int:
    return int(os.getenv("QUIZ_SESSION_SIZE", str(QUIZ_SESSION_SIZE)))


def get_practice_bank_path() -> Optional[str]:
    return os.getenv("PRACTICE_BANK_PATH") or None


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
