"""
Progress Services - Due Items and Answer Recording

The practice engine talks to exactly two external contracts:
1. get_due_snapshot(module_id, user_id): due question ids + target difficulty hint
2. record_answer(user_id, record): fire-and-forget answer sink

Implementations:
- HttpProgressService: remote progress API (httpx)
- DatabaseProgressService: local SQLAlchemy store (Postgres)
- NullProgressService: demo mode, nothing configured

fetch_due_snapshot() and record_answer_safely() wrap any of them so that a
failing service never blocks or breaks a practice session.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from core import config
from core.practice.constants import Difficulty
from core.practice.items import AnswerRecord, DueSnapshot, default_snapshot
from core.practice.performance import compute_performance_percent
from core.practice.quality import is_failed_quality
from core.progress import database
from core.schemas import DueItemsResponse


logger = logging.getLogger(__name__)

# ---- Difficulty Hint Thresholds ----
HINT_HARD_PERCENT = 80  # module accuracy >= this -> start at Hard
HINT_EASY_PERCENT = 50  # module accuracy < this -> start at Easy

DUE_ITEMS_PATH = "/api/practice/due"
ANSWER_PATH = "/api/insights/answer"


class ProgressService(Protocol):
    """Contract of the external progress store."""

    def get_due_snapshot(self, module_id: str, user_id: str) -> DueSnapshot:
        ...

    def record_answer(self, user_id: str, record: AnswerRecord) -> None:
        ...


def target_from_accuracy(percentage: Optional[int]) -> Difficulty:
    """
    Starting difficulty hint from a module's historical accuracy.

    No history -> Medium.
    """
    if percentage is None:
        return Difficulty.MEDIUM
    if percentage >= HINT_HARD_PERCENT:
        return Difficulty.HARD
    if percentage < HINT_EASY_PERCENT:
        return Difficulty.EASY
    return Difficulty.MEDIUM


# ---- Implementations ----

class NullProgressService:
    """
    Demo mode: no progress store configured.
    """

    def get_due_snapshot(self, module_id: str, user_id: str) -> DueSnapshot:
        return default_snapshot()

    def record_answer(self, user_id: str, record: AnswerRecord) -> None:
        logger.debug("Demo mode, answer not stored: %s", record)


class DatabaseProgressService:
    """
    Progress store backed by the local SQLAlchemy database.

    Due rule: a question is due when its most recent answer failed
    (quality <= 2). A later successful answer takes it out again.
    """

    def get_due_snapshot(self, module_id: str, user_id: str) -> DueSnapshot:
        latest = database.get_latest_quality_by_question(user_id, module_id)
        due_ids = frozenset(
            question_id
            for question_id, quality in latest.items()
            if is_failed_quality(quality)
        )

        stats = database.get_module_stats(user_id, module_id)
        percentage = None
        if stats and stats[0]["total_answers"] > 0:
            percentage = compute_performance_percent(
                stats[0]["correct_answers"],
                stats[0]["total_answers"],
            )

        return DueSnapshot(due_ids=due_ids, target_difficulty=target_from_accuracy(percentage))

    def record_answer(self, user_id: str, record: AnswerRecord) -> None:
        database.log_answer(user_id, record, session_id=record.session_id)


class HttpProgressService:
    """
    Client for a remote progress API.

    GET  {base}/api/practice/due?moduleId=..&userId=..
         -> {"dueItems": [int], "targetDifficulty": "Easy|Medium|Hard"}
    POST {base}/api/insights/answer
         <- {"moduleId", "questionId", "correct", "quality"}
    """

    def __init__(
        self,
        base_url: str,
        api_token: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        headers = {"Content-Type": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def get_due_snapshot(self, module_id: str, user_id: str) -> DueSnapshot:
        response = self._client.get(
            DUE_ITEMS_PATH,
            params={"moduleId": module_id, "userId": user_id},
        )
        response.raise_for_status()
        payload = DueItemsResponse.model_validate(response.json())
        return DueSnapshot(
            due_ids=frozenset(payload.due_items),
            target_difficulty=payload.target_difficulty,
        )

    def record_answer(self, user_id: str, record: AnswerRecord) -> None:
        body = record.to_payload()
        body["userId"] = user_id
        response = self._client.post(ANSWER_PATH, json=body)
        response.raise_for_status()

    def close(self) -> None:
        self._client.close()


# ---- Fallback Wrappers ----

def fetch_due_snapshot(
    service: Optional[ProgressService],
    module_id: str,
    user_id: Optional[str]
) -> DueSnapshot:
    """
    Ask the progress service for due items, falling back to the defaults.

    Without a user (not signed in), without a service, or on any failure the
    session runs on the full bank at Medium with no due items.
    """
    if service is None or not user_id:
        return default_snapshot()
    try:
        return service.get_due_snapshot(module_id, user_id)
    except Exception as exc:
        logger.warning(
            "Due items unavailable for %s (%s: %s), using full bank",
            module_id,
            type(exc).__name__,
            exc,
        )
        return default_snapshot()


def record_answer_safely(
    service: Optional[ProgressService],
    user_id: Optional[str],
    record: AnswerRecord
) -> bool:
    """
    Forward an answer to the sink; failures are logged and ignored.

    Returns:
        True if the service accepted the answer
    """
    if service is None or not user_id:
        return False
    try:
        service.record_answer(user_id, record)
        return True
    except Exception as exc:
        logger.warning(
            "Could not record answer %s/%s (%s: %s)",
            record.module_id,
            record.question_id,
            type(exc).__name__,
            exc,
        )
        return False


def build_progress_service() -> ProgressService:
    """
    Pick the progress service from the environment.

    PROGRESS_API_URL wins over DATABASE_URL; with neither set the trainer
    runs in demo mode.
    """
    api_url = config.get_progress_api_url()
    if api_url:
        logger.info("Using remote progress service at %s", api_url)
        return HttpProgressService(
            api_url,
            api_token=config.get_progress_api_token(),
            timeout=config.get_progress_api_timeout(),
        )

    if config.get_database_url():
        try:
            database.init_db()
        except Exception as exc:
            logger.warning(
                "Progress database unavailable (%s: %s), running in demo mode",
                type(exc).__name__,
                exc,
            )
            return NullProgressService()
        logger.info("Using database progress store")
        return DatabaseProgressService()

    logger.info("No progress store configured, running in demo mode")
    return NullProgressService()
