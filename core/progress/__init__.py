"""
Progress - external progress store adapters.

Quick start:
    from core import progress

    service = progress.build_progress_service()
    snapshot = progress.fetch_due_snapshot(service, "practice-quiz-fragen", user_id)
    progress.record_answer_safely(service, user_id, outcome.record)
"""

from core.progress.service import (
    DatabaseProgressService,
    HttpProgressService,
    NullProgressService,
    ProgressService,
    build_progress_service,
    fetch_due_snapshot,
    record_answer_safely,
    target_from_accuracy,
)

__all__ = [
    "DatabaseProgressService",
    "HttpProgressService",
    "NullProgressService",
    "ProgressService",
    "build_progress_service",
    "fetch_due_snapshot",
    "record_answer_safely",
    "target_from_accuracy",
]
