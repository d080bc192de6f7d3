"""
Pydantic models for the practice bank file and progress-service payloads.

The bank file is a JSON document with quiz topics and a flashcard deck.
Items are identified by their index within their list, so entries must
never be reordered once learners have progress recorded against them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from core.practice.constants import Difficulty, parse_difficulty


# ---- Bank Entries ----

class OptionEntry(BaseModel):
    """One answer option of a quiz question."""
    text: str
    correct: bool = False
    feedback: Optional[str] = None


class QuestionEntry(BaseModel):
    """A quiz question as stored in the bank file."""
    question: str
    options: list[OptionEntry] = Field(..., min_length=2)
    feedback: str = ""
    difficulty: Difficulty = Difficulty.MEDIUM

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value):
        return parse_difficulty(value)

    @model_validator(mode="after")
    def _has_correct_option(self):
        if not any(option.correct for option in self.options):
            raise ValueError(f"Question has no correct option: {self.question!r}")
        return self


class FlashcardEntry(BaseModel):
    """A flashcard (front/back) as stored in the bank file."""
    front: str
    back: str
    difficulty: Difficulty = Difficulty.MEDIUM

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value):
        return parse_difficulty(value)


class QuizTopic(BaseModel):
    """A named quiz topic bound to a practice module id."""
    module_id: str
    title: str
    questions: list[QuestionEntry] = Field(default_factory=list)


class PracticeBankFile(BaseModel):
    """Top-level bank document."""
    quiz_topics: dict[str, QuizTopic] = Field(default_factory=dict)
    flashcards: list[FlashcardEntry] = Field(default_factory=list)


# ---- Progress Service Payloads ----

class DueItemsResponse(BaseModel):
    """Response of the remote progress service's due-items endpoint."""
    due_items: list[int] = Field(default_factory=list, alias="dueItems")
    target_difficulty: Difficulty = Field(Difficulty.MEDIUM, alias="targetDifficulty")

    @field_validator("target_difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value):
        if value is None:
            return Difficulty.MEDIUM
        return parse_difficulty(value)
