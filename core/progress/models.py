"""
SQLAlchemy ORM Models for the Progress Store

Defines AnswerEvent and ModuleQuestionStats models for Postgres persistence.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AnswerEvent(Base):
    """
    Log entry for a single answered quiz question or rated flashcard.
    """
    __tablename__ = 'answer_events'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # User scope and item identifiers
    user_id = Column(String(255), nullable=False, index=True)
    module_id = Column(String(100), nullable=False)
    question_id = Column(Integer, nullable=False)  # Index into the static bank

    # Outcome
    correct = Column(Boolean, nullable=False)
    quality = Column(Integer, nullable=False)  # 0-5, see core.practice.quality
    timestamp = Column(DateTime(timezone=True), nullable=False)

    # Session context (optional, for analytics)
    session_id = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<AnswerEvent(id={self.id}, {self.module_id}/{self.question_id}, quality={self.quality})>"


class ModuleQuestionStats(Base):
    """
    Running correct/total answer counts per user and practice module.
    """
    __tablename__ = 'module_question_stats'

    user_id = Column(String(255), primary_key=True, nullable=False)
    module_id = Column(String(100), primary_key=True, nullable=False)

    correct_answers = Column(Integer, nullable=False, default=0)
    total_answers = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<ModuleQuestionStats({self.user_id}, {self.module_id}, {self.correct_answers}/{self.total_answers})>"
