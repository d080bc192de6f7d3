"""Exceptions raised by the practice engine."""


class PracticeError(Exception):
    """Base class for practice engine errors."""


class PracticeSessionError(PracticeError):
    """Invalid use of a running practice session (e.g. answering twice)."""
