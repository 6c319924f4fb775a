"""selfquiz package initialization.

Re-exports the session engine and the records it works with so callers can
simply `from selfquiz import SessionEngine, load_bank`.
"""

from __future__ import annotations

from .app.session_engine import InvalidTransition, Mode, QuizView, SessionEngine
from .bank.loader import QuestionBank, load_bank
from .quiz.question import Question
from .results.schema import Attempt

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Attempt",
    "InvalidTransition",
    "Mode",
    "Question",
    "QuestionBank",
    "QuizView",
    "SessionEngine",
    "load_bank",
]
