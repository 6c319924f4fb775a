from __future__ import annotations

"""Attempt record archived when a session is finalized."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..quiz.question import Question


@dataclass(frozen=True)
class Attempt:
    """Summary of one finished session.

    `total_questions` counts graded questions only, so
    `correct_count + len(missed_questions) == total_questions` holds even when
    the session was finalized early. `question_count` keeps the session length.
    """

    total_questions: int
    correct_count: int
    missed_questions: Tuple[Question, ...] = ()
    question_count: int = 0
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def wrong_count(self) -> int:
        return len(self.missed_questions)

    @property
    def ended_early(self) -> bool:
        return self.total_questions < self.question_count

    @property
    def percent(self) -> int:
        if self.total_questions <= 0:
            return 0
        return int(100 * self.correct_count / self.total_questions)

    def to_json(self) -> Dict[str, Any]:
        return {
            "total_questions": self.total_questions,
            "correct_count": self.correct_count,
            "missed_questions": [q.to_json() for q in self.missed_questions],
            "question_count": self.question_count,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
        }
