from __future__ import annotations

"""Session scoring and plain-text summaries."""

from typing import Iterable, List

from ..quiz.question import Question
from ..results.schema import Attempt


def format_question(q: Question, position: int, total: int) -> str:
    """Header line plus prompt for the quiz screen."""
    return f"Question {position + 1} of {total}:\n{q.prompt}"


def format_answers(q: Question, numbered: bool = True) -> str:
    lines = ["Valid answers:"]
    for i, a in enumerate(q.accepted_answers, start=1):
        lines.append(f"  {i}. {a}" if numbered else f"  - {a}")
    return "\n".join(lines)


def format_summary(attempt: Attempt) -> str:
    """Return a human-readable summary of one attempt."""
    lines = [f"You scored {attempt.correct_count} out of {attempt.total_questions}."]
    if attempt.ended_early:
        lines.append(f"Ended early: {attempt.total_questions} of {attempt.question_count} questions graded.")
    lines.append("Incorrectly Answered Questions:")
    if not attempt.missed_questions:
        lines.append("  All correct!")
    for q in attempt.missed_questions:
        lines.append(f"  - {q.prompt}")
    return "\n".join(lines)


def format_history(attempts: Iterable[Attempt]) -> str:
    lines: List[str] = ["Previous Attempts:"]
    n = 0
    for n, att in enumerate(attempts, start=1):
        lines.append(f"  Attempt {n}: {att.correct_count} / {att.total_questions} correct ({att.percent}%)")
    if n == 0:
        lines.append("  (none yet)")
    return "\n".join(lines)
