from __future__ import annotations

"""Session Engine: the quiz state machine.

The engine owns the live session and the attempt history. A presentation
layer sends it intents (start, reveal, mark correct/wrong, finalize, return
to start) and renders `view()` after each one; it keeps no state of its own.

Mode is a tagged variant rather than a set of flags:

    Idle                  no session; initial state and after return_to_start
    Active(SessionState)  a session is being graded
    Finished(Attempt)     the session was archived; its Attempt is on display
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from ..quiz.question import Question
from ..results.history import History
from ..results.schema import Attempt
from ..util.randomness import make_rng, shuffled
from . import events
from .events import EventBus


class Mode(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


class InvalidTransition(Exception):
    """An intent was issued in a mode that does not accept it."""

    def __init__(self, operation: str, mode: Mode, reason: str = "") -> None:
        self.operation = operation
        self.mode = mode
        self.reason = reason
        msg = f"{operation}() is not valid while {mode.value}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


@dataclass
class SessionState:
    order: Tuple[Question, ...]
    position: int = 0
    revealed: bool = False
    correct_count: int = 0
    missed: List[Question] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def current(self) -> Optional[Question]:
        if 0 <= self.position < len(self.order):
            return self.order[self.position]
        return None

    @property
    def graded(self) -> int:
        return self.correct_count + len(self.missed)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Active:
    session: SessionState


@dataclass(frozen=True)
class Finished:
    attempt: Attempt


State = Union[Idle, Active, Finished]


@dataclass(frozen=True)
class QuizView:
    """Read-only snapshot handed to the presentation layer."""

    mode: Mode
    current_question: Optional[Question]
    position: int
    total: int
    revealed: bool
    latest_attempt: Optional[Attempt]
    history: Tuple[Attempt, ...]


class SessionEngine:
    def __init__(self, rng: Optional[random.Random] = None, bus: Optional[EventBus] = None) -> None:
        self._rng = rng or make_rng()
        self.bus = bus or EventBus()
        self._state: State = Idle()
        self._history = History()

    # --- derived state ---

    @property
    def mode(self) -> Mode:
        if isinstance(self._state, Active):
            return Mode.ACTIVE
        if isinstance(self._state, Finished):
            return Mode.FINISHED
        return Mode.IDLE

    def _active(self, operation: str) -> SessionState:
        if not isinstance(self._state, Active):
            raise InvalidTransition(operation, self.mode)
        return self._state.session

    # --- transitions ---

    def start_session(self, bank: Iterable[Question]) -> None:
        if isinstance(self._state, Active):
            raise InvalidTransition("start_session", self.mode, "finalize the running session first")
        order = tuple(shuffled(list(bank), self._rng))
        self._state = Active(SessionState(order=order))
        self.bus.emit(events.SESSION_STARTED, {"questions": len(order)})

    def reveal(self) -> None:
        s = self._active("reveal")
        q = s.current()
        if q is None:
            raise InvalidTransition("reveal", self.mode, "no current question")
        if s.revealed:
            return
        s.revealed = True
        self.bus.emit(events.REVEALED, {"position": s.position, "id": q.id})

    def mark_correct(self) -> Optional[Attempt]:
        s = self._gradable("mark_correct")
        s.correct_count += 1
        return self._advance(s, correct=True)

    def mark_wrong(self) -> Optional[Attempt]:
        s = self._gradable("mark_wrong")
        q = s.current()
        assert q is not None
        s.missed.append(q)
        return self._advance(s, correct=False)

    def _gradable(self, operation: str) -> SessionState:
        s = self._active(operation)
        if s.current() is None:
            raise InvalidTransition(operation, self.mode, "no current question")
        if not s.revealed:
            raise InvalidTransition(operation, self.mode, "reveal the answer first")
        return s

    def _advance(self, s: SessionState, *, correct: bool) -> Optional[Attempt]:
        q = s.current()
        self.bus.emit(
            events.GRADED,
            {"position": s.position, "id": q.id if q else None, "correct": correct},
        )
        s.revealed = False
        s.position += 1
        if s.position >= len(s.order):
            return self.finalize()
        return None

    def finalize(self) -> Optional[Attempt]:
        """Archive the running session and move to Finished.

        With no running session this is a no-op returning the latest attempt
        (None if there has never been one).
        """
        if not isinstance(self._state, Active):
            return self.latest_attempt()
        s = self._state.session
        attempt = Attempt(
            total_questions=s.graded,
            correct_count=s.correct_count,
            missed_questions=tuple(s.missed),
            question_count=len(s.order),
            started_at=s.started_at,
            finished_at=datetime.now(timezone.utc),
        )
        self._history.append(attempt)
        self._state = Finished(attempt)
        self.bus.emit(
            events.SESSION_FINALIZED,
            {
                "total": attempt.total_questions,
                "correct": attempt.correct_count,
                "missed": attempt.wrong_count,
                "ended_early": attempt.ended_early,
            },
        )
        return attempt

    def return_to_start(self) -> None:
        if not isinstance(self._state, Finished):
            raise InvalidTransition("return_to_start", self.mode)
        self._state = Idle()
        self.bus.emit(events.RETURNED_TO_START, {"attempts": len(self._history)})

    # --- reads ---

    def current_question(self) -> Optional[Question]:
        if isinstance(self._state, Active):
            return self._state.session.current()
        return None

    def latest_attempt(self) -> Optional[Attempt]:
        return self._history.latest()

    def history(self) -> Tuple[Attempt, ...]:
        return self._history.snapshot()

    def view(self) -> QuizView:
        position, total, revealed = 0, 0, False
        if isinstance(self._state, Active):
            s = self._state.session
            position, total, revealed = s.position, len(s.order), s.revealed
        return QuizView(
            mode=self.mode,
            current_question=self.current_question(),
            position=position,
            total=total,
            revealed=revealed,
            latest_attempt=self.latest_attempt(),
            history=self.history(),
        )
