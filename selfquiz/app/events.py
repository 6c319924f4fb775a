from __future__ import annotations

"""Tiny pub/sub event bus for session transitions."""

from typing import Any, Callable, Dict, List

from .explain import trace as xtrace

SESSION_STARTED = "session_started"
REVEALED = "revealed"
GRADED = "graded"
SESSION_FINALIZED = "session_finalized"
RETURNED_TO_START = "returned_to_start"

ALL_EVENTS = (SESSION_STARTED, REVEALED, GRADED, SESSION_FINALIZED, RETURNED_TO_START)


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Any) -> None:
        for h in self._subs.get(event, []):
            try:
                h(payload)
            except Exception as exc:
                # a broken subscriber must not undo an engine transition
                xtrace("subscriber_failed", {"event": event, "error": repr(exc)})
