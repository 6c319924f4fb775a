from __future__ import annotations

"""Explain Mode: one-line JSON traces of session transitions.

Off by default; turned on by `run --explain` or `explain.enabled` in config.
Lines look like `[EXPLAIN] graded :: {"position":0,"id":3,"correct":true}`.
"""

import json
import sys
from typing import Any, Dict, TextIO

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None, stream: TextIO | None = None) -> None:
    if not _ENABLED:
        return
    out = stream or sys.stdout
    try:
        line = f"[EXPLAIN] {event} :: {json.dumps(payload or {}, separators=(',', ':'), default=str)}"
    except (TypeError, ValueError):
        line = f"[EXPLAIN] {event}"
    print(line, file=out)


def attach(bus) -> None:
    """Trace every session event published on `bus`."""
    from .events import ALL_EVENTS

    for name in ALL_EVENTS:
        bus.subscribe(name, lambda payload, _n=name: trace(_n, payload))
