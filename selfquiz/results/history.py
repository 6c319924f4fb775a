from __future__ import annotations

"""Process-lifetime attempt history.

Append-only; nothing is written to disk and nothing is ever removed.
"""

from typing import List, Optional, Tuple

from .schema import Attempt


class History:
    def __init__(self) -> None:
        self._attempts: List[Attempt] = []

    def append(self, attempt: Attempt) -> None:
        self._attempts.append(attempt)

    def latest(self) -> Optional[Attempt]:
        return self._attempts[-1] if self._attempts else None

    def snapshot(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    def __len__(self) -> int:
        return len(self._attempts)

