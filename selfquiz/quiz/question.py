from __future__ import annotations

"""Question record shown to the user during a session."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


QuestionId = Union[int, str]


@dataclass(frozen=True, eq=False)
class Question:
    """Immutable prompt plus its accepted answers.

    `id` is only a display tag: bundled banks contain entries without one and
    entries sharing one, so equality is identity and nothing keys on `id`.
    """

    id: Optional[QuestionId]
    prompt: str
    accepted_answers: Tuple[str, ...]

    @property
    def label(self) -> str:
        return f"#{self.id}" if self.id is not None else "#?"

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "question": self.prompt, "answers": list(self.accepted_answers)}

