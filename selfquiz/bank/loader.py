from __future__ import annotations

"""Question bank loader (YAML).

Banks are versioned, human-friendly YAML documents. Bundled banks live in
`selfquiz/resources/banks`; any other path on disk can be loaded directly.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..quiz.question import Question
from .schema import BankDocument


@dataclass(frozen=True)
class QuestionBank:
    name: str
    questions: Tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)


def _banks_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "resources" / "banks"


def bank_path(name_or_path: str) -> Path:
    """Resolve a bundled bank name or a filesystem path to a YAML file."""
    p = Path(name_or_path)
    if p.suffix in (".yml", ".yaml") and p.exists():
        return p
    bundled = _banks_dir() / f"{name_or_path}.yml"
    if bundled.exists():
        return bundled
    raise KeyError(f"Unknown question bank: {name_or_path}")


def parse_bank(data: Dict[str, Any], default_name: str = "") -> QuestionBank:
    doc = BankDocument.model_validate(data or {})
    return QuestionBank(
        name=doc.name or default_name,
        questions=tuple(r.to_question() for r in doc.questions),
    )


def load_bank(name_or_path: str = "civics") -> QuestionBank:
    p = bank_path(name_or_path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return parse_bank(data, default_name=p.stem)


def list_banks() -> List[Dict[str, Any]]:
    items = []
    for p in sorted(_banks_dir().glob("*.yml")):
        bank = load_bank(str(p))
        items.append({"id": p.stem, "name": bank.name, "questions": len(bank)})
    return items
