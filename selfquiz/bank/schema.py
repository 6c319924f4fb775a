from __future__ import annotations

"""Pydantic models for question bank documents."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..quiz.question import Question


class QuestionRecord(BaseModel):
    # ids are display tags; missing and repeated ids occur in real banks
    id: Optional[Union[int, str]] = None
    question: str = Field(min_length=1)
    answers: List[str] = Field(min_length=1)

    @field_validator("question")
    @classmethod
    def _non_blank_question(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("question must not be blank")
        return v

    @field_validator("answers")
    @classmethod
    def _non_blank_answers(cls, v: List[str]) -> List[str]:
        cleaned = [a.strip() for a in v]
        if not all(cleaned):
            raise ValueError("answers must not contain blank entries")
        return cleaned

    def to_question(self) -> Question:
        return Question(id=self.id, prompt=self.question, accepted_answers=tuple(self.answers))


class BankDocument(BaseModel):
    version: int = 1
    name: str = ""
    questions: List[QuestionRecord] = Field(default_factory=list)
