# schemas/questions.py
from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CorrectAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: int  # 1-based position into QuestionRecord.answers
    answer: str


class QuestionRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    question: str
    answers: Tuple[str, ...]
    correct_answer: CorrectAnswer = Field(alias="correctAnswer")


class CatalogHealth(BaseModel):
    ok: bool
    count: int
    problems: List[str] = []
