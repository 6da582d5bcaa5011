# catalog.py

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from questions import QUESTIONS
from schemas.questions import QuestionRecord

logger = logging.getLogger("quiz-catalog")

ANSWER_COUNT = 4


class CatalogError(RuntimeError):
    pass


def build_catalog(raw_records: Iterable[Dict[str, Any]]) -> Tuple[QuestionRecord, ...]:
    """
    Validate raw question dicts into immutable records, keeping source order.
    Only the shape is checked here; see find_problems() for data consistency.
    """
    records: List[QuestionRecord] = []
    for pos, raw in enumerate(raw_records, 1):
        try:
            records.append(QuestionRecord.model_validate(raw))
        except ValidationError as e:
            raise CatalogError(f"Question #{pos} is malformed: {e}") from e
    return tuple(records)


def find_problems(records: Sequence[QuestionRecord]) -> List[str]:
    """
    Data-consistency check for authored questions. Returns one message per
    problem; an empty list means the catalog is consistent.
    """
    problems: List[str] = []
    for pos, rec in enumerate(records, 1):
        where = f"question #{pos}"
        if not rec.question.strip():
            problems.append(f"{where}: question text is empty")

        if len(rec.answers) != ANSWER_COUNT:
            problems.append(
                f"{where}: expected {ANSWER_COUNT} answers, found {len(rec.answers)}"
            )
        if any(not a.strip() for a in rec.answers):
            problems.append(f"{where}: contains an empty answer")
        dupes = sorted({a for a in rec.answers if rec.answers.count(a) > 1})
        if dupes:
            problems.append(f"{where}: duplicate answers {dupes}")

        cid = rec.correct_answer.id
        if not 1 <= cid <= len(rec.answers):
            problems.append(f"{where}: correctAnswer.id {cid} is out of range")
            continue
        actual = rec.answers[cid - 1]
        if actual != rec.correct_answer.answer:
            problems.append(
                f"{where}: correctAnswer.id {cid} points at {actual!r}, "
                f"but correctAnswer.answer is {rec.correct_answer.answer!r}"
            )
    return problems


class QuestionCatalog:
    _records: Optional[Tuple[QuestionRecord, ...]] = None
    _lock = threading.Lock()

    @classmethod
    def load(cls) -> Tuple[QuestionRecord, ...]:
        if cls._records is None:
            with cls._lock:
                if cls._records is None:
                    cls._records = build_catalog(QUESTIONS)
                    logger.info("Loaded question catalog: %d records", len(cls._records))
        return cls._records


# Public API
def get_all() -> Tuple[QuestionRecord, ...]:
    return QuestionCatalog.load()
