from __future__ import annotations

from typing import List

from fastapi import APIRouter

from catalog import get_all
from schemas.questions import QuestionRecord

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[QuestionRecord])
def list_questions():
    # full catalog, source order; serialized with the correctAnswer alias
    return get_all()
