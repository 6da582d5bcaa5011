# routers/health.py
import logging

from fastapi import APIRouter

from catalog import CatalogError, find_problems, get_all
from schemas.questions import CatalogHealth

logger = logging.getLogger("quiz-catalog")

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/catalog", response_model=CatalogHealth)
def health_catalog():
    try:
        records = get_all()
    except CatalogError as e:
        logger.warning("catalog failed to load: %s", e)
        return {"ok": False, "count": 0, "problems": [str(e)]}

    problems = find_problems(records)
    for p in problems:
        logger.warning("catalog problem: %s", p)
    return {"ok": not problems, "count": len(records), "problems": problems}
