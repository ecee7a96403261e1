"""Translate domain and store errors into HTTP responses."""
import logging
from contextlib import contextmanager
from typing import Optional

from fastapi import HTTPException

from family_meal.domain.MealPlanEntry import iso_day
from family_meal.infra.document_store import RecordNotFoundError

logger = logging.getLogger("family_meal_app")


@contextmanager
def http_errors():
    try:
        yield
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        logger.warning("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def check_date(value: Optional[str]) -> Optional[str]:
    """Query-string date in its stored YYYY-MM-DD form; 400 when unparseable."""
    if value is None:
        return None
    try:
        return iso_day(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date (expected YYYY-MM-DD): {value}")
