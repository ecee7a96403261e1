from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from family_meal.api.errors import check_date
from family_meal.domain.MealPlanEntry import monday_of
from family_meal.domain.Person import person_targets, water_total
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Person_Repository import PersonRepository
from family_meal.infra.Recipe_Repository import RecipeRepository
from family_meal.logic.reporting.nutrition import (
    build_slot_lookup, compute_daily_nutrition, compute_week_nutrition, kcal_status, purine_status
)
from family_meal.utilities.constants import ISO_DATE_FORMAT

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.get("/day")
def day_nutrition(person: str = Query(...), date: str = Query(...), store: DocumentStore = Depends(get_store)):
    """Totals for one person's slots on one day, with status against their targets."""
    date = check_date(date)
    data = store.query("mealPlanEntries", "persons", "waterEntries")
    lookup = build_slot_lookup(data["mealPlanEntries"], RecipeRepository(store).all())
    day = compute_daily_nutrition(person, date, lookup)
    targets = person_targets(person, data["persons"])
    return {
        "person": person,
        "date": date,
        **day,
        "targets": targets,
        "purine_status": purine_status(day["total_purines_mg"], targets.get("purineMaxPerDay")),
        "kcal_status": kcal_status(day["total_kcals"], targets.get("kcalMaxPerDay")),
        "water_ml": water_total(data["waterEntries"], person, date),
    }


@router.get("/week")
def week_nutrition(start: Optional[str] = Query(default=None), store: DocumentStore = Depends(get_store)):
    start = check_date(start) if start else _date.today().strftime(ISO_DATE_FORMAT)
    persons_repo = PersonRepository(store)
    person_ids = [p["id"] for p in persons_repo.family()]
    data = store.query("mealPlanEntries", "persons", "waterEntries")
    return {
        "week_start": monday_of(start).strftime(ISO_DATE_FORMAT),
        **compute_week_nutrition(start, person_ids, data["mealPlanEntries"], RecipeRepository(store).all(),
                                 persons=data["persons"], water=data["waterEntries"]),
    }
