from typing import Optional

from fastapi import APIRouter, Depends, Query

from family_meal.api.errors import check_date, http_errors
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Plan_Repository import PlanRepository
from family_meal.utilities.validators import MealAssignInput

router = APIRouter(prefix="/api/plan", tags=["plan"])


@router.get("")
def list_entries(start: Optional[str] = Query(default=None), end: Optional[str] = Query(default=None),
                 store: DocumentStore = Depends(get_store)):
    entries = PlanRepository(store).entries(check_date(start), check_date(end))
    return {"count": len(entries), "entries": entries}


@router.post("", status_code=201)
def assign_meal(data: MealAssignInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return PlanRepository(store).assign(data.personId, data.date, data.slot, data.recipeId)


@router.delete("/day/{person_id}/{date}")
def clear_day(person_id: str, date: str, store: DocumentStore = Depends(get_store)):
    return {"removed": PlanRepository(store).clear_day(person_id, check_date(date))}


@router.delete("/{entry_id}")
def remove_entry(entry_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        PlanRepository(store).remove(entry_id)
    return {"deleted": entry_id}
