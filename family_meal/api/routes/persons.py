from fastapi import APIRouter, Depends, Query

from family_meal.api.errors import check_date, http_errors
from family_meal.domain.Person import Person, WaterEntry
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Person_Repository import PersonRepository
from family_meal.utilities.validators import PersonTargetsInput, WaterInput

router = APIRouter(tags=["persons"])


@router.get("/api/persons")
def list_persons(store: DocumentStore = Depends(get_store)):
    return {"persons": PersonRepository(store).family()}


@router.put("/api/persons/{person_id}")
def update_targets(person_id: str, data: PersonTargetsInput, store: DocumentStore = Depends(get_store)):
    targets = data.model_dump(exclude_none=True, exclude={"name"})
    return PersonRepository(store).save_targets(Person(person_id, data.name, targets))


@router.get("/api/water")
def get_water(person: str = Query(...), date: str = Query(...), store: DocumentStore = Depends(get_store)):
    return PersonRepository(store).water_for(person, check_date(date))


@router.post("/api/water", status_code=201)
def add_water(data: WaterInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        entry = WaterEntry(data.personId, data.date, data.ml)
    return PersonRepository(store).add_water(entry)
