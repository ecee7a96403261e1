from fastapi import APIRouter, Depends

from family_meal.api.errors import http_errors
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Pantry_Repository import PantryRepository
from family_meal.utilities.validators import PantryInput, StockInput

router = APIRouter(prefix="/api/pantries", tags=["pantries"])


@router.get("")
def list_pantries(store: DocumentStore = Depends(get_store)):
    return {"pantries": PantryRepository(store).all()}


@router.get("/active")
def get_active_pantry(store: DocumentStore = Depends(get_store)):
    return {"pantry": PantryRepository(store).active()}


@router.post("", status_code=201)
def create_pantry(data: PantryInput, store: DocumentStore = Depends(get_store)):
    return PantryRepository(store).create(data.name)


@router.put("/{pantry_id}")
def rename_pantry(pantry_id: str, data: PantryInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return PantryRepository(store).rename(pantry_id, data.name)


@router.delete("/{pantry_id}")
def delete_pantry(pantry_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        PantryRepository(store).delete(pantry_id)
    return {"deleted": pantry_id}


@router.post("/{pantry_id}/activate")
def activate_pantry(pantry_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return PantryRepository(store).set_active(pantry_id)


@router.post("/{pantry_id}/stock")
def add_stock(pantry_id: str, data: StockInput, store: DocumentStore = Depends(get_store)):
    """Add grams to an ingredient's stock (creates the entry if missing)."""
    with http_errors():
        return PantryRepository(store).add_stock(pantry_id, data.ingredientId, data.quantityGrams)


@router.put("/{pantry_id}/stock")
def set_stock(pantry_id: str, data: StockInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return PantryRepository(store).set_stock(pantry_id, data.ingredientId, data.quantityGrams)


@router.delete("/{pantry_id}/stock/{ingredient_id}")
def remove_stock(pantry_id: str, ingredient_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return PantryRepository(store).remove_stock(pantry_id, ingredient_id)
