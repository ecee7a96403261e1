from fastapi import APIRouter, Depends, Query

from family_meal.api.errors import http_errors
from family_meal.domain.Ingredient import Ingredient
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Ingredient_Repository import IngredientRepository
from family_meal.utilities.validators import IngredientInput

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


def _to_ingredient(data: IngredientInput) -> Ingredient:
    return Ingredient(data.name, data.purinesPer100g, data.kcalsPer100g,
                      inflammatory_level=data.inflammatoryLevel, tags=data.tags, notes=data.notes)


@router.get("")
def list_ingredients(search: str = Query(default=""),
                     inflammation: str = Query(default="all", pattern=r'^(all|low|medium|high)$'),
                     store: DocumentStore = Depends(get_store)):
    items = IngredientRepository(store).search(search, inflammation)
    return {"count": len(items), "items": items}


@router.post("", status_code=201)
def create_ingredient(data: IngredientInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return IngredientRepository(store).create(_to_ingredient(data))


@router.get("/{ingredient_id}")
def get_ingredient(ingredient_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return IngredientRepository(store).get(ingredient_id)


@router.put("/{ingredient_id}")
def update_ingredient(ingredient_id: str, data: IngredientInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return IngredientRepository(store).update(ingredient_id, _to_ingredient(data))


@router.delete("/{ingredient_id}")
def delete_ingredient(ingredient_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        IngredientRepository(store).delete(ingredient_id)
    return {"deleted": ingredient_id}
