from fastapi import APIRouter, Depends, Query

from family_meal.api.errors import http_errors
from family_meal.domain.Recipe import Recipe
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Recipe_Repository import RecipeRepository
from family_meal.utilities.validators import RecipeInput, RecipePreviewInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _to_recipe(data: RecipeInput) -> Recipe:
    return Recipe(name=data.name, servings=data.servings,
                  ingredients=[i.model_dump() for i in data.ingredients],
                  type=data.type, tags=data.tags, notes=data.notes)


@router.get("")
def list_recipes(search: str = Query(default=""),
                 safe: str = Query(default="all", pattern=r'^(all|safe|unsafe)$'),
                 store: DocumentStore = Depends(get_store)):
    recipes = RecipeRepository(store).search(search, safe)
    return {"count": len(recipes), "recipes": recipes}


@router.post("/preview")
def preview_recipe(data: RecipePreviewInput, store: DocumentStore = Depends(get_store)):
    """Nutrition totals for an ingredient list before it is saved."""
    pairs = [i.model_dump() for i in data.ingredients]
    return RecipeRepository(store).preview(pairs, data.servings)


@router.post("", status_code=201)
def create_recipe(data: RecipeInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return RecipeRepository(store).create(_to_recipe(data))


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return RecipeRepository(store).get(recipe_id)


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, data: RecipeInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return RecipeRepository(store).update(recipe_id, _to_recipe(data))


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, store: DocumentStore = Depends(get_store)):
    with http_errors():
        RecipeRepository(store).delete(recipe_id)
    return {"deleted": recipe_id}
