"""Recipe persistence; derived nutrition totals are recomputed on every save."""
import logging
from typing import Any, Dict, List

from family_meal.domain.Recipe import Recipe
from family_meal.domain.schema import normalize_recipe
from family_meal.infra.document_store import DocumentStore, new_id, tx_delete, tx_update
from family_meal.infra.Ingredient_Repository import IngredientRepository, now_ms
from family_meal.logic.nutrition.recipe_calculator import calculate_recipe_nutrition, per_serving
from family_meal.logic.search import filter_recipes

logger = logging.getLogger(__name__)

ENTITY = "recipes"


class RecipeRepository:
    def __init__(self, store: DocumentStore):
        self.store = store
        self.ingredients = IngredientRepository(store)

    def all(self) -> List[Dict[str, Any]]:
        return [normalize_recipe(r) for r in self.store.query(ENTITY)[ENTITY]]

    def get(self, recipe_id: str) -> Dict[str, Any]:
        return normalize_recipe(self.store.get(ENTITY, recipe_id))

    def search(self, search: str = "", safe: str = "all") -> List[Dict[str, Any]]:
        return filter_recipes(self.all(), search, safe)

    def preview(self, pairs: List[Dict[str, Any]], servings: float = 1) -> Dict[str, Any]:
        """Nutrition for an unsaved ingredient list, as the recipe editor shows it."""
        totals = calculate_recipe_nutrition(pairs, self.ingredients.catalog())
        return {**totals, **per_serving(totals, servings)}

    def _save(self, recipe_id: str, recipe: Recipe, extra: Dict[str, Any]) -> Dict[str, Any]:
        recipe.recompute(self.ingredients.catalog())
        self.store.transact([tx_update(ENTITY, recipe_id, {**recipe.to_dict(), **extra})])
        logger.info("Saved recipe %s: %.1fmg purines, %.0f kcal, safe=%s",
                    recipe.name, recipe.total_purines_mg, recipe.total_kcals, recipe.safe_for_gout)
        return self.get(recipe_id)

    def create(self, recipe: Recipe) -> Dict[str, Any]:
        stamp = now_ms()
        return self._save(recipe.id or new_id(), recipe, {"createdAt": stamp, "updatedAt": stamp})

    def update(self, recipe_id: str, recipe: Recipe) -> Dict[str, Any]:
        self.get(recipe_id)
        return self._save(recipe_id, recipe, {"updatedAt": now_ms()})

    def delete(self, recipe_id: str):
        self.get(recipe_id)
        self.store.transact([tx_delete(ENTITY, recipe_id)])
