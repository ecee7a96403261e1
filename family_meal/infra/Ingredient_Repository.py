"""Ingredient catalog persistence on the document store."""
import logging
import time
from typing import Any, Dict, List

from family_meal.domain.Ingredient import Ingredient
from family_meal.domain.schema import index_by_id, normalize_ingredient
from family_meal.infra.document_store import DocumentStore, new_id, tx_delete, tx_update
from family_meal.logic.search import filter_ingredients

logger = logging.getLogger(__name__)

ENTITY = "ingredients"


def now_ms() -> int:
    return int(time.time() * 1000)


class IngredientRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def all(self) -> List[Dict[str, Any]]:
        return [normalize_ingredient(r) for r in self.store.query(ENTITY)[ENTITY]]

    def catalog(self) -> Dict[str, Dict[str, Any]]:
        return index_by_id(self.all())

    def get(self, ingredient_id: str) -> Dict[str, Any]:
        return normalize_ingredient(self.store.get(ENTITY, ingredient_id))

    def search(self, search: str = "", inflammation: str = "all") -> List[Dict[str, Any]]:
        return filter_ingredients(self.all(), search, inflammation)

    def create(self, ingredient: Ingredient) -> Dict[str, Any]:
        ingredient_id = ingredient.id or new_id()
        stamp = now_ms()
        self.store.transact([tx_update(ENTITY, ingredient_id,
                                       {**ingredient.to_dict(), "createdAt": stamp, "updatedAt": stamp})])
        logger.info("Created ingredient %s (%s)", ingredient.name, ingredient_id)
        return self.get(ingredient_id)

    def update(self, ingredient_id: str, ingredient: Ingredient) -> Dict[str, Any]:
        self.get(ingredient_id)
        self.store.transact([tx_update(ENTITY, ingredient_id, {**ingredient.to_dict(), "updatedAt": now_ms()})])
        return self.get(ingredient_id)

    def update_tags(self, ingredient_id: str, tags: str) -> Dict[str, Any]:
        self.get(ingredient_id)
        self.store.transact([tx_update(ENTITY, ingredient_id, {"tags": tags.strip(), "updatedAt": now_ms()})])
        return self.get(ingredient_id)

    def delete(self, ingredient_id: str):
        '''Deletes the ingredient; recipes and pantries that reference it are left as they are.'''
        self.get(ingredient_id)
        self.store.transact([tx_delete(ENTITY, ingredient_id)])
