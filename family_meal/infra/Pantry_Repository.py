"""Pantry persistence: pantries, stock entries and the active-pantry flag."""
import logging
from typing import Any, Dict, List, Optional

from family_meal.domain.Pantry import Pantry, active_pantry
from family_meal.domain.schema import normalize_pantry
from family_meal.infra.document_store import DocumentStore, new_id, tx_delete, tx_update

logger = logging.getLogger(__name__)

ENTITY = "pantries"


class PantryRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def all(self) -> List[Dict[str, Any]]:
        return [normalize_pantry(p) for p in self.store.query(ENTITY)[ENTITY]]

    def get(self, pantry_id: str) -> Pantry:
        return Pantry.from_dict(self.store.get(ENTITY, pantry_id))

    def active(self) -> Optional[Dict[str, Any]]:
        return active_pantry(self.all())

    def _save(self, pantry: Pantry) -> Dict[str, Any]:
        self.store.transact([tx_update(ENTITY, pantry.id, pantry.to_dict())])
        return normalize_pantry({**pantry.to_dict(), "id": pantry.id})

    def create(self, name: str) -> Dict[str, Any]:
        '''Creates an empty pantry; the first pantry ever created is the active one.'''
        pantry = Pantry(name=name.strip(), is_active=not self.all(), id=new_id())
        logger.info("Created pantry %s (active=%s)", pantry.name, pantry.is_active)
        return self._save(pantry)

    def rename(self, pantry_id: str, name: str) -> Dict[str, Any]:
        pantry = self.get(pantry_id)
        pantry.name = name.strip()
        return self._save(pantry)

    def delete(self, pantry_id: str):
        self.get(pantry_id)
        self.store.transact([tx_delete(ENTITY, pantry_id)])

    def set_active(self, pantry_id: str) -> Dict[str, Any]:
        '''Marks one pantry active and every other inactive, in a single batch.'''
        pantries = self.all()
        if not any(p["id"] == pantry_id for p in pantries):
            self.get(pantry_id)
        self.store.transact([tx_update(ENTITY, p["id"], {"isActive": p["id"] == pantry_id}) for p in pantries])
        return normalize_pantry(self.store.get(ENTITY, pantry_id))

    def add_stock(self, pantry_id: str, ingredient_id: str, quantity_grams: float) -> Dict[str, Any]:
        return self._save(self.get(pantry_id).add_stock(ingredient_id, quantity_grams))

    def set_stock(self, pantry_id: str, ingredient_id: str, quantity_grams: float) -> Dict[str, Any]:
        return self._save(self.get(pantry_id).set_stock(ingredient_id, quantity_grams))

    def remove_stock(self, pantry_id: str, ingredient_id: str) -> Dict[str, Any]:
        return self._save(self.get(pantry_id).remove_stock(ingredient_id))
