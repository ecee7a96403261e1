"""Meal plan persistence: calendar entries per person, date and slot."""
import logging
from typing import Any, Dict, List, Optional

from family_meal.domain.MealPlanEntry import MealPlanEntry, iso_day
from family_meal.infra.document_store import DocumentStore, new_id, tx_delete, tx_update
from family_meal.logic.shopping.list_builder import entries_in_range

logger = logging.getLogger(__name__)

ENTITY = "mealPlanEntries"


class PlanRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def all(self) -> List[Dict[str, Any]]:
        return self.store.query(ENTITY)[ENTITY]

    def entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[Dict[str, Any]]:
        entries = self.all()
        if start is None and end is None:
            return entries
        return entries_in_range(entries, iso_day(start) if start else "", iso_day(end) if end else "9999-12-31")

    def assign(self, person_id: str, date: str, slot: str, recipe_id: str) -> Dict[str, Any]:
        """Put a recipe in a slot, replacing whatever was there.

        Any existing entries for the same (person, date, slot) are deleted in the
        same batch, so a slot holds at most one entry after the write.
        """
        self.store.get("recipes", recipe_id)
        entry = MealPlanEntry(person_id, date, slot, recipe_id, id=new_id())
        ops = [tx_delete(ENTITY, e["id"]) for e in self.all()
               if (e.get("personId"), e.get("date"), e.get("slot")) == entry.key()]
        ops.append(tx_update(ENTITY, entry.id, entry.to_dict()))
        self.store.transact(ops)
        logger.info("Assigned recipe %s to %s", recipe_id, entry)
        return {**entry.to_dict(), "id": entry.id}

    def remove(self, entry_id: str):
        self.store.get(ENTITY, entry_id)
        self.store.transact([tx_delete(ENTITY, entry_id)])

    def clear_day(self, person_id: str, date: str) -> int:
        """Remove every entry of a person on a date. Returns the number removed."""
        date = iso_day(date)
        ops = [tx_delete(ENTITY, e["id"]) for e in self.all()
               if e.get("personId") == person_id and e.get("date") == date]
        self.store.transact(ops)
        return len(ops)
