"""Person targets and water intake persistence."""
from typing import Any, Dict, List

from family_meal.domain.MealPlanEntry import iso_day
from family_meal.domain.Person import Person, WaterEntry, person_targets, water_total
from family_meal.infra.document_store import DocumentStore, new_id, tx_update
from family_meal.utilities.constants import FAMILY


class PersonRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def all(self) -> List[Dict[str, Any]]:
        return self.store.query("persons")["persons"]

    def family(self) -> List[Dict[str, Any]]:
        """Every family member with effective targets (stored values over defaults)."""
        stored = {p["id"]: p for p in self.all()}
        ids = list(FAMILY) + [pid for pid in stored if pid not in FAMILY]
        return [{"id": pid, "name": stored.get(pid, {}).get("name") or FAMILY.get(pid, pid),
                 **person_targets(pid, stored.values())} for pid in ids]

    def save_targets(self, person: Person) -> Dict[str, Any]:
        self.store.transact([tx_update("persons", person.id, person.to_dict())])
        return {"id": person.id, "name": person.name, **person_targets(person.id, self.all())}

    def water_entries(self) -> List[Dict[str, Any]]:
        return self.store.query("waterEntries")["waterEntries"]

    def add_water(self, entry: WaterEntry) -> Dict[str, Any]:
        entry.id = entry.id or new_id()
        self.store.transact([tx_update("waterEntries", entry.id, entry.to_dict())])
        return {**entry.to_dict(), "id": entry.id}

    def water_for(self, person_id: str, date: str) -> Dict[str, Any]:
        date = iso_day(date)
        total = water_total(self.water_entries(), person_id, date)
        target = person_targets(person_id, self.all()).get("waterTargetMl")
        return {"personId": person_id, "date": date, "ml": total, "target_ml": target}
