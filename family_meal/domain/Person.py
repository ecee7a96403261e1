"""Person and WaterEntry records: per-person daily nutrition targets and water intake."""
from typing import Any, Dict, Iterable, Optional

from family_meal.domain.schema import to_number
from family_meal.utilities.constants import DEFAULT_PERSON_TARGETS, FAMILY, SCHOOL_PERSON_ID

TARGET_FIELDS = ("purineMinPerDay", "purineMaxPerDay", "kcalMinPerDay", "kcalMaxPerDay", "waterTargetMl")


class Person:
    def __init__(self, id: str, name: str = "", targets: Optional[Dict[str, Any]] = None):
        self.id = id
        self.name = name or FAMILY.get(id, id)
        self.targets = {k: v for k, v in (targets or {}).items() if k in TARGET_FIELDS and v is not None}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Person":
        return Person(id=str(data.get("id", "")), name=data.get("name", ""),
                      targets={k: data.get(k) for k in TARGET_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, **self.targets}


def person_targets(person_id: str, persons: Iterable[Dict[str, Any]] = ()) -> Dict[str, Any]:
    """Stored targets for person_id merged over the hardcoded defaults.

    Unknown people fall back to the school-age member's defaults.
    """
    targets = dict(DEFAULT_PERSON_TARGETS.get(person_id, DEFAULT_PERSON_TARGETS[SCHOOL_PERSON_ID]))
    for p in persons or []:
        if p.get("id") == person_id:
            for k in TARGET_FIELDS:
                if p.get(k) is not None:
                    targets[k] = to_number(p.get(k))
            break
    return targets


class WaterEntry:
    def __init__(self, person_id: str, date: str, ml: float, id: Optional[str] = None):
        if ml <= 0:
            raise ValueError("Water amount must be positive")
        self.id = id
        self.person_id = person_id
        self.date = date
        self.ml = ml

    def to_dict(self) -> Dict[str, Any]:
        return {"personId": self.person_id, "date": self.date, "ml": self.ml}


def water_total(entries: Iterable[Dict[str, Any]], person_id: str, date: str) -> float:
    return sum(to_number(e.get("ml")) for e in entries or []
               if e.get("personId") == person_id and e.get("date") == date)
