"""MealPlanEntry domain entity: one recipe assigned to a person's meal slot on a calendar day."""
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from family_meal.utilities.constants import (
    BASE_MEAL_SLOTS, SCHOOL_MEAL_SLOTS, SCHOOL_PERSON_ID, ALL_MEAL_SLOTS, COMPACT_DATE_FORMAT, ISO_DATE_FORMAT
)


class MealPlanEntry:
    def __init__(self, person_id: str, date: str, slot: str, recipe_id: str, id: Optional[str] = None):
        if slot not in ALL_MEAL_SLOTS:
            raise ValueError(f"Unknown meal slot: {slot}")
        self.id = id
        self.person_id = person_id
        self.date = iso_day(date)
        self.slot = slot
        self.recipe_id = recipe_id

    def key(self):
        return (self.person_id, self.date, self.slot)

    def __str__(self) -> str:
        return f"{self.date} {self.person_id}/{self.slot} -> {self.recipe_id}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "MealPlanEntry":
        return MealPlanEntry(
            person_id=str(data.get("personId", "")),
            date=str(data.get("date", "")),
            slot=str(data.get("slot", "")),
            recipe_id=str(data.get("recipeId", "")),
            id=data.get("id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"personId": self.person_id, "date": self.date, "slot": self.slot, "recipeId": self.recipe_id}


def parse_day(value) -> date:
    '''Accepts a date, 'YYYY-MM-DD' or compact 'YYYYMMDD'; raises ValueError otherwise.'''
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 8 and text.isdigit():
        return datetime.strptime(text, COMPACT_DATE_FORMAT).date()
    return datetime.strptime(text, ISO_DATE_FORMAT).date()


def iso_day(value) -> str:
    """Canonical fixed-width YYYY-MM-DD form; stored dates are compared as strings."""
    return parse_day(value).strftime(ISO_DATE_FORMAT)


def slots_for(person_id: str, day) -> List[str]:
    """Meal slots shown for a person on a day; the school-age member gets two extra on weekdays."""
    slots = list(BASE_MEAL_SLOTS)
    if person_id == SCHOOL_PERSON_ID and parse_day(day).isoweekday() <= 5:
        slots.extend(SCHOOL_MEAL_SLOTS)
    return slots


def monday_of(day) -> date:
    d = parse_day(day)
    return d - timedelta(days=d.weekday())


def week_dates(start) -> List[str]:
    """The seven ISO dates of the Monday-Sunday week containing start."""
    monday = monday_of(start)
    return [(monday + timedelta(days=i)).strftime(ISO_DATE_FORMAT) for i in range(7)]
