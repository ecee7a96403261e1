"""Shopping session state: date range, custom items and purchased marks (never persisted)."""
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from family_meal.events.Event_Bus import GLOBAL_EVENT_BUS, SHOPPING_RANGE_CHANGED


class PurchasedItems:
    """Ingredient ids marked as purchased, scoped to one date range.

    Marks survive re-deriving the list for the same range and are cleared when
    the range changes.
    """

    def __init__(self):
        self._range: Optional[Tuple[str, str]] = None
        self._ids: Set[str] = set()

    @property
    def range(self) -> Optional[Tuple[str, str]]:
        return self._range

    def set_range(self, start: str, end: str) -> bool:
        '''Returns True if the range changed (and marks were reset).'''
        new_range = (start, end)
        if new_range == self._range:
            return False
        changed = self._range is not None
        self._range = new_range
        self._ids.clear()
        return changed

    def toggle(self, ingredient_id: str) -> bool:
        '''Flips the mark; returns the new state.'''
        if ingredient_id in self._ids:
            self._ids.remove(ingredient_id)
            return False
        self._ids.add(ingredient_id)
        return True

    def is_purchased(self, ingredient_id: str) -> bool:
        return ingredient_id in self._ids

    def count_in(self, rows: Iterable[Dict[str, Any]]) -> int:
        return sum(1 for r in rows if r.get("ingredient_id") in self._ids)

    def __len__(self) -> int:
        return len(self._ids)


class ShoppingSession:
    def __init__(self, event_bus=None):
        self.purchased = PurchasedItems()
        self.custom_items: List[Dict[str, Any]] = []
        self.group_by_tags = True
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    def use_range(self, start: str, end: str):
        if self.purchased.set_range(start, end):
            self._event_bus.publish(SHOPPING_RANGE_CHANGED, {"start": start, "end": end})
        return self

    def add_custom_item(self, row: Dict[str, Any]):
        self.custom_items.append(dict(row))
        return self

    def __str__(self) -> str:
        return (f"Shopping session {self.purchased.range} - {len(self.custom_items)} custom - "
                f"{len(self.purchased)} purchased")

    __repr__ = __str__
