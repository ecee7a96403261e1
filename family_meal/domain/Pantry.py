"""Pantry aggregate: named collection of (ingredientId, grams) stock entries."""
from typing import Any, Dict, List, Optional

from family_meal.domain.schema import normalize_pantry, to_number


class Pantry:
    def __init__(self, name: str = "", ingredients: Optional[List[Dict[str, Any]]] = None,
                 is_active: bool = False, id: Optional[str] = None):
        self.id = id
        self.name = name
        self.ingredients: List[Dict[str, Any]] = [dict(i) for i in ingredients] if ingredients else []
        self.is_active = is_active

    def add_stock(self, ingredient_id: str, quantity_grams: float):
        '''
        Adds grams to an ingredient's stock, creating the entry if missing.
        '''
        if quantity_grams < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity_grams}")
        for item in self.ingredients:
            if item["ingredientId"] == ingredient_id:
                item["quantityGrams"] = to_number(item.get("quantityGrams")) + quantity_grams
                return self
        self.ingredients.append({"ingredientId": ingredient_id, "quantityGrams": quantity_grams})
        return self

    def set_stock(self, ingredient_id: str, new_quantity: float):
        '''
        Overwrites the stock of an ingredient already in the pantry.
        '''
        if new_quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {new_quantity}")
        for item in self.ingredients:
            if item["ingredientId"] == ingredient_id:
                item["quantityGrams"] = new_quantity
                return self
        raise ValueError(f"Ingredient '{ingredient_id}' not found in pantry.")

    def remove_stock(self, ingredient_id: str):
        before = len(self.ingredients)
        self.ingredients = [i for i in self.ingredients if i["ingredientId"] != ingredient_id]
        if len(self.ingredients) == before:
            raise ValueError(f"Ingredient '{ingredient_id}' not found in pantry.")
        return self

    def stock_map(self) -> Dict[str, float]:
        '''
        Grams in stock per ingredient id.
        '''
        return {i["ingredientId"]: to_number(i.get("quantityGrams")) for i in self.ingredients}

    def __str__(self) -> str:
        items_str = ",\n\t".join(f"{i['ingredientId']}: {i['quantityGrams']}g" for i in self.ingredients)
        active = " (active)" if self.is_active else ""
        return f"{self.name}{active} Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Pantry":
        d = normalize_pantry(data)
        return Pantry(name=d["name"], ingredients=d["ingredients"], is_active=d["isActive"], id=d["id"] or None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ingredients": [dict(i) for i in self.ingredients],
            "isActive": self.is_active,
        }


def active_pantry(pantries: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """First pantry flagged active, else the first pantry, else None."""
    if not pantries:
        return None
    for p in pantries:
        if p.get("isActive"):
            return p
    return pantries[0]
