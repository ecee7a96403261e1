"""Shopping list endpoints.

The list itself is always derived from the current store snapshot; the
session (custom rows, purchased marks, grouping flag) lives in memory only.
"""
from datetime import date as _date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from family_meal.api.errors import check_date, http_errors
from family_meal.domain.MealPlanEntry import monday_of
from family_meal.domain.Pantry import active_pantry
from family_meal.domain.ShoppingList import ShoppingSession
from family_meal.infra.document_store import DocumentStore, get_store
from family_meal.infra.Ingredient_Repository import IngredientRepository
from family_meal.infra.Pantry_Repository import PantryRepository
from family_meal.infra.Recipe_Repository import RecipeRepository
from family_meal.logic.shopping.list_builder import build_shopping_list, custom_item, group_shopping_list
from family_meal.utilities.constants import ISO_DATE_FORMAT
from family_meal.utilities.validators import CustomShoppingItemInput, TagsInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])

session = ShoppingSession()


def current_week_range():
    monday = monday_of(_date.today())
    return monday.strftime(ISO_DATE_FORMAT), (monday + timedelta(days=6)).strftime(ISO_DATE_FORMAT)


@router.get("")
def get_shopping_list(start: Optional[str] = Query(default=None), end: Optional[str] = Query(default=None),
                      group: Optional[bool] = Query(default=None), store: DocumentStore = Depends(get_store)):
    default_start, default_end = current_week_range()
    start = check_date(start) or default_start
    end = check_date(end) or default_end
    if start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")
    session.use_range(start, end)
    if group is not None:
        session.group_by_tags = group

    pantry = active_pantry(PantryRepository(store).all())
    rows = build_shopping_list(
        start, end,
        store.query("mealPlanEntries")["mealPlanEntries"],
        RecipeRepository(store).all(),
        IngredientRepository(store).all(),
        pantry_stock=pantry["ingredients"] if pantry else None,
        custom_items=session.custom_items,
    )
    for row in rows:
        row["purchased"] = session.purchased.is_purchased(row["ingredient_id"])
    return {
        "start": start,
        "end": end,
        "pantry": pantry["name"] if pantry else None,
        "count": len(rows),
        "purchased_count": session.purchased.count_in(rows),
        "group_by_tags": session.group_by_tags,
        "items": rows,
        "groups": group_shopping_list(rows, session.group_by_tags),
    }


@router.post("/custom", status_code=201)
def add_custom_item(data: CustomShoppingItemInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        ingredient = IngredientRepository(store).get(data.ingredientId)
    row = custom_item(ingredient, data.quantityGrams)
    session.add_custom_item(row)
    return row


@router.post("/purchased/{ingredient_id}")
def toggle_purchased(ingredient_id: str):
    return {"ingredient_id": ingredient_id, "purchased": session.purchased.toggle(ingredient_id)}


@router.put("/ingredient/{ingredient_id}/tags")
def update_ingredient_tags(ingredient_id: str, data: TagsInput, store: DocumentStore = Depends(get_store)):
    with http_errors():
        return IngredientRepository(store).update_tags(ingredient_id, data.tags)
