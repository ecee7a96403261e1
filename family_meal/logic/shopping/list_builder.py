"""Shopping list builder.

Provides build_shopping_list(start_date, end_date, entries, recipes, ingredients, pantry_stock, custom_items)
and group_shopping_list(rows, group_by_tags).
"""
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Mapping, Optional

from family_meal.domain.schema import index_by_id, to_number
from family_meal.utilities.constants import ALL_ITEMS, UNCATEGORIZED

__all__ = ['build_shopping_list', 'group_shopping_list', 'custom_item', 'entries_in_range', 'first_tag']


def first_tag(tags: Optional[str]) -> str:
    token = (tags or '').split(',')[0].strip()
    return token or UNCATEGORIZED


def entries_in_range(entries: Iterable[Dict[str, Any]], start_date: str, end_date: str) -> List[Dict[str, Any]]:
    """Entries whose ISO date lies in [start_date, end_date].

    Plain string comparison; valid because the YYYY-MM-DD format is fixed width.
    """
    return [e for e in entries or [] if start_date <= (e.get('date') or '') <= end_date]


def _row(ingredient: Mapping[str, Any], total_grams: float) -> Dict[str, Any]:
    return {
        'ingredient_id': ingredient.get('id'),
        'name': ingredient.get('name', ''),
        'total_grams': total_grams,
        'pantry_grams': 0,
        'needed_grams': total_grams,
        'purines_per_100g': to_number(ingredient.get('purinesPer100g')),
        'kcals_per_100g': to_number(ingredient.get('kcalsPer100g')),
        'tags': ingredient.get('tags') or '',
    }


def custom_item(ingredient: Mapping[str, Any], quantity: float) -> Dict[str, Any]:
    """A user-added row that is not derived from the meal plan."""
    return _row(ingredient, quantity)


def build_shopping_list(start_date: str, end_date: str,
                        entries: Iterable[Dict[str, Any]],
                        recipes: Iterable[Dict[str, Any]],
                        ingredients: Iterable[Dict[str, Any]],
                        pantry_stock: Optional[Iterable[Dict[str, Any]]] = None,
                        custom_items: Iterable[Dict[str, Any]] = ()) -> List[Dict[str, Any]]:
    """Compute what to buy for the meals planned in a date range.

    Args:
        start_date, end_date: inclusive ISO dates.
        entries: meal plan entry dicts (date, recipeId).
        recipes: recipe dicts with ingredients [{ingredientId, quantity}].
        ingredients: normalized ingredient dicts.
        pantry_stock: active pantry stock [{ingredientId, quantityGrams}].
        custom_items: rows added by hand; replace a derived row with the same id.

    Returns:
        Rows with needed_grams > 0, in first-seen order:
        { ingredient_id, name, total_grams, pantry_grams, needed_grams,
          purines_per_100g, kcals_per_100g, tags }
    """
    recipe_index = index_by_id(recipes)
    ingredient_index = index_by_id(ingredients)

    required: Dict[str, Dict[str, Any]] = OrderedDict()
    for entry in entries_in_range(entries, start_date, end_date):
        recipe = recipe_index.get(entry.get('recipeId'))
        if not recipe:
            continue
        for pair in recipe.get('ingredients', []):
            ingredient = ingredient_index.get(pair.get('ingredientId'))
            if not ingredient:
                continue
            qty = to_number(pair.get('quantity'))
            row = required.get(ingredient['id'])
            if row:
                row['total_grams'] += qty
            else:
                required[ingredient['id']] = _row(ingredient, qty)

    for row in required.values():
        row['needed_grams'] = row['total_grams']

    for stock in pantry_stock or []:
        row = required.get(stock.get('ingredientId'))
        if row:
            have = to_number(stock.get('quantityGrams'))
            row['pantry_grams'] = have
            row['needed_grams'] = max(0, row['total_grams'] - have)

    for custom in custom_items or []:
        if custom.get('ingredient_id'):
            required[custom['ingredient_id']] = dict(custom)

    return [row for row in required.values() if to_number(row.get('needed_grams')) > 0]


def group_shopping_list(rows: List[Dict[str, Any]], group_by_tags: bool = True) -> Dict[str, List[Dict[str, Any]]]:
    """Bucket rows by their first tag; a single 'All Items' bucket when grouping is off."""
    if not group_by_tags:
        return {ALL_ITEMS: list(rows)}
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for row in rows:
        groups.setdefault(first_tag(row.get('tags')), []).append(row)
    return groups
