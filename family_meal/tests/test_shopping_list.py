import copy
import unittest

from family_meal.logic.shopping.list_builder import (
    build_shopping_list, custom_item, entries_in_range, group_shopping_list
)

INGREDIENTS = [
    {"id": "x", "name": "Rice", "purinesPer100g": 20, "kcalsPer100g": 350, "tags": "grains, dry"},
    {"id": "y", "name": "Salmon", "purinesPer100g": 170, "kcalsPer100g": 200, "tags": "fish"},
    {"id": "z", "name": "Salt", "purinesPer100g": 0, "kcalsPer100g": 0, "tags": ""},
]
RECIPES = [
    {"id": "r1", "name": "Rice bowl", "ingredients": [{"ingredientId": "x", "quantity": 150}]},
    {"id": "r2", "name": "Salmon rice", "ingredients": [
        {"ingredientId": "y", "quantity": 120},
        {"ingredientId": "x", "quantity": 80},
        {"ingredientId": "z", "quantity": 2},
    ]},
]


def entry(date, recipe_id, slot="lunch", person="exan"):
    return {"personId": person, "date": date, "slot": slot, "recipeId": recipe_id}


class TestShoppingListBuilder(unittest.TestCase):

    def setUp(self):
        self.entries = [entry("2025-03-03", "r1"), entry("2025-03-04", "r1", slot="dinner")]

    def test_demand_accumulates_across_entries(self):
        rows = build_shopping_list("2025-03-03", "2025-03-09", self.entries, RECIPES, INGREDIENTS)
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["ingredient_id"], "x")
        self.assertEqual(rows[0]["total_grams"], 300)
        self.assertEqual(rows[0]["needed_grams"], 300)
        self.assertEqual(rows[0]["pantry_grams"], 0)

    def test_pantry_is_deducted(self):
        stock = [{"ingredientId": "x", "quantityGrams": 100}]
        rows = build_shopping_list("2025-03-03", "2025-03-09", self.entries, RECIPES, INGREDIENTS, stock)
        self.assertEqual(rows[0]["pantry_grams"], 100)
        self.assertEqual(rows[0]["needed_grams"], 200)

    def test_fully_stocked_row_is_dropped(self):
        stock = [{"ingredientId": "x", "quantityGrams": 400}]
        rows = build_shopping_list("2025-03-03", "2025-03-09", self.entries, RECIPES, INGREDIENTS, stock)
        self.assertEqual(rows, [])

    def test_range_is_inclusive(self):
        entries = [entry("2025-03-02", "r1"), entry("2025-03-03", "r1"),
                   entry("2025-03-09", "r1"), entry("2025-03-10", "r1")]
        kept = entries_in_range(entries, "2025-03-03", "2025-03-09")
        self.assertEqual([e["date"] for e in kept], ["2025-03-03", "2025-03-09"])
        rows = build_shopping_list("2025-03-03", "2025-03-09", entries, RECIPES, INGREDIENTS)
        self.assertEqual(rows[0]["total_grams"], 300)

    def test_dangling_references_are_skipped(self):
        entries = [entry("2025-03-03", "missing"),
                   entry("2025-03-03", "r3")]
        recipes = RECIPES + [{"id": "r3", "ingredients": [{"ingredientId": "gone", "quantity": 50}]}]
        self.assertEqual(build_shopping_list("2025-03-01", "2025-03-31", entries, recipes, INGREDIENTS), [])

    def test_zero_quantity_rows_dropped(self):
        recipes = [{"id": "r9", "ingredients": [{"ingredientId": "z", "quantity": 0}]}]
        rows = build_shopping_list("2025-03-01", "2025-03-31", [entry("2025-03-05", "r9")], recipes, INGREDIENTS)
        self.assertEqual(rows, [])

    def test_custom_item_overwrites_derived_row(self):
        rice = INGREDIENTS[0]
        stock = [{"ingredientId": "x", "quantityGrams": 100}]
        rows = build_shopping_list("2025-03-03", "2025-03-09", self.entries, RECIPES, INGREDIENTS, stock,
                                   custom_items=[custom_item(rice, 50), custom_item(INGREDIENTS[1], 250)])
        by_id = {r["ingredient_id"]: r for r in rows}
        self.assertEqual(by_id["x"]["total_grams"], 50)
        self.assertEqual(by_id["x"]["pantry_grams"], 0)
        self.assertEqual(by_id["x"]["needed_grams"], 50)
        self.assertEqual(by_id["y"]["needed_grams"], 250)
        self.assertEqual(by_id["y"]["tags"], "fish")

    def test_same_snapshot_gives_same_list(self):
        entries = self.entries + [entry("2025-03-05", "r2")]
        snapshot = copy.deepcopy((entries, RECIPES, INGREDIENTS))
        stock = [{"ingredientId": "x", "quantityGrams": 50}]
        first = build_shopping_list("2025-03-03", "2025-03-09", entries, RECIPES, INGREDIENTS, stock)
        second = build_shopping_list("2025-03-03", "2025-03-09", entries, RECIPES, INGREDIENTS, stock)
        self.assertEqual(first, second)
        self.assertEqual((entries, RECIPES, INGREDIENTS), snapshot)
        self.assertEqual([r["ingredient_id"] for r in first], ["x", "y", "z"])


class TestGroupShoppingList(unittest.TestCase):

    def test_groups_by_first_tag(self):
        rows = [custom_item(i, 10) for i in INGREDIENTS]
        groups = group_shopping_list(rows)
        self.assertEqual(set(groups), {"grains", "fish", "Uncategorized"})
        self.assertEqual(groups["grains"][0]["name"], "Rice")
        self.assertEqual(groups["Uncategorized"][0]["name"], "Salt")

    def test_grouping_off(self):
        rows = [custom_item(i, 10) for i in INGREDIENTS]
        self.assertEqual(group_shopping_list(rows, group_by_tags=False), {"All Items": rows})


if __name__ == '__main__':
    unittest.main()
