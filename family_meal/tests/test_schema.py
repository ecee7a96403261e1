import unittest

from family_meal.domain.Ingredient import Ingredient, inflammation_band
from family_meal.domain.MealPlanEntry import iso_day, parse_day
from family_meal.domain.schema import (
    SCHEMA_VERSION, index_by_id, normalize_ingredient, normalize_pantry, normalize_recipe, to_number
)
from family_meal.logic.search import filter_ingredients, filter_recipes


class TestIngredientNormalization(unittest.TestCase):

    def test_v2_record_passes_through(self):
        d = normalize_ingredient({"id": "i1", "name": "Lentils", "purinesPer100g": 127,
                                  "kcalsPer100g": 116, "inflammatoryLevel": 3, "tags": "legumes"})
        self.assertEqual(d["purinesPer100g"], 127)
        self.assertEqual(d["kcalsPer100g"], 116)
        self.assertEqual(d["inflammatoryLevel"], 3)
        self.assertEqual(d["schemaVersion"], SCHEMA_VERSION)

    def test_legacy_per_unit_record(self):
        d = normalize_ingredient({"id": "i2", "name": "Egg", "purinesPerUnit": 2.5, "kcalsPerUnit": 75,
                                  "unitGrams": 50, "inflammation": "low"})
        self.assertAlmostEqual(d["purinesPer100g"], 5)
        self.assertAlmostEqual(d["kcalsPer100g"], 150)
        self.assertEqual(d["inflammatoryLevel"], 2)

    def test_legacy_zero_unit_grams_treated_as_100(self):
        d = normalize_ingredient({"purinesPerUnit": 40, "unitGrams": 0, "inflammation": "HIGH"})
        self.assertEqual(d["purinesPer100g"], 40)
        self.assertEqual(d["inflammatoryLevel"], 8)

    def test_snake_case_and_clamping(self):
        d = normalize_ingredient({"purines_per_100g": "-5", "kcals_per_100g": "88",
                                  "inflammatory_level": 14, "tags": ["meat", " beef "]})
        self.assertEqual(d["purinesPer100g"], 0)
        self.assertEqual(d["kcalsPer100g"], 88)
        self.assertEqual(d["inflammatoryLevel"], 10)
        self.assertEqual(d["tags"], "meat, beef")

    def test_to_number(self):
        self.assertEqual(to_number("12.5"), 12.5)
        self.assertEqual(to_number(None), 0)
        self.assertEqual(to_number("abc", default=1), 1)
        self.assertEqual(to_number(True), 0)


class TestOtherRecords(unittest.TestCase):

    def test_recipe_defaults(self):
        d = normalize_recipe({"id": "r", "name": "Toast", "ingredients": [{"ingredientId": "b", "quantity": "30"}, {}]})
        self.assertEqual(d["servings"], 1)
        self.assertEqual(d["ingredients"], [{"ingredientId": "b", "quantity": 30.0}])
        self.assertEqual(d["total_purines_mg"], 0)

    def test_recipe_categorical_level(self):
        self.assertEqual(normalize_recipe({"inflammatory_level": "high"})["inflammatory_level"], 8)
        self.assertEqual(normalize_recipe({"inflammatory_level": " Low "})["inflammatory_level"], 2)
        # Derived averages below 1 are kept as computed
        self.assertEqual(normalize_recipe({"inflammatory_level": 0.4})["inflammatory_level"], 0.4)

    def test_pantry_stock_clamped(self):
        d = normalize_pantry({"id": "p", "name": "Home",
                              "ingredients": [{"ingredientId": "x", "quantityGrams": -20}]})
        self.assertEqual(d["ingredients"], [{"ingredientId": "x", "quantityGrams": 0}])
        self.assertFalse(d["isActive"])

    def test_index_by_id_keeps_first(self):
        index = index_by_id([{"id": "a", "n": 1}, {"id": "a", "n": 2}, {"n": 3}])
        self.assertEqual(index, {"a": {"id": "a", "n": 1}})


class TestIngredient(unittest.TestCase):

    def test_negative_amount_rejected(self):
        with self.assertRaises(ValueError):
            Ingredient("Bad", -1, 10)

    def test_category_and_band(self):
        ing = Ingredient.from_dict({"id": "s", "name": "Sardines", "purinesPer100g": 480,
                                    "kcalsPer100g": 208, "inflammatoryLevel": 7, "tags": "fish, canned"})
        self.assertEqual(ing.category(), "fish")
        self.assertEqual(ing.tag_list(), ["fish", "canned"])
        self.assertEqual(ing.inflammation_band(), "high")
        self.assertEqual(Ingredient("Salt").category(), "Uncategorized")
        self.assertEqual([inflammation_band(x) for x in (1, 3, 4, 6, 6.5, 10)],
                         ["low", "low", "medium", "medium", "high", "high"])


class TestDates(unittest.TestCase):

    def test_iso_day_is_fixed_width(self):
        self.assertEqual(iso_day("2025-01-15"), "2025-01-15")
        self.assertEqual(iso_day("20250115"), "2025-01-15")
        self.assertEqual(iso_day(" 2025-1-5 "), "2025-01-05")
        self.assertEqual(parse_day("20250118").isoweekday(), 6)

    def test_bad_dates_rejected(self):
        for value in ("15/01/2025", "2025-02-30", "soon", ""):
            with self.assertRaises(ValueError):
                iso_day(value)


class TestSearch(unittest.TestCase):

    def test_filter_ingredients(self):
        items = [
            {"name": "Chicken breast", "tags": "meat", "inflammatoryLevel": 4},
            {"name": "Spinach", "tags": "vegetables", "inflammatoryLevel": 1},
            {"name": "Bacon", "tags": "Meat, processed", "inflammatoryLevel": 9},
        ]
        self.assertEqual(len(filter_ingredients(items, "MEAT")), 2)
        self.assertEqual([i["name"] for i in filter_ingredients(items, "", "low")], ["Spinach"])
        self.assertEqual([i["name"] for i in filter_ingredients(items, "meat", "high")], ["Bacon"])

    def test_filter_recipes(self):
        recipes = [{"name": "Salad", "tags": "light", "safe_for_gout": True},
                   {"name": "Liver pate", "tags": "", "safe_for_gout": False}]
        self.assertEqual([r["name"] for r in filter_recipes(recipes, safe="unsafe")], ["Liver pate"])
        self.assertEqual([r["name"] for r in filter_recipes(recipes, "LIGHT", "safe")], ["Salad"])
        self.assertEqual(len(filter_recipes(recipes)), 2)


if __name__ == '__main__':
    unittest.main()
