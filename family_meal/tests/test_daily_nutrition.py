import unittest

from family_meal.domain.MealPlanEntry import MealPlanEntry, monday_of, slots_for, week_dates
from family_meal.logic.reporting.nutrition import (
    build_slot_lookup, compute_daily_nutrition, compute_week_nutrition, kcal_status, purine_status
)

RECIPES = [
    {"id": "oats", "name": "Oats", "total_purines_mg": 60, "total_kcals": 350, "inflammatory_level": 2},
    {"id": "steak", "name": "Steak", "total_purines_mg": 250, "total_kcals": 700, "inflammatory_level": 7},
    {"id": "bar", "name": "Granola bar", "total_purines_mg": 20, "total_kcals": 180, "inflammatory_level": 3},
]

WEDNESDAY = "2025-01-15"
SATURDAY = "2025-01-18"


class TestMealSlots(unittest.TestCase):

    def test_school_person_weekday_slots(self):
        self.assertEqual(len(slots_for("aidam", WEDNESDAY)), 6)
        self.assertEqual(len(slots_for("aidam", SATURDAY)), 4)
        self.assertEqual(len(slots_for("exan", WEDNESDAY)), 4)

    def test_week_dates(self):
        dates = week_dates(WEDNESDAY)
        self.assertEqual(dates[0], "2025-01-13")
        self.assertEqual(dates[-1], "2025-01-19")
        self.assertEqual(monday_of(SATURDAY).isoformat(), "2025-01-13")

    def test_unknown_slot_rejected(self):
        with self.assertRaises(ValueError):
            MealPlanEntry("exan", WEDNESDAY, "brunch", "oats")


class TestDailyNutrition(unittest.TestCase):

    def test_school_extra_slots_counted_on_weekdays_only(self):
        entries = []
        for d in (WEDNESDAY, SATURDAY):
            entries += [
                {"personId": "aidam", "date": d, "slot": "breakfast", "recipeId": "oats"},
                {"personId": "aidam", "date": d, "slot": "school_extra1", "recipeId": "bar"},
            ]
        lookup = build_slot_lookup(entries, RECIPES)
        wed = compute_daily_nutrition("aidam", WEDNESDAY, lookup)
        sat = compute_daily_nutrition("aidam", SATURDAY, lookup)
        self.assertEqual(wed["meal_count"], 2)
        self.assertEqual(wed["total_kcals"], 530)
        self.assertEqual(len(wed["slots"]), 6)
        self.assertEqual(sat["meal_count"], 1)
        self.assertEqual(sat["total_kcals"], 350)
        self.assertEqual(len(sat["slots"]), 4)

    def test_totals_and_average(self):
        entries = [
            {"personId": "exan", "date": WEDNESDAY, "slot": "breakfast", "recipeId": "oats"},
            {"personId": "exan", "date": WEDNESDAY, "slot": "dinner", "recipeId": "steak"},
            {"personId": "nadia", "date": WEDNESDAY, "slot": "lunch", "recipeId": "steak"},
        ]
        day = compute_daily_nutrition("exan", WEDNESDAY, build_slot_lookup(entries, RECIPES))
        self.assertEqual(day["total_purines_mg"], 310)
        self.assertEqual(day["total_kcals"], 1050)
        self.assertEqual(day["average_inflammatory_level"], 4.5)
        self.assertEqual(day["meal_count"], 2)

    def test_no_meals(self):
        day = compute_daily_nutrition("exan", WEDNESDAY, build_slot_lookup([], RECIPES))
        self.assertEqual(day["total_purines_mg"], 0)
        self.assertEqual(day["total_kcals"], 0)
        self.assertEqual(day["average_inflammatory_level"], 0)
        self.assertEqual(day["meal_count"], 0)

    def test_categorical_recipe_level_counts_in_average(self):
        recipes = RECIPES + [{"id": "legacy", "name": "Old fry-up", "total_purines_mg": 90,
                              "total_kcals": 600, "inflammatory_level": "high"}]
        entries = [
            {"personId": "nadia", "date": WEDNESDAY, "slot": "breakfast", "recipeId": "oats"},
            {"personId": "nadia", "date": WEDNESDAY, "slot": "dinner", "recipeId": "legacy"},
        ]
        day = compute_daily_nutrition("nadia", WEDNESDAY, build_slot_lookup(entries, recipes))
        self.assertEqual(day["average_inflammatory_level"], 5)

    def test_first_entry_wins_and_dangling_recipe_skipped(self):
        entries = [
            {"personId": "exan", "date": WEDNESDAY, "slot": "lunch", "recipeId": "oats"},
            {"personId": "exan", "date": WEDNESDAY, "slot": "lunch", "recipeId": "steak"},
            {"personId": "exan", "date": WEDNESDAY, "slot": "dinner", "recipeId": "deleted"},
        ]
        day = compute_daily_nutrition("exan", WEDNESDAY, build_slot_lookup(entries, RECIPES))
        self.assertEqual(day["meal_count"], 1)
        self.assertEqual(day["total_purines_mg"], 60)


class TestStatus(unittest.TestCase):

    def test_purine_status(self):
        self.assertEqual(purine_status(300, 400), "ok")
        self.assertEqual(purine_status(301, 400), "warning")
        self.assertEqual(purine_status(401, 400), "over")
        self.assertEqual(purine_status(5000, None), "ok")

    def test_kcal_status(self):
        self.assertEqual(kcal_status(1980, 2200), "ok")
        self.assertEqual(kcal_status(2000, 2200), "warning")
        self.assertEqual(kcal_status(2300, 2200), "over")


class TestWeekNutrition(unittest.TestCase):

    def test_week_view(self):
        entries = [
            {"personId": "exan", "date": WEDNESDAY, "slot": "dinner", "recipeId": "steak"},
            {"personId": "exan", "date": WEDNESDAY, "slot": "lunch", "recipeId": "steak"},
            {"personId": "exan", "date": "2025-01-20", "slot": "lunch", "recipeId": "steak"},
        ]
        water = [{"personId": "exan", "date": WEDNESDAY, "ml": 500}, {"personId": "exan", "date": WEDNESDAY, "ml": 250}]
        persons = [{"id": "exan", "purineMaxPerDay": 600}]
        week = compute_week_nutrition(WEDNESDAY, ["exan", "nadia"], entries, RECIPES, persons, water)
        self.assertEqual(len(week["dates"]), 7)
        exan = week["persons"]["exan"]
        self.assertEqual(exan["targets"]["purineMaxPerDay"], 600)
        self.assertEqual(exan["targets"]["kcalMaxPerDay"], 2200)
        wed = exan["days"][WEDNESDAY]
        self.assertEqual(wed["meals"], {"lunch": "Steak", "dinner": "Steak"})
        self.assertEqual(wed["purine_status"], "warning")
        self.assertEqual(wed["kcal_status"], "ok")
        self.assertEqual(wed["water_ml"], 750)
        self.assertEqual(exan["week_totals"]["meal_count"], 2)
        self.assertEqual(week["persons"]["nadia"]["week_totals"]["total_kcals"], 0)


if __name__ == '__main__':
    unittest.main()
