from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"
COMPACT_DATE_FORMAT: Final[str] = "%Y%m%d"

# Recipes below this total purine content are flagged gout-safe (fixed, not configurable)
GOUT_SAFE_PURINE_THRESHOLD_MG: Final[float] = 200

BASE_MEAL_SLOTS: Final[tuple] = ("breakfast", "lunch", "dinner", "snack")
SCHOOL_MEAL_SLOTS: Final[tuple] = ("school_extra1", "school_extra2")
ALL_MEAL_SLOTS: Final[tuple] = BASE_MEAL_SLOTS + SCHOOL_MEAL_SLOTS
RECIPE_TYPES: Final[tuple] = ("breakfast", "lunch_dinner", "snack")

SCHOOL_PERSON_ID: Final[str] = "aidam"
FAMILY: Final[dict[str, str]] = {
    "exan": "Exan (Dad)",
    "nadia": "Nadia (Mom)",
    "aidam": "Aidam (Son)",
}

DEFAULT_PERSON_TARGETS: Final[dict[str, dict[str, int]]] = {
    "exan": {
        "purineMinPerDay": 0,
        "purineMaxPerDay": 400,
        "kcalMinPerDay": 1800,
        "kcalMaxPerDay": 2200,
        "waterTargetMl": 2500,
    },
    "nadia": {
        "purineMinPerDay": 0,
        "purineMaxPerDay": 1000,
        "kcalMinPerDay": 1500,
        "kcalMaxPerDay": 2000,
        "waterTargetMl": 2000,
    },
    "aidam": {
        "purineMinPerDay": 0,
        "purineMaxPerDay": 1000,
        "kcalMinPerDay": 2000,
        "kcalMaxPerDay": 2800,
        "waterTargetMl": 2000,
    },
}

PURINE_WARNING_RATIO: Final[float] = 0.75
KCAL_WARNING_RATIO: Final[float] = 0.9

# Inflammation bands used by filters; categorical records map to the band midpoints
INFLAMMATION_BANDS: Final[dict[str, tuple[int, int]]] = {
    "low": (1, 3),
    "medium": (4, 6),
    "high": (7, 10),
}
INFLAMMATION_CATEGORY_LEVELS: Final[dict[str, int]] = {"low": 2, "medium": 5, "high": 8}

UNCATEGORIZED: Final[str] = "Uncategorized"
ALL_ITEMS: Final[str] = "All Items"
