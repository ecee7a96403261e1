"""Core business logic layer.

Subpackages:
- nutrition: per-recipe nutrition calculator
- reporting: daily / weekly nutrition per person
- shopping: building shopping lists from the meal plan

All functions here are pure: they take snapshots of store collections and
return derived data without touching the store.
"""
__all__ = ["nutrition", "reporting", "shopping", "search"]
