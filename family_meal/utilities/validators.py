"""
Input validation schemas using Pydantic for request bodies.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from family_meal.domain.MealPlanEntry import iso_day
from family_meal.domain.schema import normalize_tags

SLOT_PATTERN = r'^(breakfast|lunch|dinner|snack|school_extra1|school_extra2)$'


def _iso_date(v: str) -> str:
    return iso_day(v)


class IngredientInput(BaseModel):
    """Schema for ingredient input validation (per-100g values)."""
    name: str = Field(..., min_length=1, max_length=100)
    purinesPer100g: float = Field(0, ge=0)
    kcalsPer100g: float = Field(0, ge=0)
    inflammatoryLevel: float = Field(5, ge=1, le=10)
    tags: Union[str, List[str]] = ""
    notes: str = ""

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v

    @field_validator('tags')
    @classmethod
    def join_tags(cls, v):
        """Store tags as one comma-separated string."""
        return normalize_tags(v)


class RecipeIngredientInput(BaseModel):
    ingredientId: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=0)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    type: Optional[str] = Field(None, pattern=r'^(breakfast|lunch_dinner|snack)$')
    servings: int = Field(1, ge=1, le=50)
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)
    tags: Union[str, List[str]] = ""
    notes: str = ""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def join_tags(cls, v):
        return normalize_tags(v)


class RecipePreviewInput(BaseModel):
    servings: int = Field(1, ge=1, le=50)
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)


class PantryInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class StockInput(BaseModel):
    """Schema for pantry stock updates."""
    ingredientId: str = Field(..., min_length=1)
    quantityGrams: float

    @field_validator('quantityGrams')
    @classmethod
    def validate_quantity(cls, v):
        """Ensure quantity is not negative."""
        if v < 0:
            raise ValueError('Quantity cannot be negative')
        return v


class MealAssignInput(BaseModel):
    """Schema for assigning a recipe to a meal slot."""
    personId: str = Field(..., min_length=1)
    date: str
    slot: str = Field(..., pattern=SLOT_PATTERN)
    recipeId: str = Field(..., min_length=1)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _iso_date(v)


class PersonTargetsInput(BaseModel):
    """Schema for per-person daily targets; omitted fields keep their defaults."""
    name: str = ""
    purineMinPerDay: Optional[float] = Field(None, ge=0)
    purineMaxPerDay: Optional[float] = Field(None, ge=0)
    kcalMinPerDay: Optional[float] = Field(None, ge=0)
    kcalMaxPerDay: Optional[float] = Field(None, ge=0)
    waterTargetMl: Optional[float] = Field(None, ge=0)


class WaterInput(BaseModel):
    personId: str = Field(..., min_length=1)
    date: str
    ml: float = Field(..., gt=0, le=10000)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _iso_date(v)


class CustomShoppingItemInput(BaseModel):
    """Schema for a shopping list row added by hand."""
    ingredientId: str = Field(..., min_length=1)
    quantityGrams: float = Field(..., gt=0)


class TagsInput(BaseModel):
    tags: Union[str, List[str]] = ""

    @field_validator('tags')
    @classmethod
    def join_tags(cls, v):
        return normalize_tags(v)
