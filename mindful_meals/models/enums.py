"""Enums for model fields."""

from enum import Enum

from sqlalchemy import Enum as SAEnum


def db_enum(enum_cls: type[Enum], name: str) -> SAEnum:
    """Column type that stores enum values rather than member names."""
    return SAEnum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


class ItemCategory(str, Enum):
    """Closed set of pantry item categories."""

    FRUITS_VEGETABLES = "fruits_vegetables"
    DAIRY_EGGS = "dairy_eggs"
    MEAT_FISH = "meat_fish"
    GRAINS_PULSES = "grains_pulses"
    SPICES_CONDIMENTS = "spices_condiments"
    SNACKS_BEVERAGES = "snacks_beverages"
    BAKERY = "bakery"
    FROZEN_FOODS = "frozen_foods"
    ORGANIC = "organic"
    READY_TO_EAT = "ready_to_eat"
    BEVERAGES = "beverages"
    PERSONAL_CARE = "personal_care"
    HOUSEHOLD = "household"


class ItemStatus(str, Enum):
    """Lifecycle status of a pantry item."""

    ACTIVE = "active"
    LOW_STOCK = "low_stock"
    EXPIRED = "expired"
    CONSUMED = "consumed"
    WASTED = "wasted"


class StorageLocation(str, Enum):
    """Where a pantry item is kept."""

    REFRIGERATOR = "refrigerator"
    FREEZER = "freezer"
    PANTRY = "pantry"
    COUNTERTOP = "countertop"
    SPICE_RACK = "spice_rack"
    WINE_CELLAR = "wine_cellar"


class StockLevel(str, Enum):
    """Coarse quantity classification used for restocking."""

    FULL = "full"
    MEDIUM = "medium"
    LOW = "low"
    CRITICAL = "critical"


class ShoppingListStatus(str, Enum):
    """Shopping list workflow status."""

    DRAFT = "draft"
    ACTIVE = "active"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class ShoppingListType(str, Enum):
    """How a shopping list was produced."""

    MANUAL = "manual"
    AUTO_GENERATED = "auto_generated"
    MEAL_PLAN_BASED = "meal_plan_based"
    LOW_STOCK = "low_stock"
    EXPIRY_BASED = "expiry_based"
    RECIPE_BASED = "recipe_based"


class ItemPriority(str, Enum):
    """Priority of a shopping list line."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ItemSource(str, Enum):
    """Why a line ended up on a shopping list."""

    MANUAL = "manual"
    LOW_STOCK = "low_stock"
    EXPIRY = "expiry"
    MEAL_PLAN = "meal_plan"
    RECIPE = "recipe"
    RECOMMENDATION = "recommendation"
    TRENDING = "trending"


class DietaryType(str, Enum):
    """Household dietary preference."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    NON_VEGETARIAN = "non_vegetarian"
    EGGETARIAN = "eggetarian"
    JAIN = "jain"
    HALAL = "halal"
    KOSHER = "kosher"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"
    NUT_FREE = "nut_free"
    FLEXITARIAN = "flexitarian"
