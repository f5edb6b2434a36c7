"""Pydantic schemas for API requests and responses."""

from mindful_meals.schemas.analytics import InventoryAnalytics
from mindful_meals.schemas.common import ApiResponse, ErrorResponse, OptionResponse
from mindful_meals.schemas.household import HouseholdCreate, HouseholdResponse
from mindful_meals.schemas.pantry import (
    PantryFilters,
    PantryItemCreate,
    PantryItemResponse,
    PantryItemUpdate,
    WasteCreate,
)
from mindful_meals.schemas.shopping_list import (
    ShoppingListDetailResponse,
    ShoppingListGenerate,
    ShoppingListItemCreate,
    ShoppingListItemResponse,
    ShoppingListResponse,
    ShoppingListUpdate,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "OptionResponse",
    "HouseholdCreate",
    "HouseholdResponse",
    "PantryFilters",
    "PantryItemCreate",
    "PantryItemUpdate",
    "PantryItemResponse",
    "WasteCreate",
    "ShoppingListGenerate",
    "ShoppingListUpdate",
    "ShoppingListItemCreate",
    "ShoppingListItemResponse",
    "ShoppingListResponse",
    "ShoppingListDetailResponse",
    "InventoryAnalytics",
]
