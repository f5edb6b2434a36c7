"""Static lookups for pantry categories and storage locations."""

from enum import Enum

from fastapi import APIRouter

from mindful_meals.models.enums import ItemCategory, StorageLocation
from mindful_meals.schemas.common import ApiResponse, OptionResponse

router = APIRouter(prefix="/api/v1", tags=["reference"])

DEFAULT_ICON = "📦"

CATEGORY_ICONS = {
    ItemCategory.FRUITS_VEGETABLES: "🥬",
    ItemCategory.DAIRY_EGGS: "🥛",
    ItemCategory.MEAT_FISH: "🥩",
    ItemCategory.GRAINS_PULSES: "🌾",
    ItemCategory.SPICES_CONDIMENTS: "🧂",
    ItemCategory.SNACKS_BEVERAGES: "🍿",
    ItemCategory.BAKERY: "🥖",
    ItemCategory.FROZEN_FOODS: "🧊",
    ItemCategory.ORGANIC: "🌱",
    ItemCategory.READY_TO_EAT: "🍱",
    ItemCategory.BEVERAGES: "🥤",
    ItemCategory.PERSONAL_CARE: "🧴",
    ItemCategory.HOUSEHOLD: "🏠",
}

STORAGE_ICONS = {
    StorageLocation.REFRIGERATOR: "❄️",
    StorageLocation.FREEZER: "🧊",
    StorageLocation.PANTRY: "🏠",
    StorageLocation.COUNTERTOP: "🪑",
    StorageLocation.SPICE_RACK: "🧂",
    StorageLocation.WINE_CELLAR: "🍷",
}


def label_for(value: Enum) -> str:
    """Human label for an enum value: "fruits_vegetables" -> "Fruits Vegetables"."""
    return value.value.replace("_", " ").title()


@router.get("/categories", response_model=ApiResponse[list[OptionResponse]])
def list_categories():
    """List pantry item categories."""
    options = [
        OptionResponse(
            value=category.value,
            label=label_for(category),
            icon=CATEGORY_ICONS.get(category, DEFAULT_ICON),
        )
        for category in ItemCategory
    ]
    return ApiResponse(data=options, message="Categories retrieved successfully")


@router.get("/storage-locations", response_model=ApiResponse[list[OptionResponse]])
def list_storage_locations():
    """List storage locations."""
    options = [
        OptionResponse(
            value=location.value,
            label=label_for(location),
            icon=STORAGE_ICONS.get(location, DEFAULT_ICON),
        )
        for location in StorageLocation
    ]
    return ApiResponse(data=options, message="Storage locations retrieved successfully")
