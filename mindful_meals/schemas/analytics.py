"""Inventory analytics schemas."""

from pydantic import BaseModel

from mindful_meals.models.enums import ItemCategory, StorageLocation


class CategoryBreakdown(BaseModel):
    category: ItemCategory
    count: int
    value: float


class StorageBreakdown(BaseModel):
    location: StorageLocation
    count: int
    value: float


class ExpiryBucket(BaseModel):
    """Items whose days until expiry fall at or under `days` (and above the previous bucket)."""

    days: int
    count: int = 0
    value: float = 0.0


class InventoryAnalytics(BaseModel):
    """Summary of a household's active pantry."""

    total_items: int
    active_items: int
    low_stock_items: int
    expiring_items: int
    expired_items: int
    total_value: float
    category_breakdown: list[CategoryBreakdown]
    storage_breakdown: list[StorageBreakdown]
    expiry_timeline: list[ExpiryBucket]
