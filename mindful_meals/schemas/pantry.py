"""Pantry schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindful_meals.models.enums import ItemCategory, ItemStatus, StockLevel, StorageLocation
from mindful_meals.models.pantry import PantryItem


class PantryItemCreate(BaseModel):
    """Add an item to a household pantry."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: ItemCategory
    storage_location: StorageLocation = StorageLocation.PANTRY
    quantity: Decimal = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=50)
    price: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=10)
    purchase_date: datetime | None = None
    expiry_date: datetime | None = None
    brand: str | None = Field(None, max_length=100)
    barcode: str | None = Field(None, max_length=100)
    nutritional_info: dict[str, Any] | None = None
    dietary_info: dict[str, Any] | None = None
    regional_info: dict[str, Any] | None = None
    cooking_info: dict[str, Any] | None = None


class PantryItemUpdate(BaseModel):
    """Update a pantry item. Only fields present in the payload are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: ItemCategory | None = None
    status: ItemStatus | None = None
    storage_location: StorageLocation | None = None
    quantity: Decimal | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=50)
    price: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=10)
    purchase_date: datetime | None = None
    expiry_date: datetime | None = None
    brand: str | None = Field(None, max_length=100)
    barcode: str | None = Field(None, max_length=100)
    notes: str | None = None
    nutritional_info: dict[str, Any] | None = None
    dietary_info: dict[str, Any] | None = None
    regional_info: dict[str, Any] | None = None
    cooking_info: dict[str, Any] | None = None

    @field_validator(
        "name", "category", "status", "storage_location", "quantity", "unit", mode="before"
    )
    @classmethod
    def reject_null(cls, v):
        """Omit a field to leave it unchanged; these columns cannot be cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v


class PantryFilters(BaseModel):
    """Optional predicates for querying a household pantry."""

    category: ItemCategory | None = None
    storage_location: StorageLocation | None = None
    status: ItemStatus | None = None
    search: str | None = Field(None, min_length=1, max_length=100)
    low_stock: bool = False
    expiring_soon: bool = False


class PantryItemBase(BaseModel):
    """Stored pantry item fields plus the clock-independent derived ones."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    household_id: int
    name: str
    description: str | None
    category: ItemCategory
    status: ItemStatus
    storage_location: StorageLocation
    quantity: float
    unit: str
    price: float | None
    currency: str | None
    purchase_date: datetime | None
    expiry_date: datetime | None
    brand: str | None
    barcode: str | None
    notes: str | None
    nutritional_info: dict[str, Any] | None
    dietary_info: dict[str, Any] | None
    regional_info: dict[str, Any] | None
    cooking_info: dict[str, Any] | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    stock_level: StockLevel
    needs_restocking: bool


class PantryItemResponse(PantryItemBase):
    """Pantry item response, including expiry state relative to the request time."""

    days_until_expiry: int | None
    is_expired: bool
    is_expiring_soon: bool

    @classmethod
    def from_item(cls, item: PantryItem, now: datetime) -> "PantryItemResponse":
        """Build a response with the clock-dependent fields filled in."""
        base = PantryItemBase.model_validate(item)
        return cls(
            **base.model_dump(),
            days_until_expiry=item.days_until_expiry(now),
            is_expired=item.is_expired(now),
            is_expiring_soon=item.is_expiring_soon(now),
        )


class WasteCreate(BaseModel):
    """Record that part of a pantry item was thrown away."""

    quantity: Decimal = Field(..., ge=0)
    reason: str = Field(..., min_length=1, max_length=500)


class BarcodeScanRequest(BaseModel):
    """Barcode scanned by the mobile client."""

    barcode: str = Field(..., min_length=1, max_length=100)


class BarcodeSuggestionResponse(BaseModel):
    """Possible product for an unknown barcode."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    category: ItemCategory
    brand: str | None = None
    description: str | None = None


class BarcodeScanResponse(BaseModel):
    """Result of a barcode scan."""

    found: bool
    item: PantryItemResponse | None = None
    suggestions: list[BarcodeSuggestionResponse] | None = None


class ExpiryCheckResponse(BaseModel):
    """Items expiring soon or already expired, with advice."""

    expiring_soon: list[PantryItemResponse]
    expired: list[PantryItemResponse]
    recommendations: list[str]
