"""Shopping list schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindful_meals.models.enums import (
    ItemPriority,
    ItemSource,
    ShoppingListStatus,
    ShoppingListType,
)


class ShoppingListGenerate(BaseModel):
    """Generate a shopping list from the current pantry state."""

    type: ShoppingListType
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    include_low_stock: bool = False
    include_expiring: bool = False
    estimated_budget: Decimal | None = Field(None, ge=0)
    preferred_vendors: list[str] | None = None
    planned_shopping_date: datetime | None = None


class ShoppingListUpdate(BaseModel):
    """Update list-level fields."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    status: ShoppingListStatus | None = None
    planned_shopping_date: datetime | None = None
    actual_shopping_date: datetime | None = None
    estimated_budget: Decimal | None = Field(None, ge=0)
    actual_spent: Decimal | None = Field(None, ge=0)

    @field_validator("name", "status", "estimated_budget", "actual_spent", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Omit a field to leave it unchanged; these columns cannot be cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v


class ShoppingListItemCreate(BaseModel):
    """Add a line to a shopping list by hand."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str = Field(..., min_length=1, max_length=100)
    quantity: Decimal = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=50)
    priority: ItemPriority = ItemPriority.MEDIUM
    source: ItemSource = ItemSource.MANUAL
    estimated_price: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=10)
    brand: str | None = Field(None, max_length=100)
    barcode: str | None = Field(None, max_length=100)
    preferred_vendor: str | None = Field(None, max_length=100)
    preferences: dict[str, Any] | None = None
    alternatives: dict[str, Any] | None = None
    notes: str | None = None


class ShoppingListItemComplete(BaseModel):
    """Check a line off (or un-check it)."""

    completed: bool = True
    actual_price: Decimal | None = Field(None, ge=0)
    purchased_from: str | None = Field(None, max_length=100)


class ShoppingListItemResponse(BaseModel):
    """Shopping list line response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    shopping_list_id: int
    name: str
    description: str | None
    category: str
    quantity: float
    unit: str
    priority: ItemPriority
    source: ItemSource
    estimated_price: float | None
    actual_price: float | None
    currency: str
    brand: str | None
    barcode: str | None
    preferred_vendor: str | None
    preferences: dict[str, Any] | None
    alternatives: dict[str, Any] | None
    metadata: dict[str, Any] | None = Field(None, validation_alias="item_metadata")
    is_completed: bool
    completed_date: datetime | None
    purchased_from: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    is_urgent: bool
    is_high_priority: bool
    price_difference: float | None
    is_over_budget: bool | None
    budget_utilization: int | None
    display_name: str
    full_description: str


class ShoppingListStats(BaseModel):
    """Materialized summary of a list's active items."""

    total_items: int = 0
    completed_items: int = 0
    pending_items: int = 0
    priority_items: int = 0
    organic_items: int = 0
    local_items: int = 0
    categories: list[str] = []
    vendors: list[str] = []


class ShoppingListResponse(BaseModel):
    """Shopping list response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    household_id: int
    name: str
    description: str | None
    status: ShoppingListStatus
    type: ShoppingListType
    planned_shopping_date: datetime | None
    actual_shopping_date: datetime | None
    estimated_budget: float
    actual_spent: float
    currency: str
    preferences: dict[str, Any] | None
    metadata: dict[str, Any] | None = Field(None, validation_alias="list_metadata")
    stats: ShoppingListStats | None
    created_at: datetime
    updated_at: datetime

    completion_rate: int
    is_over_budget: bool
    budget_utilization: int
    can_be_completed: bool
    estimated_total_cost: float
    actual_total_cost: float


class ShoppingListDetailResponse(ShoppingListResponse):
    """Shopping list with its active items attached."""

    items: list[ShoppingListItemResponse] = Field(
        default_factory=list, validation_alias="active_items"
    )
