"""Household schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mindful_meals.models.enums import DietaryType


class HouseholdCreate(BaseModel):
    """Create a household."""

    name: str = Field(..., min_length=1, max_length=255)
    region: str | None = Field(None, max_length=100)
    dietary_type: DietaryType = DietaryType.VEGETARIAN
    budget: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=1, max_length=10)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    preferences: dict[str, Any] | None = None
    pantry_settings: dict[str, Any] | None = None


class HouseholdResponse(BaseModel):
    """Household response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    region: str | None
    dietary_type: DietaryType
    budget: float | None
    currency: str
    city: str | None
    state: str | None
    preferences: dict[str, Any] | None
    pantry_settings: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
