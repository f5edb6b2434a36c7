"""Household API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mindful_meals.api.dependencies import get_pantry_service
from mindful_meals.config import get_settings
from mindful_meals.schemas.common import ApiResponse
from mindful_meals.schemas.household import HouseholdCreate, HouseholdResponse
from mindful_meals.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/households", tags=["households"])


@router.post(
    "", response_model=ApiResponse[HouseholdResponse], status_code=status.HTTP_201_CREATED
)
def create_household(
    household_data: HouseholdCreate,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Create a household."""
    household = pantry.create_household(household_data, get_settings().default_currency)
    return ApiResponse(
        data=HouseholdResponse.model_validate(household),
        message="Household created successfully",
    )


@router.get("/{household_id}", response_model=ApiResponse[HouseholdResponse])
def get_household(
    household_id: int,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Get a household."""
    household = pantry.get_household(household_id)
    return ApiResponse(
        data=HouseholdResponse.model_validate(household),
        message="Household retrieved successfully",
    )
