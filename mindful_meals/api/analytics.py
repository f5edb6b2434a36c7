"""Inventory analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from mindful_meals.api.dependencies import get_analytics_service
from mindful_meals.schemas.analytics import InventoryAnalytics
from mindful_meals.schemas.common import ApiResponse
from mindful_meals.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/v1/households/{household_id}", tags=["analytics"])


@router.get("/analytics", response_model=ApiResponse[InventoryAnalytics])
def get_inventory_analytics(
    household_id: int,
    service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """Counts, value and breakdowns for the household pantry."""
    return ApiResponse(
        data=service.get_inventory_analytics(household_id),
        message="Inventory analytics retrieved successfully",
    )
