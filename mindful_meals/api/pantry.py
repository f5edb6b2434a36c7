"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from mindful_meals.api.dependencies import get_clock, get_pantry_service
from mindful_meals.models.enums import ItemCategory, ItemStatus, StorageLocation
from mindful_meals.schemas.common import ApiResponse
from mindful_meals.schemas.pantry import (
    BarcodeScanRequest,
    BarcodeScanResponse,
    BarcodeSuggestionResponse,
    ExpiryCheckResponse,
    PantryFilters,
    PantryItemCreate,
    PantryItemResponse,
    PantryItemUpdate,
    WasteCreate,
)
from mindful_meals.services.clock import Clock
from mindful_meals.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/households/{household_id}", tags=["pantry"])


@router.post(
    "/pantry-items",
    response_model=ApiResponse[PantryItemResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_pantry_item(
    household_id: int,
    item_data: PantryItemCreate,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """Add an item to the household pantry."""
    item = pantry.add_pantry_item(household_id, item_data)
    return ApiResponse(
        data=PantryItemResponse.from_item(item, clock()),
        message="Pantry item added successfully",
    )


@router.get("/pantry-items", response_model=ApiResponse[list[PantryItemResponse]])
def list_pantry_items(
    household_id: int,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
    category: ItemCategory | None = None,
    storage_location: StorageLocation | None = None,
    item_status: Annotated[ItemStatus | None, Query(alias="status")] = None,
    search: Annotated[str | None, Query(min_length=1, max_length=100)] = None,
    low_stock: bool = False,
    expiring_soon: bool = False,
):
    """List active pantry items, optionally filtered."""
    filters = PantryFilters(
        category=category,
        storage_location=storage_location,
        status=item_status,
        search=search,
        low_stock=low_stock,
        expiring_soon=expiring_soon,
    )
    items = pantry.query_pantry_items(household_id, filters)
    now = clock()
    return ApiResponse(
        data=[PantryItemResponse.from_item(item, now) for item in items],
        message=f"Found {len(items)} pantry items",
    )


@router.get("/pantry-items/{item_id}", response_model=ApiResponse[PantryItemResponse])
def get_pantry_item(
    household_id: int,
    item_id: int,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """Get a specific pantry item."""
    item = pantry.get_pantry_item(item_id, household_id)
    return ApiResponse(
        data=PantryItemResponse.from_item(item, clock()),
        message="Pantry item retrieved successfully",
    )


@router.put("/pantry-items/{item_id}", response_model=ApiResponse[PantryItemResponse])
def update_pantry_item(
    household_id: int,
    item_id: int,
    item_data: PantryItemUpdate,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """Update a pantry item."""
    item = pantry.update_pantry_item(item_id, item_data, household_id)
    return ApiResponse(
        data=PantryItemResponse.from_item(item, clock()),
        message="Pantry item updated successfully",
    )


@router.delete("/pantry-items/{item_id}", response_model=ApiResponse[None])
def delete_pantry_item(
    household_id: int,
    item_id: int,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Remove an item from the pantry (soft delete)."""
    pantry.remove_pantry_item(item_id, household_id)
    return ApiResponse(message="Pantry item removed successfully")


@router.post(
    "/pantry-items/{item_id}/waste", response_model=ApiResponse[PantryItemResponse]
)
def track_waste(
    household_id: int,
    item_id: int,
    waste: WasteCreate,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """Record wasted quantity for a pantry item."""
    item = pantry.track_waste(item_id, waste.quantity, waste.reason, household_id)
    return ApiResponse(
        data=PantryItemResponse.from_item(item, clock()),
        message="Waste tracked successfully",
    )


@router.post("/scan-barcode", response_model=ApiResponse[BarcodeScanResponse])
def scan_barcode(
    household_id: int,
    request: BarcodeScanRequest,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """Look up a scanned barcode in the pantry, with suggestions when unknown."""
    result = pantry.scan_barcode(request.barcode, household_id)

    if result.found:
        data = BarcodeScanResponse(
            found=True, item=PantryItemResponse.from_item(result.item, clock())
        )
        message = "Item found in pantry"
    else:
        data = BarcodeScanResponse(
            found=False,
            suggestions=[
                BarcodeSuggestionResponse.model_validate(s) for s in result.suggestions or []
            ],
        )
        message = "Item not found, suggestions provided"

    return ApiResponse(data=data, message=message)


@router.get("/expiry-check", response_model=ApiResponse[ExpiryCheckResponse])
def expiry_check(
    household_id: int,
    pantry: Annotated[PantryService, Depends(get_pantry_service)],
    clock: Annotated[Clock, Depends(get_clock)],
):
    """List items expiring soon and already expired."""
    check = pantry.check_expiring_items(household_id)
    now = clock()
    return ApiResponse(
        data=ExpiryCheckResponse(
            expiring_soon=[PantryItemResponse.from_item(i, now) for i in check.expiring_soon],
            expired=[PantryItemResponse.from_item(i, now) for i in check.expired],
            recommendations=check.recommendations,
        ),
        message="Expiry check completed successfully",
    )
