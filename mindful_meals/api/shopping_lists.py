"""Shopping list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from mindful_meals.api.dependencies import get_shopping_list_service
from mindful_meals.models.enums import ShoppingListStatus, ShoppingListType
from mindful_meals.schemas.common import ApiResponse
from mindful_meals.schemas.shopping_list import (
    ShoppingListDetailResponse,
    ShoppingListGenerate,
    ShoppingListItemComplete,
    ShoppingListItemCreate,
    ShoppingListResponse,
    ShoppingListUpdate,
)
from mindful_meals.services.shopping_list_service import ShoppingListService

router = APIRouter(prefix="/api/v1/households/{household_id}/shopping-lists", tags=["shopping-lists"])

ListService = Annotated[ShoppingListService, Depends(get_shopping_list_service)]


@router.post(
    "",
    response_model=ApiResponse[ShoppingListDetailResponse],
    status_code=status.HTTP_201_CREATED,
)
def generate_shopping_list(
    household_id: int,
    list_data: ShoppingListGenerate,
    service: ListService,
):
    """Generate a shopping list from the household's pantry state."""
    shopping_list = service.generate_shopping_list(household_id, list_data.type, list_data)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list generated successfully",
    )


@router.get("", response_model=ApiResponse[list[ShoppingListResponse]])
def list_shopping_lists(
    household_id: int,
    service: ListService,
    list_status: Annotated[ShoppingListStatus | None, Query(alias="status")] = None,
    list_type: Annotated[ShoppingListType | None, Query(alias="type")] = None,
):
    """List a household's shopping lists, newest first."""
    lists = service.list_shopping_lists(household_id, list_status, list_type)
    return ApiResponse(
        data=[ShoppingListResponse.model_validate(lst) for lst in lists],
        message=f"Found {len(lists)} shopping lists",
    )


@router.get("/{list_id}", response_model=ApiResponse[ShoppingListDetailResponse])
def get_shopping_list(
    household_id: int,
    list_id: int,
    service: ListService,
):
    """Get a shopping list with its items."""
    shopping_list = service.get_shopping_list(list_id, household_id)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list retrieved successfully",
    )


@router.put("/{list_id}", response_model=ApiResponse[ShoppingListDetailResponse])
def update_shopping_list(
    household_id: int,
    list_id: int,
    list_data: ShoppingListUpdate,
    service: ListService,
):
    """Update a shopping list."""
    shopping_list = service.update_shopping_list(list_id, list_data, household_id)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list updated successfully",
    )


@router.post(
    "/{list_id}/items",
    response_model=ApiResponse[ShoppingListDetailResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_shopping_list_item(
    household_id: int,
    list_id: int,
    item_data: ShoppingListItemCreate,
    service: ListService,
):
    """Add an item to a shopping list."""
    shopping_list = service.add_item(list_id, item_data, household_id)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list item added successfully",
    )


@router.post(
    "/{list_id}/items/{item_id}/complete",
    response_model=ApiResponse[ShoppingListDetailResponse],
)
def complete_shopping_list_item(
    household_id: int,
    list_id: int,
    item_id: int,
    completion: ShoppingListItemComplete,
    service: ListService,
):
    """Check an item off (or un-check it)."""
    shopping_list = service.set_item_completed(list_id, item_id, completion, household_id)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list item updated successfully",
    )


@router.delete(
    "/{list_id}/items/{item_id}",
    response_model=ApiResponse[ShoppingListDetailResponse],
)
def remove_shopping_list_item(
    household_id: int,
    list_id: int,
    item_id: int,
    service: ListService,
):
    """Remove an item from a shopping list."""
    shopping_list = service.remove_item(list_id, item_id, household_id)
    return ApiResponse(
        data=ShoppingListDetailResponse.model_validate(shopping_list),
        message="Shopping list item removed successfully",
    )
