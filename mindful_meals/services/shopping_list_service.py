"""Shopping list generation and maintenance.

Every path that changes a list's items ends by rewriting ``ShoppingList.stats``
from the live item set inside the same commit, so readers never observe a
stale snapshot.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from mindful_meals.models.enums import (
    ItemPriority,
    ItemSource,
    ShoppingListStatus,
    ShoppingListType,
)
from mindful_meals.models.household import Household
from mindful_meals.models.mixins import as_utc
from mindful_meals.models.pantry import PantryItem
from mindful_meals.models.shopping_list import ShoppingList, ShoppingListItem
from mindful_meals.schemas.shopping_list import (
    ShoppingListGenerate,
    ShoppingListItemComplete,
    ShoppingListItemCreate,
    ShoppingListUpdate,
)
from mindful_meals.services.clock import Clock, utc_now
from mindful_meals.services.errors import NotFoundError
from mindful_meals.services.pantry_service import PantryService
from mindful_meals.services.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)

# Low stock items are topped up to this many units
RESTOCK_TARGET = Decimal(2)
MIN_RESTOCK_QUANTITY = Decimal(1)


def compute_stats(items: Iterable[ShoppingListItem]) -> dict[str, Any]:
    """Summarize a list's items. The result is stored as ShoppingList.stats."""
    items = list(items)
    completed = sum(1 for item in items if item.is_completed)
    return {
        "total_items": len(items),
        "completed_items": completed,
        "pending_items": len(items) - completed,
        "priority_items": sum(1 for item in items if item.is_high_priority),
        "organic_items": sum(1 for item in items if (item.preferences or {}).get("organic")),
        "local_items": sum(1 for item in items if (item.preferences or {}).get("local")),
        "categories": list(dict.fromkeys(item.category for item in items)),
        "vendors": list(
            dict.fromkeys(item.preferred_vendor for item in items if item.preferred_vendor)
        ),
    }


def restock_quantity(current: Decimal) -> Decimal:
    """Quantity to buy so a low item gets back to the restock target (at least one unit)."""
    return max(MIN_RESTOCK_QUANTITY, RESTOCK_TARGET - Decimal(current))


def default_list_name(list_type: ShoppingListType) -> str:
    return f"Auto-generated {list_type.value.replace('_', ' ')} list"


class ShoppingListService:
    """Service for shopping list operations."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.db = db
        self.clock = clock
        self.pantry = PantryService(db, clock=clock)

    # --- Generation ---

    def generate_shopping_list(
        self,
        household_id: int,
        list_type: ShoppingListType,
        options: ShoppingListGenerate | None = None,
    ) -> ShoppingList:
        """Create a list for a household and fill it from the pantry.

        Low stock items (type low_stock or include_low_stock) become HIGH
        priority lines topping the item up to two units. Items expiring within
        the week (type expiry_based or include_expiring) become URGENT lines
        for their full quantity. Both sets are concatenated as-is, so an item
        that is low and expiring yields two lines.

        The list, its items and its stats are committed together; on failure
        nothing is persisted.
        """
        options = options or ShoppingListGenerate(type=list_type)
        household = self.pantry.get_household(household_id)

        preferences = None
        if options.preferred_vendors:
            preferences = {"preferred_vendors": options.preferred_vendors}

        with unit_of_work(self.db):
            shopping_list = ShoppingList(
                household_id=household_id,
                name=options.name or default_list_name(list_type),
                description=options.description,
                type=list_type,
                status=ShoppingListStatus.DRAFT,
                planned_shopping_date=as_utc(options.planned_shopping_date),
                estimated_budget=options.estimated_budget or 0,
                currency=household.currency,
                preferences=preferences,
                list_metadata={
                    "source": list_type.value,
                    "generated_by": "system",
                    "generation_reason": "Automated inventory analysis",
                },
            )
            self.db.add(shopping_list)
            self.db.flush()

            items: list[ShoppingListItem] = []
            if list_type == ShoppingListType.LOW_STOCK or options.include_low_stock:
                items.extend(
                    self._low_stock_line(pantry_item, household)
                    for pantry_item in self.pantry.get_low_stock_items(household_id)
                )
            if list_type == ShoppingListType.EXPIRY_BASED or options.include_expiring:
                items.extend(
                    self._expiry_line(pantry_item, household)
                    for pantry_item in self.pantry.get_expiring_items(household_id)
                )

            shopping_list.items.extend(items)
            self.db.flush()
            self._refresh_stats(shopping_list)

        self.db.refresh(shopping_list)
        logger.info(
            f"Generated {list_type.value} shopping list {shopping_list.id} "
            f"for household {household_id} with {len(items)} items"
        )
        return shopping_list

    def _line_from_pantry_item(self, item: PantryItem, household: Household) -> ShoppingListItem:
        return ShoppingListItem(
            name=item.name,
            description=item.description,
            category=item.category.value,
            quantity=item.quantity,
            unit=item.unit,
            estimated_price=item.price,
            currency=item.currency or household.currency,
            brand=item.brand,
            barcode=item.barcode,
            item_metadata={"related_pantry_item_id": item.id},
        )

    def _low_stock_line(self, item: PantryItem, household: Household) -> ShoppingListItem:
        line = self._line_from_pantry_item(item, household)
        line.quantity = restock_quantity(item.quantity)
        line.priority = ItemPriority.HIGH
        line.source = ItemSource.LOW_STOCK
        return line

    def _expiry_line(self, item: PantryItem, household: Household) -> ShoppingListItem:
        line = self._line_from_pantry_item(item, household)
        line.description = (
            f"Replacing expiring item (expires: {item.expiry_date.strftime('%d %b %Y')})"
        )
        line.priority = ItemPriority.URGENT
        line.source = ItemSource.EXPIRY
        return line

    def _refresh_stats(self, shopping_list: ShoppingList) -> None:
        shopping_list.stats = compute_stats(shopping_list.active_items)

    # --- Retrieval ---

    def list_shopping_lists(
        self,
        household_id: int,
        status: ShoppingListStatus | None = None,
        list_type: ShoppingListType | None = None,
    ) -> list[ShoppingList]:
        """Active lists of a household, newest first."""
        query = self.db.query(ShoppingList).filter(
            ShoppingList.household_id == household_id,
            ShoppingList.is_active.is_(True),
        )
        if status:
            query = query.filter(ShoppingList.status == status)
        if list_type:
            query = query.filter(ShoppingList.type == list_type)
        return query.order_by(ShoppingList.created_at.desc(), ShoppingList.id.desc()).all()

    def get_shopping_list(self, list_id: int, household_id: int | None = None) -> ShoppingList:
        query = self.db.query(ShoppingList).filter(
            ShoppingList.id == list_id,
            ShoppingList.is_active.is_(True),
        )
        if household_id is not None:
            query = query.filter(ShoppingList.household_id == household_id)

        shopping_list = query.first()
        if not shopping_list:
            raise NotFoundError("Shopping list not found")
        return shopping_list

    def update_shopping_list(
        self,
        list_id: int,
        data: ShoppingListUpdate,
        household_id: int | None = None,
    ) -> ShoppingList:
        """Update list-level fields (name, status, dates, budget, spend)."""
        shopping_list = self.get_shopping_list(list_id, household_id)
        with unit_of_work(self.db):
            for name, value in data.model_dump(exclude_unset=True).items():
                setattr(shopping_list, name, value)
        self.db.refresh(shopping_list)
        return shopping_list

    # --- Item mutations ---

    def _get_item(self, shopping_list: ShoppingList, item_id: int) -> ShoppingListItem:
        for item in shopping_list.active_items:
            if item.id == item_id:
                return item
        raise NotFoundError("Shopping list item not found")

    def add_item(
        self,
        list_id: int,
        data: ShoppingListItemCreate,
        household_id: int | None = None,
    ) -> ShoppingList:
        """Add a line by hand and refresh the list stats."""
        shopping_list = self.get_shopping_list(list_id, household_id)
        values = data.model_dump()
        values["currency"] = values["currency"] or shopping_list.currency

        with unit_of_work(self.db):
            shopping_list.items.append(ShoppingListItem(**values))
            self.db.flush()
            self._refresh_stats(shopping_list)
        self.db.refresh(shopping_list)
        return shopping_list

    def set_item_completed(
        self,
        list_id: int,
        item_id: int,
        data: ShoppingListItemComplete,
        household_id: int | None = None,
    ) -> ShoppingList:
        """Check a line off or un-check it, then refresh the list stats."""
        shopping_list = self.get_shopping_list(list_id, household_id)
        item = self._get_item(shopping_list, item_id)

        with unit_of_work(self.db):
            item.is_completed = data.completed
            item.completed_date = self.clock() if data.completed else None
            if data.actual_price is not None:
                item.actual_price = data.actual_price
            if data.purchased_from is not None:
                item.purchased_from = data.purchased_from
            self._refresh_stats(shopping_list)
        self.db.refresh(shopping_list)
        return shopping_list

    def remove_item(
        self,
        list_id: int,
        item_id: int,
        household_id: int | None = None,
    ) -> ShoppingList:
        """Soft delete a line and refresh the list stats."""
        shopping_list = self.get_shopping_list(list_id, household_id)
        item = self._get_item(shopping_list, item_id)

        with unit_of_work(self.db):
            item.soft_delete()
            self._refresh_stats(shopping_list)
        self.db.refresh(shopping_list)
        return shopping_list
