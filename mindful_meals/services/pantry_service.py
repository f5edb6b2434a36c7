"""Pantry service: item CRUD, filtered queries, waste tracking and barcode scans."""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from mindful_meals.models.enums import ItemStatus
from mindful_meals.models.household import Household
from mindful_meals.models.mixins import as_utc
from mindful_meals.models.pantry import EXPIRING_SOON_DAYS, LOW_STOCK_THRESHOLD, PantryItem
from mindful_meals.schemas.household import HouseholdCreate
from mindful_meals.schemas.pantry import PantryFilters, PantryItemCreate, PantryItemUpdate
from mindful_meals.services.barcode_lookup import (
    BarcodeLookup,
    BarcodeSuggestion,
    StaticBarcodeLookup,
)
from mindful_meals.services.clock import Clock, utc_now
from mindful_meals.services.errors import NotFoundError
from mindful_meals.services.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)

DATE_FIELDS = ("purchase_date", "expiry_date")


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass
class BarcodeScanResult:
    """Outcome of scanning a barcode against a household pantry."""

    found: bool
    item: PantryItem | None = None
    suggestions: list[BarcodeSuggestion] | None = None


@dataclass
class ExpiryCheck:
    """Items that need attention because of their expiry date."""

    expiring_soon: list[PantryItem] = field(default_factory=list)
    expired: list[PantryItem] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


class PantryService:
    """Service for pantry-related operations."""

    def __init__(
        self,
        db: Session,
        clock: Clock = utc_now,
        barcode_lookup: BarcodeLookup | None = None,
    ):
        self.db = db
        self.clock = clock
        self.barcode_lookup = barcode_lookup or StaticBarcodeLookup()

    # --- Households ---

    def create_household(self, data: HouseholdCreate, default_currency: str) -> Household:
        """Create a household, using the default currency when none is given."""
        values = data.model_dump()
        values["currency"] = values["currency"] or default_currency

        household = Household(**values)
        with unit_of_work(self.db):
            self.db.add(household)
        self.db.refresh(household)
        logger.info(f"Created household {household.id} ({household.name})")
        return household

    def get_household(self, household_id: int) -> Household:
        """Get an active household or raise NotFoundError."""
        household = (
            self.db.query(Household)
            .filter(Household.id == household_id, Household.is_active.is_(True))
            .first()
        )
        if not household:
            raise NotFoundError("Household not found")
        return household

    # --- Item management ---

    def add_pantry_item(self, household_id: int, data: PantryItemCreate) -> PantryItem:
        """Add an item to a household pantry."""
        self.get_household(household_id)

        values = data.model_dump()
        for name in DATE_FIELDS:
            values[name] = as_utc(values[name])

        item = PantryItem(household_id=household_id, **values)
        with unit_of_work(self.db):
            self.db.add(item)
        self.db.refresh(item)
        logger.info(f"Added pantry item {item.id} ({item.name}) to household {household_id}")
        return item

    def get_pantry_item(self, item_id: int, household_id: int | None = None) -> PantryItem:
        """Get an active pantry item, optionally scoped to a household."""
        query = self.db.query(PantryItem).filter(
            PantryItem.id == item_id,
            PantryItem.is_active.is_(True),
        )
        if household_id is not None:
            query = query.filter(PantryItem.household_id == household_id)

        item = query.first()
        if not item:
            raise NotFoundError("Pantry item not found")
        return item

    def update_pantry_item(
        self,
        item_id: int,
        data: PantryItemUpdate,
        household_id: int | None = None,
    ) -> PantryItem:
        """Apply the fields present in the payload to a pantry item."""
        item = self.get_pantry_item(item_id, household_id)

        updates = data.model_dump(exclude_unset=True)
        for name in DATE_FIELDS:
            if name in updates:
                updates[name] = as_utc(updates[name])

        with unit_of_work(self.db):
            for name, value in updates.items():
                setattr(item, name, value)
        self.db.refresh(item)
        return item

    def remove_pantry_item(self, item_id: int, household_id: int | None = None) -> None:
        """Soft delete a pantry item."""
        item = self.get_pantry_item(item_id, household_id)
        with unit_of_work(self.db):
            item.soft_delete()
        logger.info(f"Removed pantry item {item_id}")

    # --- Queries ---

    def _active_items(self, household_id: int) -> Query:
        return self.db.query(PantryItem).filter(
            PantryItem.household_id == household_id,
            PantryItem.is_active.is_(True),
        )

    def _expiring_window(self, query: Query) -> Query:
        """Restrict to items expiring after now and within the expiring-soon window."""
        now = self.clock()
        return query.filter(
            PantryItem.expiry_date > now,
            PantryItem.expiry_date <= now + timedelta(days=EXPIRING_SOON_DAYS),
        )

    def query_pantry_items(
        self,
        household_id: int,
        filters: PantryFilters | None = None,
    ) -> list[PantryItem]:
        """List a household's active pantry items matching every given filter.

        Ordered by expiry date (items without one last), then by name. An
        unknown household simply has no items.
        """
        filters = filters or PantryFilters()
        query = self._active_items(household_id)

        if filters.category:
            query = query.filter(PantryItem.category == filters.category)
        if filters.storage_location:
            query = query.filter(PantryItem.storage_location == filters.storage_location)
        if filters.status:
            query = query.filter(PantryItem.status == filters.status)
        if filters.search:
            pattern = f"%{escape_like(filters.search)}%"
            query = query.filter(
                or_(
                    PantryItem.name.ilike(pattern, escape="\\"),
                    PantryItem.description.ilike(pattern, escape="\\"),
                    PantryItem.brand.ilike(pattern, escape="\\"),
                )
            )
        if filters.low_stock:
            query = query.filter(PantryItem.quantity <= LOW_STOCK_THRESHOLD)
        if filters.expiring_soon:
            query = self._expiring_window(query)

        return query.order_by(
            PantryItem.expiry_date.asc().nullslast(),
            PantryItem.name.asc(),
        ).all()

    def get_low_stock_items(self, household_id: int) -> list[PantryItem]:
        """Active items at or below the low stock threshold."""
        return (
            self._active_items(household_id)
            .filter(PantryItem.quantity <= LOW_STOCK_THRESHOLD)
            .order_by(PantryItem.id)
            .all()
        )

    def get_expiring_items(self, household_id: int) -> list[PantryItem]:
        """Active items that have not expired but will within the week."""
        return self._expiring_window(self._active_items(household_id)).order_by(PantryItem.id).all()

    # --- Barcode scanning ---

    def scan_barcode(self, barcode: str, household_id: int) -> BarcodeScanResult:
        """Find a pantry item by barcode, or suggest what the product might be."""
        item = (
            self._active_items(household_id)
            .filter(PantryItem.barcode == barcode)
            .first()
        )
        if item:
            return BarcodeScanResult(found=True, item=item)

        return BarcodeScanResult(found=False, suggestions=self.barcode_lookup.suggest(barcode))

    # --- Waste tracking ---

    def track_waste(
        self,
        item_id: int,
        quantity: Decimal,
        reason: str,
        household_id: int | None = None,
    ) -> PantryItem:
        """Record wasted quantity: mark the item wasted and append a note line."""
        item = self.get_pantry_item(item_id, household_id)
        quantity = Decimal(str(quantity))

        entry = (
            f"[{self.clock().isoformat(timespec='seconds')}] "
            f"Wasted: {quantity} {item.unit} - Reason: {reason}"
        )
        with unit_of_work(self.db):
            item.status = ItemStatus.WASTED
            item.quantity = max(Decimal(0), Decimal(item.quantity) - quantity)
            item.notes = f"{item.notes}\n{entry}" if item.notes else entry
        self.db.refresh(item)

        logger.info(f"Tracked waste on pantry item {item_id}: {quantity} {item.unit} ({reason})")
        return item

    # --- Expiry management ---

    def check_expiring_items(self, household_id: int) -> ExpiryCheck:
        """Collect expiring and expired items with recommendations."""
        now = self.clock()
        items = self.query_pantry_items(household_id)

        check = ExpiryCheck(
            expiring_soon=[item for item in items if item.is_expiring_soon(now)],
            expired=[item for item in items if item.is_expired(now)],
        )
        if check.expiring_soon:
            check.recommendations.append(
                f"You have {len(check.expiring_soon)} items expiring soon. "
                "Consider using them in meals or freezing them."
            )
        if check.expired:
            check.recommendations.append(
                f"You have {len(check.expired)} expired items. Please dispose of them safely."
            )
        return check
