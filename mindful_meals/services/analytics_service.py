"""Inventory analytics over a household's active pantry."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from mindful_meals.models.enums import ItemCategory, StorageLocation
from mindful_meals.models.pantry import PantryItem
from mindful_meals.schemas.analytics import (
    CategoryBreakdown,
    ExpiryBucket,
    InventoryAnalytics,
    StorageBreakdown,
)
from mindful_meals.services.clock import Clock, utc_now
from mindful_meals.services.pantry_service import PantryService

EXPIRY_TIMELINE_DAYS = (1, 3, 7, 14, 30)


def total_value(items: list[PantryItem]) -> Decimal:
    """Sum of item prices, counting a missing price as zero."""
    return sum((Decimal(item.price or 0) for item in items), Decimal(0))


def expiry_timeline(items: list[PantryItem], now: datetime) -> list[ExpiryBucket]:
    """Bucket items by days until expiry.

    Each item lands only in the first (smallest) bucket whose threshold is at
    least its days until expiry; items past the last bucket are not counted.
    """
    buckets = [ExpiryBucket(days=days) for days in EXPIRY_TIMELINE_DAYS]
    for item in items:
        days = item.days_until_expiry(now)
        if days is None:
            continue
        bucket = next((b for b in buckets if days <= b.days), None)
        if bucket:
            bucket.count += 1
            bucket.value += float(item.price or 0)
    return buckets


class AnalyticsService:
    """Service for inventory analytics."""

    def __init__(self, db: Session, clock: Clock = utc_now):
        self.db = db
        self.clock = clock
        self.pantry = PantryService(db, clock=clock)

    def get_inventory_analytics(self, household_id: int) -> InventoryAnalytics:
        """Counts, value and breakdowns for a household's active pantry items."""
        now = self.clock()
        items = self.pantry.query_pantry_items(household_id)

        category_breakdown = []
        for category in ItemCategory:
            in_category = [item for item in items if item.category == category]
            if in_category:
                category_breakdown.append(
                    CategoryBreakdown(
                        category=category,
                        count=len(in_category),
                        value=float(total_value(in_category)),
                    )
                )

        storage_breakdown = []
        for location in StorageLocation:
            in_location = [item for item in items if item.storage_location == location]
            if in_location:
                storage_breakdown.append(
                    StorageBreakdown(
                        location=location,
                        count=len(in_location),
                        value=float(total_value(in_location)),
                    )
                )

        return InventoryAnalytics(
            total_items=len(items),
            active_items=sum(1 for item in items if item.is_active),
            low_stock_items=sum(1 for item in items if item.needs_restocking),
            expiring_items=sum(1 for item in items if item.is_expiring_soon(now)),
            expired_items=sum(1 for item in items if item.is_expired(now)),
            total_value=float(total_value(items)),
            category_breakdown=category_breakdown,
            storage_breakdown=storage_breakdown,
            expiry_timeline=expiry_timeline(items, now),
        )
