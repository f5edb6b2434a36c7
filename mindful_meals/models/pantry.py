"""Pantry item model for tracking ingredients a household has at home."""

import math
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from mindful_meals.database import Base
from mindful_meals.models.enums import (
    ItemCategory,
    ItemStatus,
    StockLevel,
    StorageLocation,
    db_enum,
)
from mindful_meals.models.mixins import SoftDeleteMixin, TimestampMixin, as_utc

# Quantity at or below which an item needs restocking (stock level low or critical)
LOW_STOCK_THRESHOLD = Decimal("0.5")
CRITICAL_STOCK_THRESHOLD = Decimal("0.1")
MEDIUM_STOCK_THRESHOLD = Decimal("1.0")

EXPIRING_SOON_DAYS = 7


def stock_level_for(quantity: Decimal | float | int) -> StockLevel:
    """Classify a quantity into a stock level."""
    quantity = Decimal(str(quantity))
    if quantity <= CRITICAL_STOCK_THRESHOLD:
        return StockLevel.CRITICAL
    if quantity <= LOW_STOCK_THRESHOLD:
        return StockLevel.LOW
    if quantity <= MEDIUM_STOCK_THRESHOLD:
        return StockLevel.MEDIUM
    return StockLevel.FULL


def days_until(expiry: datetime, now: datetime) -> int:
    """Whole days from now until expiry, rounded up (negative once expired)."""
    delta = as_utc(expiry) - as_utc(now)
    return math.ceil(delta / timedelta(days=1))


class PantryItem(Base, TimestampMixin, SoftDeleteMixin):
    """One trackable ingredient instance owned by a household."""

    __tablename__ = "pantry_items"
    __table_args__ = (
        Index("ix_pantry_items_household_category", "household_id", "category"),
        Index("ix_pantry_items_household_expiry", "household_id", "expiry_date"),
        Index("ix_pantry_items_household_status", "household_id", "status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(Integer, ForeignKey("households.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(db_enum(ItemCategory, "itemcategory"), nullable=False)
    status = Column(db_enum(ItemStatus, "itemstatus"), nullable=False, default=ItemStatus.ACTIVE)
    storage_location = Column(
        db_enum(StorageLocation, "storagelocation"),
        nullable=False,
        default=StorageLocation.PANTRY,
    )
    quantity = Column(Numeric(10, 2), nullable=False)
    unit = Column(String(50), nullable=False)  # kg, liters, pieces, etc.
    price = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(10), nullable=True)
    purchase_date = Column(DateTime(timezone=True), nullable=True)
    expiry_date = Column(DateTime(timezone=True), nullable=True)
    brand = Column(String(100), nullable=True)
    barcode = Column(String(100), nullable=True, index=True)
    # One line per event, e.g. "[2026-10-18T09:00:00+00:00] Wasted: 2 kg - Reason: moldy"
    notes = Column(Text, nullable=True)
    nutritional_info = Column(JSON, nullable=True)
    dietary_info = Column(JSON, nullable=True)
    regional_info = Column(JSON, nullable=True)
    cooking_info = Column(JSON, nullable=True)

    # Relationships
    household = relationship("Household", back_populates="pantry_items")

    def days_until_expiry(self, now: datetime) -> int | None:
        """Days until the item expires, or None without an expiry date."""
        if self.expiry_date is None:
            return None
        return days_until(self.expiry_date, now)

    def is_expired(self, now: datetime) -> bool:
        """Check if the expiry date has passed."""
        if self.expiry_date is None:
            return False
        return as_utc(now) > as_utc(self.expiry_date)

    def is_expiring_soon(self, now: datetime) -> bool:
        """Check if the item expires within the next week but has not expired yet."""
        days = self.days_until_expiry(now)
        if days is None:
            return False
        return 0 < days <= EXPIRING_SOON_DAYS

    @property
    def stock_level(self) -> StockLevel:
        """Stock level derived from the current quantity."""
        return stock_level_for(self.quantity)

    @property
    def needs_restocking(self) -> bool:
        """Check if the item is low or critical on stock."""
        return self.stock_level in (StockLevel.LOW, StockLevel.CRITICAL)
