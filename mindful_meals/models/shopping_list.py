"""Shopping list models."""

from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from mindful_meals.database import Base
from mindful_meals.models.enums import (
    ItemPriority,
    ItemSource,
    ShoppingListStatus,
    ShoppingListType,
    db_enum,
)
from mindful_meals.models.mixins import SoftDeleteMixin, TimestampMixin


class ShoppingList(Base, TimestampMixin, SoftDeleteMixin):
    """One generation run or manual list owned by a household."""

    __tablename__ = "shopping_lists"
    __table_args__ = (
        Index("ix_shopping_lists_household_status", "household_id", "status"),
        Index("ix_shopping_lists_household_type", "household_id", "type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(Integer, ForeignKey("households.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        db_enum(ShoppingListStatus, "shoppingliststatus"),
        nullable=False,
        default=ShoppingListStatus.DRAFT,
    )
    type = Column(
        db_enum(ShoppingListType, "shoppinglisttype"),
        nullable=False,
        default=ShoppingListType.MANUAL,
    )
    planned_shopping_date = Column(DateTime(timezone=True), nullable=True)
    actual_shopping_date = Column(DateTime(timezone=True), nullable=True)
    estimated_budget = Column(Numeric(10, 2), nullable=False, default=0)
    actual_spent = Column(Numeric(10, 2), nullable=False, default=0)
    currency = Column(String(10), nullable=False, default="INR")
    # {"preferred_vendors": ["FreshMart"], "organic_preference": true, ...}
    preferences = Column(JSON, nullable=True)
    # {"source": "low_stock", "generated_by": "system", "generation_reason": "..."}
    list_metadata = Column("metadata", JSON, nullable=True)
    # Snapshot of compute_stats(active_items); rewritten on every item mutation
    stats = Column(JSON, nullable=True)

    # Relationships
    household = relationship("Household", back_populates="shopping_lists")
    items = relationship(
        "ShoppingListItem",
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        order_by="ShoppingListItem.id",
    )

    @property
    def active_items(self) -> list["ShoppingListItem"]:
        """Items that have not been removed from the list."""
        return [item for item in self.items if item.is_active]

    @property
    def completion_rate(self) -> int:
        """Percentage of items checked off, rounded."""
        items = self.active_items
        if not items:
            return 0
        completed = sum(1 for item in items if item.is_completed)
        return round(completed / len(items) * 100)

    @property
    def is_over_budget(self) -> bool:
        return Decimal(self.actual_spent or 0) > Decimal(self.estimated_budget or 0)

    @property
    def budget_utilization(self) -> int:
        """Actual spend as a rounded percentage of the estimated budget."""
        budget = Decimal(self.estimated_budget or 0)
        if budget == 0:
            return 0
        return round(Decimal(self.actual_spent or 0) / budget * 100)

    @property
    def can_be_completed(self) -> bool:
        return self.status in (ShoppingListStatus.ACTIVE, ShoppingListStatus.IN_PROGRESS)

    @property
    def estimated_total_cost(self) -> Decimal:
        return sum((Decimal(i.estimated_price or 0) for i in self.active_items), Decimal(0))

    @property
    def actual_total_cost(self) -> Decimal:
        return sum((Decimal(i.actual_price or 0) for i in self.active_items), Decimal(0))


class ShoppingListItem(Base, TimestampMixin, SoftDeleteMixin):
    """One line item on a shopping list."""

    __tablename__ = "shopping_list_items"
    __table_args__ = (
        Index("ix_shopping_list_items_list_priority", "shopping_list_id", "priority"),
        Index("ix_shopping_list_items_list_completed", "shopping_list_id", "is_completed"),
    )

    id = Column(Integer, primary_key=True, index=True)
    shopping_list_id = Column(
        Integer, ForeignKey("shopping_lists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False)
    unit = Column(String(50), nullable=False)
    priority = Column(
        db_enum(ItemPriority, "itempriority"), nullable=False, default=ItemPriority.MEDIUM
    )
    source = Column(db_enum(ItemSource, "itemsource"), nullable=False, default=ItemSource.MANUAL)
    estimated_price = Column(Numeric(10, 2), nullable=True)
    actual_price = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(10), nullable=False, default="INR")
    brand = Column(String(100), nullable=True)
    barcode = Column(String(100), nullable=True)
    preferred_vendor = Column(String(100), nullable=True)
    # {"organic": true, "local": false, "quality": "standard", ...}
    preferences = Column(JSON, nullable=True)
    alternatives = Column(JSON, nullable=True)
    # {"related_pantry_item_id": 12, ...}
    item_metadata = Column("metadata", JSON, nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)
    completed_date = Column(DateTime(timezone=True), nullable=True)
    purchased_from = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)

    # Relationships
    shopping_list = relationship("ShoppingList", back_populates="items")

    @property
    def is_urgent(self) -> bool:
        return self.priority == ItemPriority.URGENT

    @property
    def is_high_priority(self) -> bool:
        return self.priority in (ItemPriority.HIGH, ItemPriority.URGENT)

    @property
    def price_difference(self) -> Decimal | None:
        """Actual minus estimated price; None unless both are known."""
        if self.estimated_price is None or self.actual_price is None:
            return None
        return Decimal(self.actual_price) - Decimal(self.estimated_price)

    @property
    def is_over_budget(self) -> bool | None:
        if self.estimated_price is None or self.actual_price is None:
            return None
        return Decimal(self.actual_price) > Decimal(self.estimated_price)

    @property
    def budget_utilization(self) -> int | None:
        if self.estimated_price is None or self.actual_price is None:
            return None
        if Decimal(self.estimated_price) == 0:
            return None
        return round(Decimal(self.actual_price) / Decimal(self.estimated_price) * 100)

    @property
    def display_name(self) -> str:
        if self.brand:
            return f"{self.brand} {self.name}"
        return self.name

    @property
    def full_description(self) -> str:
        """Human readable line, e.g. "2 kg of Fresh Farm Tomatoes - note (extra)"."""
        desc = f"{self.quantity} {self.unit} of {self.display_name}"
        if self.description:
            desc += f" - {self.description}"
        if self.notes:
            desc += f" ({self.notes})"
        return desc
