"""Household model, the owner of all inventory data."""

from sqlalchemy import JSON, Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from mindful_meals.database import Base
from mindful_meals.models.enums import DietaryType, db_enum
from mindful_meals.models.mixins import SoftDeleteMixin, TimestampMixin


class Household(Base, TimestampMixin, SoftDeleteMixin):
    """Household (roughly one family account) owning pantry items and lists."""

    __tablename__ = "households"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    region = Column(String(100), nullable=True)
    dietary_type = Column(
        db_enum(DietaryType, "dietarytype"), nullable=False, default=DietaryType.VEGETARIAN
    )
    budget = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(10), nullable=False, default="INR")
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    # {"organic_preference": true, "waste_reduction": true, ...}
    preferences = Column(JSON, nullable=True)
    # {"expiry_reminder_days": 3, "preferred_vendors": [...], ...}
    pantry_settings = Column(JSON, nullable=True)

    # Relationships
    pantry_items = relationship("PantryItem", back_populates="household")
    shopping_lists = relationship("ShoppingList", back_populates="household")
