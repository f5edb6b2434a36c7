"""create households, pantry and shopping list tables

Revision ID: 5b2e9c4d1a7f
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b2e9c4d1a7f"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ITEM_CATEGORIES = (
    "fruits_vegetables",
    "dairy_eggs",
    "meat_fish",
    "grains_pulses",
    "spices_condiments",
    "snacks_beverages",
    "bakery",
    "frozen_foods",
    "organic",
    "ready_to_eat",
    "beverages",
    "personal_care",
    "household",
)
ITEM_STATUSES = ("active", "low_stock", "expired", "consumed", "wasted")
STORAGE_LOCATIONS = (
    "refrigerator",
    "freezer",
    "pantry",
    "countertop",
    "spice_rack",
    "wine_cellar",
)
LIST_STATUSES = ("draft", "active", "in_progress", "completed", "archived")
LIST_TYPES = (
    "manual",
    "auto_generated",
    "meal_plan_based",
    "low_stock",
    "expiry_based",
    "recipe_based",
)
ITEM_PRIORITIES = ("low", "medium", "high", "urgent")
ITEM_SOURCES = (
    "manual",
    "low_stock",
    "expiry",
    "meal_plan",
    "recipe",
    "recommendation",
    "trending",
)
DIETARY_TYPES = (
    "vegetarian",
    "vegan",
    "non_vegetarian",
    "eggetarian",
    "jain",
    "halal",
    "kosher",
    "gluten_free",
    "dairy_free",
    "nut_free",
    "flexitarian",
)

ENUM_TYPES = (
    "itemcategory",
    "itemstatus",
    "storagelocation",
    "shoppingliststatus",
    "shoppinglisttype",
    "itempriority",
    "itemsource",
    "dietarytype",
)


def timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "households",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("region", sa.String(100), nullable=True),
        sa.Column("dietary_type", sa.Enum(*DIETARY_TYPES, name="dietarytype"), nullable=False),
        sa.Column("budget", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("preferences", sa.JSON(), nullable=True),
        sa.Column("pantry_settings", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, index=True),
        *timestamp_columns(),
    )

    op.create_table(
        "pantry_items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "household_id", sa.Integer(), sa.ForeignKey("households.id"), nullable=False, index=True
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Enum(*ITEM_CATEGORIES, name="itemcategory"), nullable=False),
        sa.Column("status", sa.Enum(*ITEM_STATUSES, name="itemstatus"), nullable=False),
        sa.Column(
            "storage_location",
            sa.Enum(*STORAGE_LOCATIONS, name="storagelocation"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("unit", sa.String(50), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(10), nullable=True),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("brand", sa.String(100), nullable=True),
        sa.Column("barcode", sa.String(100), nullable=True, index=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("nutritional_info", sa.JSON(), nullable=True),
        sa.Column("dietary_info", sa.JSON(), nullable=True),
        sa.Column("regional_info", sa.JSON(), nullable=True),
        sa.Column("cooking_info", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, index=True),
        *timestamp_columns(),
    )
    op.create_index(
        "ix_pantry_items_household_category", "pantry_items", ["household_id", "category"]
    )
    op.create_index(
        "ix_pantry_items_household_expiry", "pantry_items", ["household_id", "expiry_date"]
    )
    op.create_index(
        "ix_pantry_items_household_status", "pantry_items", ["household_id", "status"]
    )

    op.create_table(
        "shopping_lists",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "household_id", sa.Integer(), sa.ForeignKey("households.id"), nullable=False, index=True
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.Enum(*LIST_STATUSES, name="shoppingliststatus"), nullable=False),
        sa.Column("type", sa.Enum(*LIST_TYPES, name="shoppinglisttype"), nullable=False),
        sa.Column("planned_shopping_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("actual_shopping_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("estimated_budget", sa.Numeric(10, 2), nullable=False),
        sa.Column("actual_spent", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("preferences", sa.JSON(), nullable=True),
        sa.Column("metadata", sa.JSON(), nullable=True),
        sa.Column("stats", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, index=True),
        *timestamp_columns(),
    )
    op.create_index(
        "ix_shopping_lists_household_status", "shopping_lists", ["household_id", "status"]
    )
    op.create_index("ix_shopping_lists_household_type", "shopping_lists", ["household_id", "type"])

    op.create_table(
        "shopping_list_items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "shopping_list_id",
            sa.Integer(),
            sa.ForeignKey("shopping_lists.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("unit", sa.String(50), nullable=False),
        sa.Column("priority", sa.Enum(*ITEM_PRIORITIES, name="itempriority"), nullable=False),
        sa.Column("source", sa.Enum(*ITEM_SOURCES, name="itemsource"), nullable=False),
        sa.Column("estimated_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("actual_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("brand", sa.String(100), nullable=True),
        sa.Column("barcode", sa.String(100), nullable=True),
        sa.Column("preferred_vendor", sa.String(100), nullable=True),
        sa.Column("preferences", sa.JSON(), nullable=True),
        sa.Column("alternatives", sa.JSON(), nullable=True),
        sa.Column("metadata", sa.JSON(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("purchased_from", sa.String(100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, index=True),
        *timestamp_columns(),
    )
    op.create_index(
        "ix_shopping_list_items_list_priority",
        "shopping_list_items",
        ["shopping_list_id", "priority"],
    )
    op.create_index(
        "ix_shopping_list_items_list_completed",
        "shopping_list_items",
        ["shopping_list_id", "is_completed"],
    )


def downgrade() -> None:
    op.drop_table("shopping_list_items")
    op.drop_table("shopping_lists")
    op.drop_table("pantry_items")
    op.drop_table("households")

    # Postgres keeps enum types around after their tables are gone
    bind = op.get_bind()
    for name in ENUM_TYPES:
        sa.Enum(name=name).drop(bind, checkfirst=True)
