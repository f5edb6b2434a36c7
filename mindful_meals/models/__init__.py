"""SQLAlchemy models."""

from mindful_meals.models.household import Household
from mindful_meals.models.pantry import PantryItem
from mindful_meals.models.shopping_list import ShoppingList, ShoppingListItem

__all__ = [
    "Household",
    "PantryItem",
    "ShoppingList",
    "ShoppingListItem",
]
