"""FastAPI dependencies wiring services to the request's database session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from mindful_meals.database import get_db
from mindful_meals.services.analytics_service import AnalyticsService
from mindful_meals.services.barcode_lookup import BarcodeLookup, build_barcode_lookup
from mindful_meals.services.clock import Clock, utc_now
from mindful_meals.services.pantry_service import PantryService
from mindful_meals.services.shopping_list_service import ShoppingListService


def get_clock() -> Clock:
    """Clock used for every "now" comparison; overridden in tests."""
    return utc_now


def get_barcode_lookup() -> BarcodeLookup:
    """Barcode suggestion strategy selected in settings."""
    return build_barcode_lookup()


def get_pantry_service(
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
    barcode_lookup: Annotated[BarcodeLookup, Depends(get_barcode_lookup)],
) -> PantryService:
    """Get pantry service with dependencies."""
    return PantryService(db, clock=clock, barcode_lookup=barcode_lookup)


def get_shopping_list_service(
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ShoppingListService:
    """Get shopping list service with dependencies."""
    return ShoppingListService(db, clock=clock)


def get_analytics_service(
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> AnalyticsService:
    """Get analytics service with dependencies."""
    return AnalyticsService(db, clock=clock)
