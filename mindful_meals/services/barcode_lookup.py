"""Product suggestions for barcodes that are not in the pantry yet."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from mindful_meals.config import Settings, get_settings
from mindful_meals.models.enums import ItemCategory

logger = logging.getLogger(__name__)


@dataclass
class BarcodeSuggestion:
    """A product the scanned barcode might belong to."""

    name: str
    category: ItemCategory
    brand: str | None = None
    description: str | None = None


class BarcodeLookup(Protocol):
    """Strategy for turning an unknown barcode into suggestions."""

    def suggest(self, barcode: str) -> list[BarcodeSuggestion]: ...


DEFAULT_SUGGESTIONS = (
    BarcodeSuggestion(
        name="Organic Tomatoes",
        category=ItemCategory.FRUITS_VEGETABLES,
        brand="Fresh Farm",
        description="Fresh organic tomatoes from local farms",
    ),
    BarcodeSuggestion(
        name="Whole Wheat Bread",
        category=ItemCategory.BAKERY,
        brand="Healthy Grains",
        description="100% whole wheat bread with no preservatives",
    ),
)


class StaticBarcodeLookup:
    """Fixed, non-personalized suggestions used until a product database is wired in."""

    def suggest(self, barcode: str) -> list[BarcodeSuggestion]:
        return list(DEFAULT_SUGGESTIONS)


# Open Food Facts category tag fragments -> pantry category, first match wins
CATEGORY_KEYWORDS: list[tuple[str, ItemCategory]] = [
    ("frozen", ItemCategory.FROZEN_FOODS),
    ("dairies", ItemCategory.DAIRY_EGGS),
    ("dairy", ItemCategory.DAIRY_EGGS),
    ("eggs", ItemCategory.DAIRY_EGGS),
    ("cheeses", ItemCategory.DAIRY_EGGS),
    ("meats", ItemCategory.MEAT_FISH),
    ("fishes", ItemCategory.MEAT_FISH),
    ("seafood", ItemCategory.MEAT_FISH),
    ("breads", ItemCategory.BAKERY),
    ("biscuits", ItemCategory.BAKERY),
    ("cereals", ItemCategory.GRAINS_PULSES),
    ("legumes", ItemCategory.GRAINS_PULSES),
    ("rices", ItemCategory.GRAINS_PULSES),
    ("spices", ItemCategory.SPICES_CONDIMENTS),
    ("condiments", ItemCategory.SPICES_CONDIMENTS),
    ("sauces", ItemCategory.SPICES_CONDIMENTS),
    ("beverages", ItemCategory.BEVERAGES),
    ("snacks", ItemCategory.SNACKS_BEVERAGES),
    ("fruits", ItemCategory.FRUITS_VEGETABLES),
    ("vegetables", ItemCategory.FRUITS_VEGETABLES),
    ("meals", ItemCategory.READY_TO_EAT),
]


def category_from_tags(tags: list[str]) -> ItemCategory:
    """Pick a pantry category for a list of Open Food Facts category tags."""
    for fragment, category in CATEGORY_KEYWORDS:
        if any(fragment in tag for tag in tags):
            return category
    return ItemCategory.HOUSEHOLD


class OpenFoodFactsLookup:
    """Suggestions from the Open Food Facts product API.

    Falls back to the static suggestions when the product is unknown or the
    API cannot be reached.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        fallback: BarcodeLookup | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.fallback = fallback or StaticBarcodeLookup()

    def _fetch_product(self, barcode: str) -> dict | None:
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.get(
                f"{self.base_url}/api/v2/product/{barcode}.json",
                params={"fields": "product_name,generic_name,brands,categories_tags"},
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()

        if data.get("status") != 1:
            return None
        return data.get("product") or None

    def suggest(self, barcode: str) -> list[BarcodeSuggestion]:
        # Open Food Facts only knows EAN/UPC codes, which are all digits
        if not (barcode.isascii() and barcode.isdigit()):
            return self.fallback.suggest(barcode)

        try:
            product = self._fetch_product(barcode)
        except httpx.HTTPError as e:
            logger.warning(f"Open Food Facts lookup failed for {barcode}: {e}")
            return self.fallback.suggest(barcode)

        if not product or not product.get("product_name"):
            logger.info(f"Barcode {barcode} not found in Open Food Facts")
            return self.fallback.suggest(barcode)

        brands = product.get("brands") or ""
        return [
            BarcodeSuggestion(
                name=product["product_name"],
                category=category_from_tags(product.get("categories_tags") or []),
                brand=brands.split(",")[0].strip() or None,
                description=product.get("generic_name") or None,
            )
        ]


def build_barcode_lookup(settings: Settings | None = None) -> BarcodeLookup:
    """Build the lookup strategy selected in settings."""
    settings = settings or get_settings()
    if settings.barcode_lookup_provider == "openfoodfacts":
        return OpenFoodFactsLookup(
            settings.openfoodfacts_base_url,
            timeout=settings.http_timeout_seconds,
        )
    return StaticBarcodeLookup()
