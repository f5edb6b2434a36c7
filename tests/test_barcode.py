"""Barcode scanning tests."""

import httpx

from mindful_meals.api.dependencies import get_barcode_lookup
from mindful_meals.config import Settings
from mindful_meals.main import app
from mindful_meals.models.enums import ItemCategory
from mindful_meals.services.barcode_lookup import (
    DEFAULT_SUGGESTIONS,
    OpenFoodFactsLookup,
    StaticBarcodeLookup,
    build_barcode_lookup,
    category_from_tags,
)

BASE_URL = "https://off.test"


def scan(client, household_id, barcode):
    return client.post(f"/api/v1/households/{household_id}/scan-barcode", json={"barcode": barcode})


def test_scan_known_barcode(client, household, create_item):
    """Test a barcode already in the pantry returns the item."""
    create_item(name="Maggi Noodles", category="ready_to_eat", barcode="8901058851298")

    response = scan(client, household.id, "8901058851298")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Item found in pantry"
    assert body["data"]["found"] is True
    assert body["data"]["item"]["name"] == "Maggi Noodles"
    assert body["data"]["suggestions"] is None


def test_scan_unknown_barcode_returns_static_suggestions(client, household):
    """Test an unknown barcode returns the fixed two suggestions."""
    response = scan(client, household.id, "unknown123")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Item not found, suggestions provided"
    assert body["data"]["found"] is False
    assert body["data"]["item"] is None
    assert body["data"]["suggestions"] == [
        {
            "name": "Organic Tomatoes",
            "category": "fruits_vegetables",
            "brand": "Fresh Farm",
            "description": "Fresh organic tomatoes from local farms",
        },
        {
            "name": "Whole Wheat Bread",
            "category": "bakery",
            "brand": "Healthy Grains",
            "description": "100% whole wheat bread with no preservatives",
        },
    ]


def test_scan_ignores_removed_and_foreign_items(client, db, household, create_item):
    """Test removed items are not matched by barcode."""
    item = create_item(name="Bread", category="bakery", barcode="111")
    client.delete(f"/api/v1/households/{household.id}/pantry-items/{item['id']}")

    assert scan(client, household.id, "111").json()["data"]["found"] is False
    assert scan(client, household.id + 1, "111").json()["data"]["found"] is False


def test_scan_uses_configured_lookup(client, household):
    """Test the lookup strategy comes from the dependency."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "status": 1,
                "product": {
                    "product_name": "Amul Taaza Milk",
                    "brands": "Amul, GCMMF",
                    "categories_tags": ["en:dairies", "en:milks"],
                },
            },
        )

    app.dependency_overrides[get_barcode_lookup] = lambda: OpenFoodFactsLookup(
        BASE_URL, transport=httpx.MockTransport(handler)
    )

    body = scan(client, household.id, "8901262150019").json()
    assert body["data"]["suggestions"] == [
        {"name": "Amul Taaza Milk", "category": "dairy_eggs", "brand": "Amul", "description": None}
    ]


class TestOpenFoodFactsLookup:
    """Tests for the Open Food Facts lookup over a mocked transport."""

    def test_found_product(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={
                    "status": 1,
                    "product": {
                        "product_name": "Whole Wheat Atta",
                        "generic_name": "Chakki fresh atta",
                        "brands": "Aashirvaad",
                        "categories_tags": ["en:cereals-and-potatoes", "en:flours"],
                    },
                },
            )

        lookup = OpenFoodFactsLookup(BASE_URL, transport=httpx.MockTransport(handler))
        suggestions = lookup.suggest("8901725181222")

        assert len(suggestions) == 1
        assert suggestions[0].name == "Whole Wheat Atta"
        assert suggestions[0].brand == "Aashirvaad"
        assert suggestions[0].category == ItemCategory.GRAINS_PULSES
        assert suggestions[0].description == "Chakki fresh atta"
        assert requests[0].url.path == "/api/v2/product/8901725181222.json"

    def test_unknown_product_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": 0, "status_verbose": "product not found"})

        lookup = OpenFoodFactsLookup(BASE_URL, transport=httpx.MockTransport(handler))
        assert lookup.suggest("000") == list(DEFAULT_SUGGESTIONS)

    def test_not_found_status_falls_back(self):
        lookup = OpenFoodFactsLookup(
            BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(404))
        )
        assert lookup.suggest("000") == list(DEFAULT_SUGGESTIONS)

    def test_http_error_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        lookup = OpenFoodFactsLookup(BASE_URL, transport=httpx.MockTransport(handler))
        assert lookup.suggest("000") == list(DEFAULT_SUGGESTIONS)

    def test_server_error_falls_back(self):
        lookup = OpenFoodFactsLookup(
            BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(503))
        )
        assert lookup.suggest("000") == list(DEFAULT_SUGGESTIONS)

    def test_non_numeric_barcode_is_not_sent(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"status": 0})

        lookup = OpenFoodFactsLookup(BASE_URL, transport=httpx.MockTransport(handler))
        assert lookup.suggest("../../admin?x=1") == list(DEFAULT_SUGGESTIONS)
        assert lookup.suggest("unknown123") == list(DEFAULT_SUGGESTIONS)
        assert requests == []


def test_category_from_tags():
    assert category_from_tags(["en:frozen-foods", "en:vegetables"]) == ItemCategory.FROZEN_FOODS
    assert category_from_tags(["en:spices"]) == ItemCategory.SPICES_CONDIMENTS
    assert category_from_tags(["en:cleaning-products"]) == ItemCategory.HOUSEHOLD
    assert category_from_tags([]) == ItemCategory.HOUSEHOLD


def test_build_barcode_lookup():
    assert isinstance(build_barcode_lookup(Settings()), StaticBarcodeLookup)

    lookup = build_barcode_lookup(
        Settings(barcode_lookup_provider="openfoodfacts", openfoodfacts_base_url=BASE_URL + "/")
    )
    assert isinstance(lookup, OpenFoodFactsLookup)
    assert lookup.base_url == BASE_URL
