"""Shopping list generation and management tests."""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from mindful_meals.models.enums import (
    ItemCategory,
    ItemPriority,
    ItemSource,
    ShoppingListStatus,
    ShoppingListType,
    StorageLocation,
)
from mindful_meals.models.pantry import PantryItem
from mindful_meals.models.shopping_list import ShoppingList
from mindful_meals.schemas.shopping_list import ShoppingListGenerate
from mindful_meals.services.errors import InternalError, NotFoundError
from mindful_meals.services.shopping_list_service import (
    ShoppingListService,
    compute_stats,
    default_list_name,
    restock_quantity,
)


def lists_url(household_id: int) -> str:
    return f"/api/v1/households/{household_id}/shopping-lists"


@pytest.fixture
def add_pantry_item(db, household):
    """Insert a pantry item directly."""

    def _add(**values):
        defaults = {
            "household_id": household.id,
            "name": "Onions",
            "category": ItemCategory.FRUITS_VEGETABLES,
            "storage_location": StorageLocation.PANTRY,
            "quantity": Decimal("3"),
            "unit": "kg",
        }
        defaults.update(values)
        item = PantryItem(**defaults)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    return _add


@pytest.fixture
def service(db, clock):
    return ShoppingListService(db, clock=clock)


class TestGeneration:
    """Tests for generating lists from pantry state."""

    def test_low_stock_with_expiring_items(self, service, household, add_pantry_item, now):
        """Low stock and expiring items both become lines with their own rules."""
        low = add_pantry_item(name="Mustard Oil", quantity=Decimal("0.3"), unit="liters", price=Decimal("150"))
        expiring = add_pantry_item(
            name="Paneer",
            category=ItemCategory.DAIRY_EGGS,
            quantity=Decimal("5"),
            unit="pieces",
            expiry_date=now + timedelta(days=3),
        )

        shopping_list = service.generate_shopping_list(
            household.id,
            ShoppingListType.LOW_STOCK,
            ShoppingListGenerate(type=ShoppingListType.LOW_STOCK, include_expiring=True),
        )

        assert len(shopping_list.active_items) == 2
        restock, replace = shopping_list.active_items

        assert restock.name == "Mustard Oil"
        assert restock.quantity == Decimal("1.7")
        assert restock.priority == ItemPriority.HIGH
        assert restock.source == ItemSource.LOW_STOCK
        assert restock.estimated_price == Decimal("150")
        assert restock.item_metadata == {"related_pantry_item_id": low.id}

        assert replace.name == "Paneer"
        assert replace.quantity == Decimal("5")
        assert replace.priority == ItemPriority.URGENT
        assert replace.source == ItemSource.EXPIRY
        assert replace.description == "Replacing expiring item (expires: 21 Oct 2026)"
        assert replace.item_metadata == {"related_pantry_item_id": expiring.id}

    def test_list_defaults(self, service, household):
        """A generated list is a draft in the household currency with system metadata."""
        shopping_list = service.generate_shopping_list(household.id, ShoppingListType.EXPIRY_BASED)

        assert shopping_list.status == ShoppingListStatus.DRAFT
        assert shopping_list.name == "Auto-generated expiry based list"
        assert shopping_list.currency == "INR"
        assert shopping_list.estimated_budget == 0
        assert shopping_list.list_metadata == {
            "source": "expiry_based",
            "generated_by": "system",
            "generation_reason": "Automated inventory analysis",
        }
        assert shopping_list.stats["total_items"] == 0

    def test_item_both_low_and_expiring_yields_two_lines(self, service, household, add_pantry_item, now):
        """Candidates from both branches are concatenated without de-duplication."""
        add_pantry_item(name="Curd", quantity=Decimal("0.2"), expiry_date=now + timedelta(days=1))

        shopping_list = service.generate_shopping_list(
            household.id,
            ShoppingListType.AUTO_GENERATED,
            ShoppingListGenerate(
                type=ShoppingListType.AUTO_GENERATED,
                include_low_stock=True,
                include_expiring=True,
            ),
        )

        assert [item.source for item in shopping_list.active_items] == [
            ItemSource.LOW_STOCK,
            ItemSource.EXPIRY,
        ]
        assert shopping_list.stats["total_items"] == 2

    def test_skips_inactive_and_out_of_window_items(self, service, db, household, add_pantry_item, now):
        """Removed, expired and far-off items are never candidates."""
        removed = add_pantry_item(name="Removed", quantity=Decimal("0.1"))
        removed.soft_delete()
        db.commit()
        add_pantry_item(name="Expired", expiry_date=now - timedelta(days=1))
        add_pantry_item(name="Later", expiry_date=now + timedelta(days=20))

        shopping_list = service.generate_shopping_list(
            household.id,
            ShoppingListType.AUTO_GENERATED,
            ShoppingListGenerate(
                type=ShoppingListType.AUTO_GENERATED,
                include_low_stock=True,
                include_expiring=True,
            ),
        )
        assert shopping_list.active_items == []

    def test_manual_type_without_flags_is_empty(self, service, household, add_pantry_item):
        add_pantry_item(name="Rice", quantity=Decimal("0.2"))

        shopping_list = service.generate_shopping_list(household.id, ShoppingListType.MANUAL)
        assert shopping_list.active_items == []

    def test_unknown_household(self, service, db):
        with pytest.raises(NotFoundError):
            service.generate_shopping_list(9999, ShoppingListType.LOW_STOCK)
        assert db.query(ShoppingList).count() == 0

    def test_failure_leaves_no_list(self, service, db, household, add_pantry_item):
        """A persistence failure mid-generation rolls back the list as well."""
        add_pantry_item(name="Atta", quantity=Decimal("0.4"))

        with patch(
            "mindful_meals.services.shopping_list_service.compute_stats",
            side_effect=OperationalError("UPDATE shopping_lists", {}, Exception("disk I/O error")),
        ):
            with pytest.raises(InternalError):
                service.generate_shopping_list(household.id, ShoppingListType.LOW_STOCK)

        assert db.query(ShoppingList).count() == 0


class TestHelpers:
    """Tests for the pure helpers."""

    @pytest.mark.parametrize(
        "current,expected",
        [("0", "2"), ("0.3", "1.7"), ("0.5", "1.5"), ("1.5", "1"), ("4", "1")],
    )
    def test_restock_quantity(self, current, expected):
        assert restock_quantity(Decimal(current)) == Decimal(expected)

    def test_default_list_name(self):
        assert default_list_name(ShoppingListType.MEAL_PLAN_BASED) == "Auto-generated meal plan based list"

    def test_compute_stats_empty(self):
        assert compute_stats([]) == {
            "total_items": 0,
            "completed_items": 0,
            "pending_items": 0,
            "priority_items": 0,
            "organic_items": 0,
            "local_items": 0,
            "categories": [],
            "vendors": [],
        }


def test_generate_shopping_list_api(client, household, add_pantry_item, now):
    """Test generating a list over HTTP returns the list with its items and stats."""
    add_pantry_item(name="Mustard Oil", quantity=Decimal("0.3"), unit="liters")
    add_pantry_item(name="Paneer", quantity=Decimal("5"), expiry_date=now + timedelta(days=3))

    response = client.post(
        lists_url(household.id),
        json={
            "type": "low_stock",
            "include_expiring": True,
            "estimated_budget": 500,
            "preferred_vendors": ["BigBasket"],
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Shopping list generated successfully"

    data = body["data"]
    assert data["type"] == "low_stock"
    assert data["status"] == "draft"
    assert data["estimated_budget"] == 500
    assert data["preferences"] == {"preferred_vendors": ["BigBasket"]}
    assert data["metadata"]["source"] == "low_stock"
    assert [(item["quantity"], item["priority"]) for item in data["items"]] == [
        (1.7, "high"),
        (5, "urgent"),
    ]
    assert data["stats"]["total_items"] == 2
    assert data["stats"]["priority_items"] == 2
    assert data["stats"]["categories"] == ["fruits_vegetables"]
    assert "related_pantry_item_id" in data["items"][0]["metadata"]


def test_generate_shopping_list_unknown_household(client):
    response = client.post(lists_url(9999), json={"type": "low_stock"})
    assert response.status_code == 404
    assert response.json()["message"] == "Household not found"


def test_generate_shopping_list_failure_api(client, db, household):
    """Test a database failure during generation surfaces as a 500 envelope."""
    with patch(
        "mindful_meals.services.shopping_list_service.compute_stats",
        side_effect=OperationalError("UPDATE shopping_lists", {}, Exception("disk I/O error")),
    ):
        response = client.post(lists_url(household.id), json={"type": "manual"})

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert db.query(ShoppingList).count() == 0


def test_stats_follow_item_changes(client, household):
    """Test stats are recomputed after adding, completing and removing items."""
    created = client.post(lists_url(household.id), json={"type": "manual", "name": "Weekly shop"})
    shopping_list = created.json()["data"]
    assert shopping_list["name"] == "Weekly shop"
    url = f"{lists_url(household.id)}/{shopping_list['id']}"

    response = client.post(
        f"{url}/items",
        json={
            "name": "Spinach",
            "category": "fruits_vegetables",
            "quantity": 2,
            "unit": "bunch",
            "priority": "high",
            "estimated_price": 40,
            "preferred_vendor": "Local Market",
            "preferences": {"organic": True, "local": True},
        },
    )
    assert response.status_code == 201
    data = response.json()["data"]
    spinach = data["items"][0]
    assert spinach["currency"] == "INR"
    assert data["stats"] == {
        "total_items": 1,
        "completed_items": 0,
        "pending_items": 1,
        "priority_items": 1,
        "organic_items": 1,
        "local_items": 1,
        "categories": ["fruits_vegetables"],
        "vendors": ["Local Market"],
    }

    client.post(
        f"{url}/items",
        json={"name": "Milk", "category": "dairy_eggs", "quantity": 1, "unit": "liters"},
    )

    response = client.post(
        f"{url}/items/{spinach['id']}/complete",
        json={"completed": True, "actual_price": 50, "purchased_from": "Local Market"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["stats"]["completed_items"] == 1
    assert data["stats"]["pending_items"] == 1
    assert data["completion_rate"] == 50
    completed = data["items"][0]
    assert completed["is_completed"] is True
    assert completed["completed_date"] is not None
    assert completed["price_difference"] == 10
    assert completed["is_over_budget"] is True
    assert completed["budget_utilization"] == 125

    response = client.post(f"{url}/items/{spinach['id']}/complete", json={"completed": False})
    assert response.json()["data"]["items"][0]["completed_date"] is None
    assert response.json()["data"]["stats"]["completed_items"] == 0

    response = client.delete(f"{url}/items/{spinach['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["name"] for item in data["items"]] == ["Milk"]
    assert data["stats"]["total_items"] == 1
    assert data["stats"]["vendors"] == []

    # The stored snapshot matches what a fresh read reports
    assert client.get(url).json()["data"]["stats"] == data["stats"]


def test_missing_list_item(client, household):
    created = client.post(lists_url(household.id), json={"type": "manual"})
    url = f"{lists_url(household.id)}/{created.json()['data']['id']}"

    assert client.delete(f"{url}/items/999").status_code == 404
    response = client.post(f"{url}/items/999/complete", json={"completed": True})
    assert response.status_code == 404
    assert response.json()["message"] == "Shopping list item not found"


def test_list_and_update_shopping_lists(client, household):
    """Test listing with filters and updating list-level fields."""
    first = client.post(lists_url(household.id), json={"type": "manual"}).json()["data"]
    client.post(lists_url(household.id), json={"type": "low_stock"})

    response = client.get(lists_url(household.id))
    assert response.status_code == 200
    assert response.json()["message"] == "Found 2 shopping lists"

    response = client.get(lists_url(household.id), params={"type": "manual"})
    assert [lst["id"] for lst in response.json()["data"]] == [first["id"]]

    response = client.put(
        f"{lists_url(household.id)}/{first['id']}",
        json={"status": "active", "estimated_budget": 200, "actual_spent": 250},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "active"
    assert data["is_over_budget"] is True
    assert data["budget_utilization"] == 125

    response = client.get(lists_url(household.id), params={"status": "active"})
    assert [lst["id"] for lst in response.json()["data"]] == [first["id"]]


def test_get_shopping_list_other_household(client, household):
    created = client.post(lists_url(household.id), json={"type": "manual"}).json()["data"]
    response = client.get(f"{lists_url(household.id + 1)}/{created['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "Shopping list not found"


def test_update_shopping_list_rejects_null(client, household):
    """Test clearing a required list field is a validation error."""
    created = client.post(
        lists_url(household.id), json={"type": "manual", "estimated_budget": 500}
    ).json()["data"]
    url = f"{lists_url(household.id)}/{created['id']}"

    response = client.put(url, json={"estimated_budget": None})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0].startswith("estimated_budget")

    assert client.put(url, json={"name": None}).status_code == 400
    assert client.get(url).json()["data"]["estimated_budget"] == 500
