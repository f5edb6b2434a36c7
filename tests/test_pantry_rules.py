"""Tests for pantry item stock and expiry rules."""

from datetime import timedelta
from decimal import Decimal

import pytest

from mindful_meals.models.enums import StockLevel
from mindful_meals.models.pantry import PantryItem, days_until, stock_level_for


class TestStockLevel:
    """Tests for quantity classification."""

    @pytest.mark.parametrize(
        "quantity,expected",
        [
            ("0", StockLevel.CRITICAL),
            ("0.1", StockLevel.CRITICAL),
            ("0.11", StockLevel.LOW),
            ("0.5", StockLevel.LOW),
            ("0.51", StockLevel.MEDIUM),
            ("1.0", StockLevel.MEDIUM),
            ("1.01", StockLevel.FULL),
            ("25", StockLevel.FULL),
        ],
    )
    def test_boundaries(self, quantity, expected):
        assert stock_level_for(Decimal(quantity)) == expected

    def test_needs_restocking_matches_low_stock_threshold(self):
        """Items at or below 0.5 need restocking, anything above does not."""
        assert PantryItem(quantity=Decimal("0.5")).needs_restocking is True
        assert PantryItem(quantity=Decimal("0.05")).needs_restocking is True
        assert PantryItem(quantity=Decimal("0.51")).needs_restocking is False


class TestExpiry:
    """Tests for expiry arithmetic relative to an injected now."""

    def test_days_until_rounds_up(self, now):
        assert days_until(now + timedelta(days=2, hours=1), now) == 3
        assert days_until(now + timedelta(days=2), now) == 2
        assert days_until(now + timedelta(minutes=1), now) == 1
        assert days_until(now - timedelta(days=1, hours=12), now) == -1

    def test_days_until_accepts_naive_values_as_utc(self, now):
        naive = (now + timedelta(days=4)).replace(tzinfo=None)
        assert days_until(naive, now) == 4

    def test_no_expiry_date(self, now):
        item = PantryItem(expiry_date=None)
        assert item.days_until_expiry(now) is None
        assert item.is_expired(now) is False
        assert item.is_expiring_soon(now) is False

    @pytest.mark.parametrize(
        "offset,expired,expiring_soon",
        [
            (timedelta(days=-3), True, False),
            (timedelta(minutes=-1), True, False),
            (timedelta(0), False, False),
            (timedelta(hours=6), False, True),
            (timedelta(days=7), False, True),
            (timedelta(days=7, minutes=1), False, False),
            (timedelta(days=30), False, False),
        ],
    )
    def test_expired_and_expiring_soon_are_exclusive(self, now, offset, expired, expiring_soon):
        item = PantryItem(expiry_date=now + offset)
        assert item.is_expired(now) is expired
        assert item.is_expiring_soon(now) is expiring_soon
        assert not (item.is_expired(now) and item.is_expiring_soon(now))
