"""Pytest configuration and fixtures."""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mindful_meals import models  # noqa: F401
from mindful_meals.api.dependencies import get_barcode_lookup, get_clock
from mindful_meals.database import Base, get_db
from mindful_meals.main import app
from mindful_meals.models.household import Household
from mindful_meals.services.barcode_lookup import StaticBarcodeLookup

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed "now" for every test so expiry arithmetic is deterministic
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture(scope="function")
def client(db, clock):
    """Create a test client with database, clock and barcode lookup overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_barcode_lookup] = StaticBarcodeLookup
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def household(db):
    """A household to own pantry items and lists."""
    household = Household(name="Sharma Family", region="north_india", currency="INR")
    db.add(household)
    db.commit()
    db.refresh(household)
    return household


@pytest.fixture
def create_item(client, household):
    """Add a pantry item through the API and return its JSON."""

    def _create(**overrides):
        payload = {
            "name": "Basmati Rice",
            "category": "grains_pulses",
            "quantity": 5,
            "unit": "kg",
        }
        payload.update(overrides)
        response = client.post(
            f"/api/v1/households/{household.id}/pantry-items", json=payload
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
