"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from minibank.api.main import create_app
from minibank.domain.models import Account
from minibank.domain.registry import AccountRegistry
from minibank.domain.seed import seed_demo_accounts


@pytest.fixture
def registry() -> AccountRegistry:
    """Empty registry"""
    return AccountRegistry()


@pytest.fixture
def seeded_registry() -> AccountRegistry:
    """Registry holding Alice (1000.0) and Bob (500.0)"""
    return seed_demo_accounts(AccountRegistry())


@pytest.fixture
def client(registry: AccountRegistry) -> TestClient:
    """Create FastAPI test client over an empty registry"""
    return TestClient(create_app(registry))


@pytest.fixture
def seeded_client(seeded_registry: AccountRegistry) -> TestClient:
    """Create FastAPI test client over the Alice/Bob registry"""
    return TestClient(create_app(seeded_registry))


@pytest.fixture
def sample_accounts() -> list[Account]:
    """Mixed accounts with metadata, owners differing only by case"""
    return [
        Account(
            id=10,
            owner="Jan Kowalski",
            balance=12500.5,
            currency="PLN",
            status="ACTIVE",
            created_at="2023-01-15T10:00:00",
            account_type="PREMIUM",
        ),
        Account(
            id=11,
            owner="jan kowalski",
            balance=300.0,
            currency="EUR",
            status="BLOCKED",
            created_at="2023-03-02T08:30:00",
            account_type="STANDARD",
        ),
        Account(
            id=12,
            owner="Anna Nowak",
            balance=300.0,
            currency="PLN",
            status="ACTIVE",
            created_at="2023-06-20T12:45:00",
            account_type="STANDARD",
        ),
    ]
