"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from shared.config import Settings
from shared.models import Role

from tests.factories import (
    active_subscription,
    auth_headers,
    create_account,
    create_node,
    create_test_token,
)
from tests.fakes import FakeAIClient, FakeBlobStorage, FakePaymentGateway, FakeSupabaseClient

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        razorpay_key_id="rzp_test_key",
        razorpay_key_secret="test_key_secret",
    )


@pytest.fixture
def db() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def storage() -> FakeBlobStorage:
    return FakeBlobStorage()


@pytest.fixture
def ai() -> FakeAIClient:
    return FakeAIClient()


@pytest.fixture
def payments() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def container(settings, db, storage, ai, payments) -> ServiceContainer:
    return ServiceContainer(settings=settings, db=db, storage=storage, ai=ai, payments=payments)


@pytest.fixture
def client(container) -> TestClient:
    """TestClient whose whole service graph runs on the fakes."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    return TestClient(app)


@pytest.fixture
def category_pair(db):
    """A root category with one sub category."""
    parent = create_node(db, "Engineering")
    sub = create_node(db, "Computer Science", parent=parent)
    return parent, sub


@pytest.fixture
def user(db):
    """A regular user without a subscription."""
    return create_account(db, email="free@example.com", name="Free Student")


@pytest.fixture
def subscriber(db):
    """A regular user with an active yearly subscription."""
    return create_account(
        db,
        email="paid@example.com",
        name="Paid Student",
        subscription=active_subscription(),
    )


@pytest.fixture
def admin(db):
    return create_account(db, email="admin@example.com", name="Admin", role=Role.ADMIN)


@pytest.fixture
def user_headers(settings, user) -> dict[str, str]:
    return auth_headers(create_test_token(settings, user.id))


@pytest.fixture
def subscriber_headers(settings, subscriber) -> dict[str, str]:
    return auth_headers(create_test_token(settings, subscriber.id))


@pytest.fixture
def admin_headers(settings, admin) -> dict[str, str]:
    return auth_headers(create_test_token(settings, admin.id, role=Role.ADMIN))
