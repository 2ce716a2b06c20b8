"""Pytest fixtures for API integration tests.

The application runs with in-memory storage so every test starts from an
empty user table. Password hashing uses the minimum bcrypt work factor.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from fiqhqa.application.ports import TransactionManager
from fiqhqa.infrastructure.persistence.memory import InMemoryTransactionManager
from fiqhqa.presentation.api.app import create_app
from fiqhqa.presentation.api.dependencies import get_transaction_manager
from fiqhqa_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-api-tests-only"


def build_test_client(
    settings: Settings,
    transaction_manager: TransactionManager,
) -> TestClient:
    """Create a test client whose units of work come from ``transaction_manager``."""
    app = create_app(settings=settings)
    app.dependency_overrides[get_transaction_manager] = lambda: transaction_manager

    # Unhandled errors must come back as 500 responses, not test failures
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with generic error messages."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        password_hash_rounds=4,
        api_host="127.0.0.1",
        api_port=8080,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def transaction_manager() -> InMemoryTransactionManager:
    return InMemoryTransactionManager()


@pytest.fixture
def test_client(api_settings, transaction_manager) -> TestClient:
    """Create a test client backed by in-memory storage."""
    return build_test_client(api_settings, transaction_manager)


@pytest.fixture
def detailed_client(api_settings, transaction_manager) -> TestClient:
    """Test client that exposes error messages instead of generic ones."""
    settings = api_settings.model_copy(update={"api_detailed_errors": True})
    return build_test_client(settings, transaction_manager)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "username": "amina",
        "password": "secret1",
        "name": "Amina",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data) -> dict:
    """Register the test user and return the public user fields."""
    response = test_client.post("/users", json=registered_user_data)
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def auth_headers(test_client, registered_user, registered_user_data) -> dict:
    """Get auth headers for the registered user."""
    response = test_client.post(
        "/login",
        json={
            "username": registered_user_data["username"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200, response.text

    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
