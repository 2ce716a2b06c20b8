"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, in-memory storage)
    ├── integration/       # SQLite-backed persistence and HTTP API tests
    └── shared/            # Shared fixtures and factories

Settings come from the OS environment or config/.env.dev like in local
development. A throwaway JWT secret is provided when none is configured,
so the suite runs on a fresh checkout.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")

from fiqhqa_config import clear_settings_cache  # noqa: E402

# Re-export shared fixtures
from tests.shared.fixtures.database import (  # noqa: E402
    async_engine,  # noqa: F401
    db_session,  # noqa: F401
    session_maker,  # noqa: F401
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence or HTTP behavior",
    )
    config.addinivalue_line(
        "markers",
        "e2e: Complete user journeys through the HTTP API",
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test see settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
