"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from trengo_fields.app import app
from trengo_fields.config import Settings, get_settings

TEST_TOKEN = "test-trengo-token"
TEST_LINK_FIELD_ID = "1234"


@pytest.fixture
def settings() -> Settings:
    """Settings with known Trengo credentials, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        trengo_signing_secret="test-signing-secret",
        trengo_token=TEST_TOKEN,
        trengo_link_field_id=TEST_LINK_FIELD_ID,
    )


@pytest.fixture
def client(settings: Settings):
    """Create a TestClient whose routes receive the test settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
