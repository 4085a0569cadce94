"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and makes fixtures
available to all test modules.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to Python path so we can import the package without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from meet_adapter.config import AdapterConfig, reset_adapter_config  # noqa: E402
from meet_adapter.storage import InMemoryTokenStorage, access_token_key  # noqa: E402

USER_ID = "user-42"
WEBHOOK_SECRET = "s3cr3t"


@pytest.fixture(autouse=True)
def _reset_config_singleton():
    yield
    reset_adapter_config()


@pytest.fixture
def adapter_config() -> AdapterConfig:
    """Config with explicit values, independent of the environment."""
    return AdapterConfig(
        overrides={
            "authenticationMethod": "oAuth2",
            "clientId": "client-id",
            "clientSecret": "client-secret",
            "authScopes": "https://www.googleapis.com/auth/meetings.space.created",
            "oauthCallback": "https://platform.example.com/callback",
            "GOOGLE_MEET_API_BASE_URL": "https://meet.googleapis.com/v2",
            "webhookSecret": WEBHOOK_SECRET,
        }
    )


@pytest.fixture
def token_storage() -> InMemoryTokenStorage:
    return InMemoryTokenStorage({access_token_key(USER_ID): "token-1"})


@pytest.fixture
def mock_oauth() -> MagicMock:
    """Mock platform OAuth dependency."""
    return MagicMock()


@pytest.fixture
def mock_http() -> MagicMock:
    """Mock HTTP service."""
    return MagicMock()
