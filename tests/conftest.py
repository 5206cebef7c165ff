"""
Pytest configuration and shared fixtures.
Puts the project root on sys.path and provides the backend connection
parameters before any project module loads its settings.
"""

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to sys.path so we can import app, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("APPWRITE_ENDPOINT", "https://appwrite.test/v1")
os.environ.setdefault("APPWRITE_PROJECT_ID", "test-project")

from fake_appwrite import FakeAppwrite  # noqa: E402
from test_fixtures import SMALL_SEED, image_response  # noqa: E402
from adapters import appwrite_adapter  # noqa: E402
from adapters.appwrite_adapter import AppwriteBackend  # noqa: E402
from app.config import AppwriteConfig  # noqa: E402
from domain.schemas import SeedData  # noqa: E402


TEST_CONFIG = AppwriteConfig(endpoint="https://appwrite.test/v1", project_id="test-project")


@pytest.fixture
def fake():
    return FakeAppwrite()


@pytest.fixture
def backend(fake):
    return AppwriteBackend(
        TEST_CONFIG,
        account=fake.account,
        databases=fake.databases,
        storage=fake.storage,
    )


@pytest.fixture(autouse=True)
def reset_shared_backend():
    yield
    appwrite_adapter.set_backend(None)


@pytest.fixture
def http():
    """Stub HTTP client whose GET returns a small PNG."""
    client = Mock()
    client.get = Mock(return_value=image_response())
    return client


@pytest.fixture
def small_seed():
    return SeedData.model_validate(SMALL_SEED)
