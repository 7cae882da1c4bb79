"""
NutriSnap Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that needs the API gets a fresh app built over its own
       temporary data directory, driven by an HTTPX AsyncClient.

Fixture Hierarchy (all function-scoped):
    ├── data_dir:       Empty temporary directory for the collection files
    ├── test_settings:  Settings pointing at data_dir
    ├── meal_store / calorie_store:  Initialized JsonFileStores in data_dir
    ├── app:            FastAPI instance from create_app(test_settings)
    └── test_client:    HTTPX AsyncClient over ASGITransport
"""

import os
import tempfile

# Override settings BEFORE any nutrisnap import: importing nutrisnap.main
# builds the module-level app, which creates its collection files.
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="nutrisnap_test_")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from nutrisnap.config import Settings
from nutrisnap.store import EMPTY_LIST, EMPTY_MAPPING, JsonFileStore


@pytest.fixture
def data_dir(tmp_path):
    """Fresh directory for meals.json and calories.json."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(data_dir):
    return Settings(data_dir=str(data_dir))


@pytest.fixture
def meal_store(data_dir):
    store = JsonFileStore(data_dir / "meals.json", EMPTY_LIST)
    store.ensure_initialized()
    return store


@pytest.fixture
def calorie_store(data_dir):
    store = JsonFileStore(data_dir / "calories.json", EMPTY_MAPPING)
    store.ensure_initialized()
    return store


@pytest.fixture
def app(test_settings):
    from nutrisnap.main import create_app
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client talking to the app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
