"""Shared fixtures for the HTTP endpoint tests.

The application is built with an in-memory location catalog and respx
intercepts every upstream API call, so no network or database is touched.
"""
import pytest
import respx
from fastapi.testclient import TestClient

from chatcmd.config import Settings
from chatcmd.izurvive.models import Location, Spelling
from chatcmd.izurvive.store import AliasStore
from main import create_app

TEST_SETTINGS = Settings(
    steam_api_key="test-steam-key",
    http_max_attempts=2,
    http_retry_backoff=0,
)


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def store() -> AliasStore:
    locations = [
        Location(id=1, name="Chernogorsk", latitude=4.2, longitude=9.8),
        Location(id=2, name="Elektrozavodsk", latitude=-11.93, longitude=93.21),
        Location(id=3, name="Stary Sobor", latitude=24.06, longitude=69.03),
        Location(id=4, name="Novy Sobor", latitude=24.63, longitude=75.11),
    ]
    spellings = [
        Spelling(spelling="Cherno", location_id=1),
        Spelling(spelling="Elektro", location_id=2),
        Spelling(spelling="Electro", location_id=2),
    ]
    return AliasStore(locations, spellings)


@pytest.fixture
def mock_http():
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def client(settings, store, mock_http):
    """TestClient with the lifespan (startup/shutdown) running."""
    with TestClient(create_app(settings, store)) as test_client:
        yield test_client
