"""Shared fixtures for the third-party API client tests."""
import pytest
import respx

from chatcmd.config import Settings

TEST_SETTINGS = Settings(
    steam_api_key="test-steam-key",
    http_max_attempts=3,
    http_retry_backoff=0,
)


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def mock_http():
    """respx mock transport intercepting every outgoing httpx request."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def server_list_response():
    return {
        "response": {
            "servers": [
                {
                    "addr": "203.0.113.10:27016",
                    "gameport": 2302,
                    "steamid": "90000000000000001",
                    "name": "Chernarus Survivors | 1PP",
                    "appid": 221100,
                    "gamedir": "dayz",
                    "version": "1.25.0",
                    "product": "dayz",
                    "players": 42,
                    "max_players": 60,
                    "map": "chernarusplus",
                },
                {
                    "addr": "203.0.113.10:27017",
                    "gameport": 2402,
                    "name": "Livonia PvE",
                    "players": 3,
                    "max_players": 40,
                    "map": "enoch",
                },
            ]
        }
    }


@pytest.fixture
def news_response():
    return {
        "rows": [
            {
                "title": "Status Report - Update 1.25",
                "slug": "status-report-update-1-25",
                "ArticleCategory": {"slug": "status-report", "name": "Status Report"},
            },
            {
                "title": "DayZ Frostline Released",
                "slug": "dayz-frostline-released",
                "ArticleCategory": {"slug": "news"},
            },
        ]
    }
