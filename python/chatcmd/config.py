"""Application settings loaded from environment."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "data" / "izurvive.db"


class Settings(BaseSettings):
    # Steam master server
    steam_api_key: str = Field("", validation_alias="STEAM_API_KEY")
    steam_api_base_url: str = "https://api.steampowered.com"
    steam_server_limit: int = 5000

    # DayZ news feed
    dayz_news_url: str = "https://dayz.com/api/article"
    dayz_news_rows: int = 100
    dayz_article_base_url: str = "https://dayz.com/article"

    # Exchange rates
    currency_api_base_url: str = (
        "https://cdn.jsdelivr.net/gh/fawazahmed0/currency-api@1/latest/currencies"
    )

    # Location search
    izurvive_prefix: str = "https://www.izurvive.com/"
    izurvive_db_path: Path = _DEFAULT_DB_PATH

    # Upstream HTTP
    http_timeout_seconds: float = 30.0
    http_max_attempts: int = 3
    http_retry_backoff: float = 1.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Uses ``lru_cache`` so the .env file is read at most once per process.
    """
    return Settings()
