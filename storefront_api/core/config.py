# storefront_api/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root (one level above the package)
BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - SUPABASE_URL
      - SUPABASE_SERVICE_ROLE_KEY (backend only; used for auth + table access)

    Optional:
      - DATABASE_URL (direct Postgres connection, only used to bootstrap tables)
      - COOKIE_SECURE (set true when served over HTTPS)
      - CORS_ORIGINS (JSON list of allowed browser origins)
      - STATIC_DIR (folder with the storefront / admin pages)
    """

    PROJECT_NAME: str = "Storefront API"

    # Supabase
    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE_KEY: str

    # Postgres (schema bootstrap only)
    DATABASE_URL: str | None = None

    # Session cookies
    COOKIE_SECURE: bool = False

    # Live Server origins + 'null' for pages opened from disk
    CORS_ORIGINS: list[str] = [
        "http://127.0.0.1:5500",
        "http://localhost:5500",
        "null",
    ]

    STATIC_DIR: Path = BASE_DIR / "static"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
