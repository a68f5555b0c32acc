# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Supabase Postgres connection string)
      - ADMIN_EMAIL (the single email allowed to open the admin panel)

    Optional:
      - ANALYTICS_WEBHOOK_URL (events are only logged when unset)
    """

    PROJECT_NAME: str = "Resale Waitlist API"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Supabase Postgres
    DATABASE_URL: str

    # Admin gate. This is a UI toggle, not access control.
    ADMIN_EMAIL: str

    # Analytics sink
    ANALYTICS_WEBHOOK_URL: str | None = None
    ANALYTICS_TIMEOUT_SECONDS: float = 2.0

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
