"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Backend credentials come from SUPABASE_URL / SUPABASE_ANON_KEY (never hardcoded)
    - get_settings() is cached (lru_cache): logging setup and CORS headers only
    - Request handling builds Settings() fresh, so credentials are read per invocation

Design Decisions:
    - Empty defaults for backend credentials: a missing value surfaces as a
      client construction failure (500) on the request, not a startup crash
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Backend (Supabase)
    supabase_url: str = ""
    supabase_anon_key: str = ""

    @field_validator("supabase_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Strip whitespace and any trailing '/'."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    # CORS
    allowed_headers: str = "authorization, x-client-info, apikey"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_request_settings() -> Settings:
    """Uncached: re-reads the environment on every request."""
    return Settings()
