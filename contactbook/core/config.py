"""
Configuration helpers for the contactbook backend.

Routers/services read settings through get_settings() instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    public_base_url: str
    contacts_api_base_url: str
    log_level: str
    contacts_api_timeout: float


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _float(value: str | None, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/"),
        contacts_api_base_url=os.getenv("CONTACTS_API_BASE_URL", "").rstrip("/"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        contacts_api_timeout=_float(os.getenv("CONTACTS_API_TIMEOUT"), 5.0),
    )
