"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Evidence API"
    debug: bool = False
    log_level: str = "INFO"
    server_port: int = 8000
    # Deployment profiles reported by /hello/profile (e.g. "dev,local")
    active_profiles: list[str] = []

    # Database (postgresql+psycopg for psycopg3; sqlite:// accepted for local runs and tests)
    database_url: str = "postgresql+psycopg://localhost:5432/evidence_dev"
    db_connect_timeout: int = 10  # seconds

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()
        self.server_port = int(os.getenv("PORT", str(self.server_port)))

        _profiles = os.getenv("APP_PROFILES", "").strip()
        self.active_profiles = [p.strip() for p in _profiles.split(",") if p.strip()]

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'evidence_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
