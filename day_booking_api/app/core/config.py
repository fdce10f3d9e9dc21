"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that the service can be deployed without a
settings library.  Defaults are provided for all fields; override them
via environment variables before the application is imported.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Day Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "bookings.db")
    # Seconds a writer waits for SQLite's write lock before giving up.
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "30"))

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()


# Maximum number of bookings accepted for one calendar day.  Baked into
# the capacity trigger by the first migration, so it is not read from
# the environment.
DAY_CAPACITY = 10
