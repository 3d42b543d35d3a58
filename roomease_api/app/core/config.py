"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with the bundled listing data and an in‑memory store.  In a
production deployment you should at least override ``JWT_SECRET`` and
``FRONTEND_URL``.
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Seed file shipped with the package; used when ``DATA_FILE`` is not set.
DEFAULT_DATA_FILE = str(Path(__file__).resolve().parent.parent.parent / "data" / "properties.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "RoomEase API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Only ``development`` exposes exception messages in 500 responses.
    environment: str = os.getenv("ENVIRONMENT", "production")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("JWT_SECRET", "your-secret-key-change-in-production")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))

    # Single origin allowed by CORS.  Credentials are allowed, so a
    # wildcard cannot be used here.
    frontend_url: str = os.getenv("FRONTEND_URL", "https://roomease-au.netlify.app")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # ``memory`` keeps listings loaded from ``data_file`` plus users and
    # bookings in process memory.  ``sqlite`` stores everything in the
    # database at ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "roomease.db")

    # JSON file with the listing collection used by the memory backend.
    data_file: str = os.getenv("DATA_FILE", DEFAULT_DATA_FILE)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
