"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the project root, if
present, is loaded first so that local development does not require
exporting variables by hand.  Defaults are provided for all fields; in
a production deployment override at least ``JWT_SECRET`` and
``DATABASE_URL``.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR = Path(__file__).resolve().parent.parent / "data"

load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

DEFAULT_JWT_SECRET = "dev_secret_change_me"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CityEase API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional log file; rotated by size when set.
    log_file: str = os.getenv("LOG_FILE", "")

    # Signing key for access tokens.  Tokens are valid for seven days
    # unless ACCESS_TOKEN_EXPIRE_MINUTES says otherwise.
    jwt_secret: str = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path or connection string for the SQLite database.  A
    # ``sqlite:///`` prefix is accepted.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "cityease.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Seed files for the read‑only catalog.
    services_seed: str = os.getenv("SERVICES_SEED", str(DATA_DIR / "services.seed.json"))
    professionals_seed: str = os.getenv("PROFESSIONALS_SEED", str(DATA_DIR / "professionals.seed.json"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
