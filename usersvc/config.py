"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - MONGO_URI has no default: a missing value aborts startup
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every non-secret setting, the service runs with only MONGO_URI exported
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongo_uri: str
    mongo_database: str = "cse_312"
    mongo_server_selection_timeout_ms: int = 5000
    users_collection: str = "users"

    @field_validator("mongo_uri")
    @classmethod
    def check_mongo_scheme(cls, v: str) -> str:
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("mongo_uri must start with mongodb:// or mongodb+srv://")
        return v

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = []

    # legacy keeps the historical status codes, normalized uses 400/404/500
    error_mapping: Literal["legacy", "normalized"] = "legacy"

    # Static assets
    static_dir: Path = DEFAULT_STATIC_DIR

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
