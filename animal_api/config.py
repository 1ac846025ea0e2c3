"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - The MongoDB URI comes from the environment (never hardcoded); missing is fatal
    - get_settings() is cached (lru_cache): single instance per process
    - PORT falls back to 5000 when unset

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_uri: str
    mongodb_database: str = "palvelinohjelmointi"
    mongodb_collection: str = "animals"
    mongodb_server_selection_timeout_ms: int = 5000
    mongodb_max_pool_size: int = 100

    @field_validator("mongodb_uri")
    @classmethod
    def require_mongodb_scheme(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGODB_URI must start with mongodb:// or mongodb+srv://")
        return v

    # Per-request deadline applied to every store call
    request_timeout_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
