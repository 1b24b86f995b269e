"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded for production)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Settings are read once by the composition root (bootstrap.build_backend) and
      handed to components as plain values; only bootstrap calls get_settings()
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://pizza:pizza@db:5432/pizza"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_connect_timeout_seconds: int = Field(60, ge=1)
    database_echo: bool = False

    # Credentials
    jwt_secret: str = "change-me-jwt-secret"
    jwt_algorithm: str = "HS256"
    password_hash_rounds: int = Field(10, ge=4, le=31)

    # Listing
    list_per_page: int = Field(10, ge=1)

    # Seeded on first init_db()
    default_admin_name: str = "pizza admin"
    default_admin_email: str = "a@jwt.com"
    default_admin_password: str = "admin"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
