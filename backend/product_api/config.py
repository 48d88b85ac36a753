"""Settings for the Product API, read from the environment or a .env file.

Invariants:
    - One Settings instance per process (get_settings is lru_cached)
    - database_url always names an async driver: a bare postgresql:// URL is
      rewritten to postgresql+asyncpg://
    - The same Settings feeds the app (main.py) and migrations (alembic/env.py)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Product API settings; each field maps to its upper-case env variable."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    database_url: str = "postgresql+asyncpg://products:products@db:5432/products"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # HTTP
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
