"""
Seeder configuration loaded from environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_PRODUCTION_ENVIRONMENTS = {"production", "prod"}
_DEFAULT_DB_NAME = "mas_business_os"


class Settings(BaseSettings):
    """
    Seeder settings loaded from .env and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PROJECT_ID: str | None = None
    ENVIRONMENT: str = "development"
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str | None = None
    MONGODB_USE_TRANSACTIONS: bool = True
    SEED_BATCH_SIZE: int = 500
    SEED_CLEAR_PAGE_SIZE: int = 500
    SEED_ACTOR: str = "seeder"
    LOG_LEVEL: str = "INFO"
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8888

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() in _PRODUCTION_ENVIRONMENTS

    @property
    def database_name(self) -> str:
        """Database the seed targets: explicit name, else the project id."""
        return self.MONGODB_DB_NAME or self.PROJECT_ID or _DEFAULT_DB_NAME


@lru_cache
def get_settings() -> Settings:
    """
    Return cached seeder settings. Uses LRU cache to avoid re-loading from env.
    """
    return Settings()
