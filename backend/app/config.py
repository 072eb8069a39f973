"""
Seeder configuration loaded from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Seeder settings loaded from .env and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    FIREBASE_CREDENTIALS_PATH: str = "serviceAccountKey.json"
    FIREBASE_PROJECT_ID: str = "evcharging-aef0c"
    STATIONS_COLLECTION: str = "charging_stations"
    CHARGERS_COLLECTION: str = "chargers"
    USERS_COLLECTION: str = "users"
    TRANSACTIONS_COLLECTION: str = "transactions"
    # Exit status used when seeding fails. 0 keeps the historical behaviour.
    SEED_FAILURE_EXIT_CODE: int = 0
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        """Accept level names in any case (``info`` → ``INFO``)."""
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """
    Return cached seeder settings. Uses LRU cache to avoid re-loading from env.
    """
    return Settings()
