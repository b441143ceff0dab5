"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB (shared with the rest of the platform)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "recruitment_platform"

    # JWT Auth - tokens are issued by the platform login flow
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Simulated interviews have no backing collection yet
    simulations_available: int = 5

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # App
    debug: bool = True
    cors_origins: List[str] = ["*"]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
