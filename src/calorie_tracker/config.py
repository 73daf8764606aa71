"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nutritionix_app_id: str
    nutritionix_app_key: str
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    nutritionix_timeout_seconds: float = 15
    data_file: Path = Path(".calorie_tracker/storage.json")
    storage_key: str = "calorieData"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
