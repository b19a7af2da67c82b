"""Application configuration via pydantic-settings.

Reads from environment variables and .env file at project root.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root is 4 levels up from this file:
# src/tacocloud/tacocloud/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Catalog ---
    ingredients_json_path: str = str(PACKAGE_DATA_DIR / "ingredients.json")

    # --- Logging ---
    log_level: str = "INFO"
    log_dir: str = str(PROJECT_ROOT / "logs")
    log_to_file: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
