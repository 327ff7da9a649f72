"""Package configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is loaded from ``WOMENSHEALTH_*`` variables (or .env file)."""

    # --- App ---
    app_name: str = "Women's Health Calculator"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"  # development | staging | production

    # --- Calculator ---
    calculator_config_path: Path | None = None  # overrides the bundled YAML

    model_config = {
        "env_prefix": "WOMENSHEALTH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
