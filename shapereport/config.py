"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Language code ("en", "es") or numeric id ("1", "2")
    default_language: str = "en"
    log_level: str = "info"

    model_config = {
        "env_prefix": "SHAPEREPORT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
