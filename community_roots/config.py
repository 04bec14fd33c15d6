"""Application configuration using Pydantic Settings."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Language model provider settings."""

    model_config = SettingsConfigDict(env_prefix="LLM_")

    provider: str = "gemini"
    model: Optional[str] = None
    temperature: float = 0.1
    max_tokens: int = 1000
    timeout_seconds: float = 30.0


class KinshipSettings(BaseSettings):
    """Kinship term resolution settings."""

    model_config = SettingsConfigDict(env_prefix="KINSHIP_")

    classifier: str = "llm"  # llm | lookup
    timeout_seconds: float = 30.0
    max_hops: Optional[int] = None


class StorageSettings(BaseSettings):
    """Lineage storage backend settings."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: str = "local"  # local | remote | sheet
    local_path: str = "data/shared_roots_sync.json"
    sheet_path: str = "data/lineage.csv"
    remote_url: str = "http://localhost:8000"
    timeout_seconds: float = 10.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    google_api_key: str = ""
    openai_api_key: str = ""
    groq_api_key: str = ""
    log_level: str = "INFO"

    llm: LLMSettings = LLMSettings()
    kinship: KinshipSettings = KinshipSettings()
    storage: StorageSettings = StorageSettings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for entry points."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
