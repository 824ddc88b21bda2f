from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cache_dir: Path = Field(default=Path(".cache"), alias="CACHE_DIR")
    data_file: Path = Field(default=Path(".cache") / "finance-data.json", alias="DATA_FILE")

    rate_api_url: str = Field(default="https://open.er-api.com/v6/latest/USD", alias="RATE_API_URL")
    rate_cache_ttl: int = Field(default=3600, alias="RATE_CACHE_TTL")
    rate_timeout: float = Field(default=10.0, alias="RATE_TIMEOUT")

    def validate_required(self) -> None:
        if self.rate_cache_ttl < 0:
            raise ValueError("RATE_CACHE_TTL must be >= 0")

        if self.rate_timeout <= 0:
            raise ValueError("RATE_TIMEOUT must be > 0")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    settings.cache_dir.mkdir(parents=True, exist_ok=True)
    settings.data_file.parent.mkdir(parents=True, exist_ok=True)
    return settings
