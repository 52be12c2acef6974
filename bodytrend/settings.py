from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CsvSourceConfig(BaseModel):
    """A published CSV export that can be imported by key."""

    name: str
    url: str


DEFAULT_CSV_SOURCES: Dict[str, CsvSourceConfig] = {
    "lerito": CsvSourceConfig(
        name="Lerito",
        url=(
            "https://docs.google.com/spreadsheets/d/e/2PACX-1vThTzKmTRk3F8icHWCdKa4sBRyBR1"
            "yixAt8lfgxoU6YJYCgxvmDCZc3oqdJjM7e3kyUU0TGKofPMAb1/pub?output=csv"
        ),
    ),
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments export upper-case names, so match case-insensitively.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # An empty key rejects every authenticated request.
    api_key: str = ""
    target_weight_kg: float = 64.0
    projection_point_count: int = Field(3, ge=1, le=12)
    target_epsilon_kg: float = Field(0.1, ge=0)
    http_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    csv_sources: Dict[str, CsvSourceConfig] = Field(
        default_factory=lambda: dict(DEFAULT_CSV_SOURCES)
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
