# clientdesk/core/config.py
"""
Application settings loaded from environment variables (and .env).
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import MAX_EXPIRING_WINDOW_DAYS, IdStrategy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "ClientDesk"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"

    # Simulated latency for demos; tests run with it disabled
    simulated_latency: bool = False
    latency_scale: float = 1.0

    id_strategy: IdStrategy = IdStrategy.MONOTONIC

    # Optional directory with <entity>.json files replacing the embedded seeds
    seed_dir: Optional[str] = None

    expiring_window_days: int = Field(default=30, ge=0, le=MAX_EXPIRING_WINDOW_DAYS)
    recent_activity_limit: int = 5

    allowed_origins: str = "http://localhost:5173,http://localhost:8000"
    audit_log_file: Optional[str] = None

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
