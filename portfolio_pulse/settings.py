from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_PULSE_",
        env_file=".env",
        extra="ignore",
    )

    config_file: Path = Path("config/settings.yaml")
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"
    newsdata_api_key: Optional[str] = None
    cohere_api_key: Optional[str] = None
