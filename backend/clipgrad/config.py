"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

APP_VERSION = "0.1.4"


class Settings(BaseSettings):
    clipgrad_env: str = "development"
    clipgrad_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Gradient defaults used when a request leaves them out
    default_thickness: float = 20.0
    default_position: Literal["outside", "middle", "inside"] = "outside"
    default_step: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
