"""Notes configuration loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Storage
    notes_backend: Literal["memory", "file", "redis"] = "file"
    notes_file: str = "data/notes.json"
    notes_key: str = "notes"

    # Redis (only used when notes_backend == "redis")
    redis_url: str = "redis://localhost:6379"

    # Observability
    log_level: str = "INFO"
    metrics_port: int = 0  # 0 disables the Prometheus exporter


settings = Settings()
