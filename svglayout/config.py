"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svglayout.engine.config import LayoutConfig


class Settings(BaseSettings):
    svglayout_env: str = "development"
    svglayout_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Axis sizes below this (in document units) are flagged dynamic
    dynamic_dim_threshold: float = 5.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(dynamic_dim_threshold=self.dynamic_dim_threshold)


settings = Settings()
