"""FastAPI dependency injection."""

from __future__ import annotations

from svglayout.config import Settings, settings
from svglayout.engine.config import LayoutConfig


def get_settings() -> Settings:
    return settings


def get_layout_config() -> LayoutConfig:
    return settings.layout_config()
