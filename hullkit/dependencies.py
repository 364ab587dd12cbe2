"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from hullkit.config import Settings, settings
from hullkit.engine.config import HullConfig


def get_settings() -> Settings:
    return settings


def get_hull_config(settings: Settings = Depends(get_settings)) -> HullConfig:
    return HullConfig.from_settings(settings)
