"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hullkit_env: str = "development"
    hullkit_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Hull policies (see HullConfig)
    hull_allow_empty: bool = False
    hull_keep_collinear: bool = True

    # Request size cap for POST /api/hull
    max_points: int = 100_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
