# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, read from environment variables and .env."""

    app_name: str = "Trip Planner"
    app_version: str = "0.1.0"
    debug: bool = False

    database_url: str = "sqlite:///./tripplanner.db"
    secret_key: SecretStr = SecretStr("")

    # Comma separated list of origins allowed by CORS
    allowed_origins: str = "http://localhost:5173"

    session_expiry_days: int = 7
    registration_enabled: bool = True

    # Dashboard aggregation
    dashboard_timeout_seconds: float = 10.0
    document_expiry_window_days: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Return allowed origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
