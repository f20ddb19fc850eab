# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with an ``INTRANET_``-prefixed environment
    variable or through a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="INTRANET_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "BUNDESPOLIZEI TEAMSTADT"
    database_url: str = "sqlite:///./intranet.db"
    session_cookie_name: str = "bpol_active_user"
    session_expiry_hours: int = Field(default=12, ge=1)
    cookie_secure: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"
    run_bootstrap_on_startup: bool = True


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
