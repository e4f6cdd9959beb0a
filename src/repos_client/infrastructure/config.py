"""Client configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``GITHUB_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    endpoint: str = "https://api.github.com"
    oauth_token: SecretStr | None = None
    user_agent: str = "repos-client/1.0"
    timeout_seconds: float = 30.0
    log_level: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton client settings (cached after first call)."""
    return Settings()
