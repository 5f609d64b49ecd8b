"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    session_cookie_name: str = "sessionId"
    session_max_age_days: int = 7
    host: str = "localhost"
    port: int = 3333
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def session_max_age_seconds(self) -> int:
        """Cookie lifetime in seconds."""
        return self.session_max_age_days * 24 * 60 * 60
