"""
Application configuration using environment variables.
"""
import os
import secrets
from functools import lru_cache
from pydantic import model_validator
from pydantic_settings import BaseSettings
from typing import List

# Used when SECRET_KEY is unset; tokens then die with the process
_EPHEMERAL_SECRET = secrets.token_urlsafe(32)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "AgencyHQ API"
    debug: bool = False
    environment: str = "development"

    # Tokens
    secret_key: str = os.getenv("SECRET_KEY", _EPHEMERAL_SECRET)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    refresh_token_expire_days: int = 7

    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./agencyhq.db")

    # Agency dashboard and client portal frontends
    cors_origins: List[str] = ["http://localhost:5173"]

    # slowapi limit strings
    login_rate_limit: str = "5/minute"
    register_rate_limit: str = "3/minute"
    refresh_rate_limit: str = "10/minute"

    # Logos and post media
    upload_dir: str = "./data/uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_bytes: int = 50 * 1024 * 1024

    # Screens
    client_placeholder: str = "Unknown client"
    recent_clients_limit: int = 5
    calendar_preview_size: int = 3
    report_default_days: int = 30
    dashboard_posts_limit: int = 100

    @model_validator(mode="after")
    def require_secret_in_production(self):
        if self.environment == "production" and self.secret_key == _EPHEMERAL_SECRET:
            raise ValueError(
                "SECRET_KEY must be set in production! "
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
            )
        return self

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
