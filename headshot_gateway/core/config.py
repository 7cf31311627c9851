"""
Application configuration. All settings from environment with sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env is optional; when present it overrides the defaults below.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    # App
    app_name: str = Field(default="Headshot Transform Gateway")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

    # CORS
    cors_origins: str = Field(default="*")
    cors_allow_credentials: bool = Field(default=False)

    # Upstream image model (Gemini)
    gemini_api_key: str = Field(
        default="",
        description="Server-held Gemini credential. Empty means the deployment is misconfigured.",
    )
    gemini_model: str = Field(default="gemini-2.5-flash-image-preview")
    upstream_timeout_seconds: float = Field(
        default=120.0,
        ge=0.0,
        le=600.0,
        description="Upper bound for one upstream call. 0 leaves it to the transport default.",
    )

    # Uploads
    upload_max_size_mb: int = Field(default=10, ge=1, le=100)

    @property
    def upload_max_bytes(self) -> int:
        return self.upload_max_size_mb * 1024 * 1024

    @property
    def credential_configured(self) -> bool:
        return bool(self.gemini_api_key.strip())

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        if "*" in origins:
            return ["*"]
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
