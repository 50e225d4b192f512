"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./invoice_designer.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC offset) used for stored timestamps",
    )
    log_level: str = Field(
        default="INFO", description="Root logging level for the application"
    )
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated list of origins allowed to call the API",
    )
    seed_on_startup: bool = Field(
        default=True,
        description="Insert the example template when the template table is empty",
    )
    qr_service_url: str = Field(
        default="https://api.qrserver.com/v1/create-qr-code/?size=150x150&data=",
        description="Prefix of the external QR rendering service; the payload is appended",
        min_length=1,
    )
    placeholder_image_url: str = Field(
        default="https://placehold.co/400?text=Image",
        description="Image shown for image elements without content",
        min_length=1,
    )
    signature_placeholder_url: str = Field(
        default="https://placehold.co/200x100?text=Signature",
        description="Image shown for signature elements without content",
        min_length=1,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
