"""Configuration management for toastcall."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TOASTCALL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Messages
    loading_message: str = Field(default="Processing...", description="Loading text when none is given")
    error_message: str = Field(default="Operation failed", description="Error text when none is given")
    copy_label: str = Field(default="Copy", description="Label of the copy action on error toasts")
    copied_message: str = Field(default="Error copied to clipboard", description="Confirmation after a copy")
    copy_failed_message: str = Field(default="Could not copy to clipboard", description="Warning when copy fails")

    # Display durations in milliseconds
    success_duration_ms: int = Field(default=3000, gt=0)
    error_duration_ms: int = Field(default=5000, gt=0)
    warning_duration_ms: int = Field(default=4000, gt=0)
    info_duration_ms: int = Field(default=3000, gt=0)

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")


def load_settings(**overrides: object) -> Settings:
    """Build settings from environment, .env file and explicit overrides."""
    settings = Settings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = settings.model_copy(update=updates)
    return settings
