"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Configures all notifier settings from environment variables with
validation and defaults. Supports .env files for local development.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="Schedule Notifier", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")
    stage: str = Field(default="dev", description="Deployment stage")

    # AWS settings
    aws_region: str = Field(default="us-east-1", description="AWS region")
    aws_endpoint_url: Optional[str] = Field(
        default=None,
        description="Override endpoint for the SQS API (e.g. LocalStack)"
    )
    aws_profile: Optional[str] = Field(
        default=None,
        description="Named shared-config profile used for credentials"
    )

    # SQS settings
    aws_sqs_queue_url: str = Field(
        default="",
        description="URL of the schedule notifications queue; empty disables sending"
    )
    aws_sqs_enabled: bool = Field(
        default=False,
        description="Toggle for publishing schedule notifications"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('aws_sqs_queue_url')
    @classmethod
    def strip_queue_url(cls, v: str) -> str:
        """Treat a whitespace-only queue URL as unset."""
        return v.strip()


# Global settings instance
settings = Settings()
