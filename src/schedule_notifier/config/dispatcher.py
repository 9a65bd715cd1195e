"""
Module: dispatcher.py
Description: Immutable configuration for the notification dispatcher.
"""

from pydantic import BaseModel, ConfigDict, Field

from schedule_notifier.config.settings import Settings


class DispatcherConfig(BaseModel):
    """
    Queue target and feature toggle for schedule notifications.

    Attributes:
        queue_url: URL of the destination SQS queue (may be empty)
        enabled: Whether notifications are published at all
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    queue_url: str = Field(default="", description="Destination SQS queue URL")
    enabled: bool = Field(default=False, description="Publish notifications")

    @property
    def is_active(self) -> bool:
        """True when notifications are enabled and a queue URL is configured."""
        return self.enabled and bool(self.queue_url)

    @property
    def is_misconfigured(self) -> bool:
        """True when notifications are enabled but no queue URL is set."""
        return self.enabled and not self.queue_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatcherConfig":
        """Build the dispatcher configuration from application settings."""
        return cls(
            queue_url=settings.aws_sqs_queue_url,
            enabled=settings.aws_sqs_enabled
        )
