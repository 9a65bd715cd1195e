"""
Module: test_settings.py
Description: Unit tests for settings loading and dispatcher configuration.
"""

import pytest
from pydantic import ValidationError

from schedule_notifier.config.dispatcher import DispatcherConfig
from schedule_notifier.config.settings import Settings

CONFIG_ENV_VARS = [
    "AWS_REGION",
    "AWS_SQS_QUEUE_URL",
    "AWS_SQS_ENABLED",
    "AWS_ENDPOINT_URL",
    "AWS_PROFILE",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the shell."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self, clean_env):
        """Test notifications are off and region is us-east-1 by default."""
        settings = Settings(_env_file=None)

        assert settings.aws_region == "us-east-1"
        assert settings.aws_sqs_queue_url == ""
        assert settings.aws_sqs_enabled is False
        assert settings.aws_endpoint_url is None
        assert settings.aws_profile is None
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("AWS_REGION", "eu-west-1")
        clean_env.setenv("AWS_SQS_QUEUE_URL", "https://sqs.eu-west-1.amazonaws.com/1/q")
        clean_env.setenv("AWS_SQS_ENABLED", "true")

        settings = Settings(_env_file=None)

        assert settings.aws_region == "eu-west-1"
        assert settings.aws_sqs_queue_url == "https://sqs.eu-west-1.amazonaws.com/1/q"
        assert settings.aws_sqs_enabled is True

    def test_blank_queue_url_is_empty(self, clean_env):
        clean_env.setenv("AWS_SQS_QUEUE_URL", "   ")

        assert Settings(_env_file=None).aws_sqs_queue_url == ""

    def test_log_level_normalized(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "warning")

        assert Settings(_env_file=None).log_level == "WARNING"

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestDispatcherConfig:
    """Test cases for the dispatcher gate configuration."""

    @pytest.mark.parametrize(
        "queue_url,enabled,active",
        [
            ("https://sqs.us-east-1.amazonaws.com/1/q", True, True),
            ("https://sqs.us-east-1.amazonaws.com/1/q", False, False),
            ("", True, False),
            ("", False, False),
        ]
    )
    def test_is_active(self, queue_url, enabled, active):
        assert DispatcherConfig(queue_url=queue_url, enabled=enabled).is_active is active

    def test_misconfigured_only_when_enabled_without_url(self):
        assert DispatcherConfig(queue_url="", enabled=True).is_misconfigured
        assert not DispatcherConfig(queue_url="", enabled=False).is_misconfigured
        assert not DispatcherConfig(queue_url="https://q", enabled=True).is_misconfigured

    def test_defaults_are_disabled(self):
        config = DispatcherConfig()

        assert config.queue_url == ""
        assert config.enabled is False
        assert not config.is_active

    def test_from_settings(self, test_settings):
        config = DispatcherConfig.from_settings(test_settings)

        assert config.queue_url == test_settings.aws_sqs_queue_url
        assert config.enabled is True

    def test_immutable(self):
        config = DispatcherConfig(queue_url="https://q", enabled=True)

        with pytest.raises(ValidationError):
            config.enabled = False
