"""
Module: conftest.py
Description: Shared pytest fixtures for schedule notifier tests.

Provides test settings, fixed credentials, recording SQS doubles and a
moto-backed queue for end-to-end dispatch tests.
"""

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import boto3
import pytest
from moto import mock_aws
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.testing import capture_logs

from schedule_notifier.config.dispatcher import DispatcherConfig
from schedule_notifier.sqs_queue.client import SQSClientProvider
from schedule_notifier.sqs_queue.credentials import StaticCredentialSource
from schedule_notifier.utils.logger import configure_logging

# Uncached loggers so capture_logs() sees every entry
configure_logging("DEBUG", cache_logger_on_first_use=False)

TEST_REGION = "us-east-1"
TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/schedule-notifications"


class TestSettings(BaseSettings):
    """Test settings that don't read the environment or .env file."""

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )

    aws_region: str = Field(default=TEST_REGION)
    aws_endpoint_url: Optional[str] = Field(default=None)
    aws_profile: Optional[str] = Field(default=None)
    aws_sqs_queue_url: str = Field(default=TEST_QUEUE_URL)
    aws_sqs_enabled: bool = Field(default=True)


@pytest.fixture
def test_settings():
    """Provide test configuration settings."""
    return TestSettings()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so nothing can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def static_credentials():
    """Fixed credential source independent of the environment."""
    return StaticCredentialSource("testing", "testing")


@pytest.fixture
def enabled_config(test_settings):
    """Dispatcher configuration with notifications switched on."""
    return DispatcherConfig(
        queue_url=test_settings.aws_sqs_queue_url,
        enabled=test_settings.aws_sqs_enabled
    )


@pytest.fixture
def sqs_client():
    """
    Recording stand-in for a boto3 SQS client.

    send_message succeeds with a fixed message ID unless a test sets a
    side_effect.
    """
    client = MagicMock()
    client.send_message.return_value = {"MessageId": "msg-0001"}
    return client


@pytest.fixture
def client_provider(sqs_client):
    """Client provider double returning the recording SQS client."""
    provider = MagicMock()
    provider.endpoint_url = None
    provider.get_client.return_value = sqs_client
    return provider


@pytest.fixture
def async_sqs_client():
    """Recording stand-in for an aioboto3 SQS client."""
    client = AsyncMock()
    client.send_message.return_value = {"MessageId": "msg-async-0001"}
    return client


@pytest.fixture
def async_client_provider(async_sqs_client):
    """Client provider double whose session yields the async SQS client."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = async_sqs_client
    session.client.return_value.__aexit__.return_value = False

    provider = MagicMock()
    provider.endpoint_url = None
    provider.get_async_session.return_value = session
    return provider


@pytest.fixture
def log_output():
    """Capture structlog entries emitted during the test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def mocked_aws(aws_credentials):
    """Run the test against moto's in-memory AWS."""
    with mock_aws():
        yield


@pytest.fixture
def sqs_queue_url(mocked_aws):
    """Create the schedule notifications queue in moto and return its URL."""
    sqs = boto3.client("sqs", region_name=TEST_REGION)
    response = sqs.create_queue(QueueName="schedule-notifications")
    return response["QueueUrl"]


@pytest.fixture
def moto_client_provider(mocked_aws, static_credentials):
    """Real client provider talking to moto."""
    return SQSClientProvider(region=TEST_REGION, credential_source=static_credentials)
