"""
Module: client.py
Description: Process-wide SQS client provider.

Builds the SQS handle used by the notification dispatchers: a boto3
client for synchronous callers and an aioboto3 session for async ones.
Both are configured with a region, an optional endpoint override and a
credential source, and are created once per process.
"""

import threading
from functools import lru_cache
from typing import Any, Optional

import aioboto3

from schedule_notifier.config.settings import settings
from schedule_notifier.sqs_queue.credentials import (
    CredentialSource,
    DefaultCredentialSource,
    credential_source_from_settings,
)
from schedule_notifier.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_REGION = "us-east-1"


class SQSClientProvider:
    """
    Lazily constructed, shared SQS handle.

    The first call to get_client() or get_async_session() builds the
    underlying object; subsequent calls return the same instance. No
    network traffic happens here, so credential and region problems only
    surface when a message is sent.

    Attributes:
        region: AWS region of the queue
        credential_source: Strategy used to resolve credentials
        endpoint_url: Optional endpoint override (LocalStack, VPC endpoint)
    """

    def __init__(
        self,
        region: Optional[str] = None,
        credential_source: Optional[CredentialSource] = None,
        endpoint_url: Optional[str] = None
    ):
        self.region = region or DEFAULT_REGION
        self.credential_source = credential_source or DefaultCredentialSource()
        self.endpoint_url = endpoint_url or None

        self._client = None
        self._async_session = None
        self._lock = threading.Lock()

    def get_client(self) -> Any:
        """
        Get the synchronous boto3 SQS client.

        Returns:
            botocore SQS client bound to the configured region
        """
        if self._client is None:
            with self._lock:
                if self._client is None:
                    session = self.credential_source.create_session(self.region)
                    self._client = session.client('sqs', endpoint_url=self.endpoint_url)

                    logger.info(
                        "SQS client initialized",
                        region=self.region,
                        endpoint_url=self.endpoint_url,
                        credential_source=self.credential_source.describe()
                    )
        return self._client

    def get_async_session(self) -> aioboto3.Session:
        """
        Get the aioboto3 session used to open async SQS clients.

        Returns:
            aioboto3 Session bound to the configured region
        """
        if self._async_session is None:
            with self._lock:
                if self._async_session is None:
                    self._async_session = self.credential_source.create_async_session(
                        self.region
                    )

                    logger.info(
                        "SQS async session initialized",
                        region=self.region,
                        endpoint_url=self.endpoint_url,
                        credential_source=self.credential_source.describe()
                    )
        return self._async_session


@lru_cache(maxsize=None)
def get_queue_client_provider() -> SQSClientProvider:
    """
    Get the process-wide SQS client provider built from settings.

    Returns:
        Shared SQSClientProvider instance
    """
    return SQSClientProvider(
        region=settings.aws_region,
        credential_source=credential_source_from_settings(settings),
        endpoint_url=settings.aws_endpoint_url
    )
