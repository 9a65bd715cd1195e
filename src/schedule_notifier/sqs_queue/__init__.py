"""
Package: sqs_queue
Description: SQS client construction for schedule notifications.

Provides the process-wide client provider and the pluggable credential
sources it is configured with.
"""

from .client import SQSClientProvider, get_queue_client_provider
from .credentials import (
    CredentialSource,
    DefaultCredentialSource,
    ProfileCredentialSource,
    StaticCredentialSource,
    credential_source_from_settings,
)

__all__ = [
    "SQSClientProvider",
    "get_queue_client_provider",
    "CredentialSource",
    "DefaultCredentialSource",
    "ProfileCredentialSource",
    "StaticCredentialSource",
    "credential_source_from_settings",
]
