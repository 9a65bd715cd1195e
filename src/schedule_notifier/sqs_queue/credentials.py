"""
Module: credentials.py
Description: Pluggable AWS credential sources for the SQS client.

Credentials are ambient: the hosting environment supplies them and the
notifier never receives keys from its callers. Each source turns a
region into a boto3 (or aioboto3) session whose credential resolution
follows that source's policy.

Key Components:
- CredentialSource: Interface implemented by every source
- DefaultCredentialSource: botocore default provider chain
- ProfileCredentialSource: Named shared-config profile
- StaticCredentialSource: Fixed keys for tests and local tooling
- credential_source_from_settings(): Pick a source from configuration

Dependencies: boto3, aioboto3
Author: Schedule Notifier Team
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aioboto3
import boto3

from schedule_notifier.config.settings import Settings


class CredentialSource(ABC):
    """
    Strategy for resolving AWS credentials.

    Subclasses only describe how to build a session; credentials are
    resolved lazily by botocore, so a missing or invalid credential
    surfaces on the first request rather than here.
    """

    @abstractmethod
    def session_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments shared by boto3.Session and aioboto3.Session."""

    def create_session(self, region: str) -> boto3.Session:
        """Create a synchronous boto3 session for the given region."""
        return boto3.Session(region_name=region, **self.session_kwargs())

    def create_async_session(self, region: str) -> aioboto3.Session:
        """Create an aioboto3 session for the given region."""
        return aioboto3.Session(region_name=region, **self.session_kwargs())

    def describe(self) -> str:
        """Short name used in log entries."""
        return type(self).__name__


class DefaultCredentialSource(CredentialSource):
    """
    botocore's default provider chain.

    Environment variables are checked first (local runs), then the shared
    config files, then container and instance metadata (deployed hosts).
    """

    def session_kwargs(self) -> Dict[str, Any]:
        return {}


class ProfileCredentialSource(CredentialSource):
    """Credentials from a named profile in ~/.aws/config or ~/.aws/credentials."""

    def __init__(self, profile_name: str):
        if not profile_name or not isinstance(profile_name, str):
            raise ValueError("profile_name must be a non-empty string")
        self.profile_name = profile_name

    def session_kwargs(self) -> Dict[str, Any]:
        return {"profile_name": self.profile_name}

    def describe(self) -> str:
        return f"profile:{self.profile_name}"


class StaticCredentialSource(CredentialSource):
    """
    Fixed access keys.

    Intended for tests and local tooling where the environment must not
    leak into the client configuration.
    """

    def __init__(
        self,
        access_key_id: str,
        secret_access_key: str,
        session_token: Optional[str] = None
    ):
        if not access_key_id or not secret_access_key:
            raise ValueError("access_key_id and secret_access_key are required")
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token

    def session_kwargs(self) -> Dict[str, Any]:
        kwargs = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs

    def __repr__(self) -> str:
        return f"StaticCredentialSource(access_key_id={self.access_key_id!r})"


def credential_source_from_settings(settings: Settings) -> CredentialSource:
    """
    Select the credential source described by configuration.

    Args:
        settings: Loaded application settings

    Returns:
        ProfileCredentialSource when AWS_PROFILE is set, otherwise
        DefaultCredentialSource
    """
    if settings.aws_profile:
        return ProfileCredentialSource(settings.aws_profile)
    return DefaultCredentialSource()
