"""
Module: result.py
Description: Outcome of a single notification dispatch attempt.

Dispatch never raises to its caller. Every attempt is reduced to a
DispatchResult which the dispatcher hands to its logging step.
"""

from enum import Enum
from typing import Optional

from botocore.exceptions import ClientError
from pydantic import BaseModel, ConfigDict


class DispatchOutcome(str, Enum):
    """How a dispatch attempt ended."""

    SENT = "sent"
    SKIPPED = "skipped"
    SERIALIZATION_FAILED = "serialization_failed"
    SERVICE_FAILED = "service_failed"
    TRANSPORT_FAILED = "transport_failed"
    UNEXPECTED_FAILED = "unexpected_failed"


class DispatchResult(BaseModel):
    """
    Result of one dispatch attempt.

    Attributes:
        outcome: How the attempt ended
        message_id: SQS message ID when the message was accepted
        error_code: Service error code (SQS errors only)
        error_message: Human-readable failure detail
        error_type: Exception class name for failures
    """

    model_config = ConfigDict(frozen=True)

    outcome: DispatchOutcome
    message_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is DispatchOutcome.SENT

    @classmethod
    def sent(cls, message_id: Optional[str]) -> "DispatchResult":
        return cls(outcome=DispatchOutcome.SENT, message_id=message_id)

    @classmethod
    def skipped(cls) -> "DispatchResult":
        return cls(outcome=DispatchOutcome.SKIPPED)

    @classmethod
    def failed(cls, outcome: DispatchOutcome, error: Exception) -> "DispatchResult":
        """
        Build a failure result from the exception that ended the attempt.

        ClientError details come from the service response; other
        exceptions contribute their string form.
        """
        error_code = None
        error_message = str(error)
        if isinstance(error, ClientError):
            details = error.response.get('Error', {})
            error_code = details.get('Code')
            error_message = details.get('Message') or error_message

        return cls(
            outcome=outcome,
            error_code=error_code,
            error_message=error_message,
            error_type=type(error).__name__
        )
