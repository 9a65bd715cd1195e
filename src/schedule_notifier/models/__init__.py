"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models used by the notifier:
- ScheduleNotification / BatchScheduleNotification: queue message bodies
- DispatchResult: outcome of a dispatch attempt

All models are exported here for convenient importing.
"""

from .notification import (
    BatchScheduleNotification,
    NotificationMessage,
    ScheduleEvent,
    ScheduleNotification,
    current_timestamp_ms,
)
from .result import DispatchOutcome, DispatchResult

__all__ = [
    "BatchScheduleNotification",
    "NotificationMessage",
    "ScheduleEvent",
    "ScheduleNotification",
    "current_timestamp_ms",
    "DispatchOutcome",
    "DispatchResult",
]
