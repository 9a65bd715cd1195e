"""
Module: notification.py
Description: Schedule notification message models.

Defines the JSON bodies published to the schedule notifications queue.
Field names are snake_case in Python and camelCase on the wire. Field
types are strict: wrong input types are rejected, never coerced.

Key Components:
- ScheduleEvent: Enum of well-known event names
- ScheduleNotification: Single schedule change
- BatchScheduleNotification: Change affecting several schedules
- current_timestamp_ms(): Epoch milliseconds used for the timestamp field

Dependencies: pydantic, time
Author: Schedule Notifier Team
"""

import time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def current_timestamp_ms() -> int:
    """Current time as integer milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class ScheduleEvent(str, Enum):
    """Event names published by the scheduling service."""

    CREATE = "SCHEDULE_CREATE"
    UPDATE = "SCHEDULE_UPDATE"
    DELETE = "SCHEDULE_DELETE"


class NotificationMessage(BaseModel):
    """Base class for queue message bodies."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True
    )

    event: str = Field(..., description="Event name, e.g. SCHEDULE_CREATE")
    timestamp: int = Field(
        default_factory=current_timestamp_ms,
        description="Epoch milliseconds when the notification was built"
    )

    @field_validator('event', mode='before')
    @classmethod
    def unwrap_event_enum(cls, v: Any) -> Any:
        """Accept ScheduleEvent members as their string value."""
        if isinstance(v, Enum):
            return v.value
        return v

    def to_message_body(self) -> str:
        """
        Serialize to the JSON message body.

        Optional fields that were not supplied are omitted rather than
        written as null.

        Returns:
            Compact JSON object using camelCase keys

        Raises:
            PydanticSerializationError: If a field value cannot be serialized
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ScheduleNotification(NotificationMessage):
    """
    Notification for a single created, updated or deleted schedule.

    Attributes:
        event: Event name
        schedule_id: Identifier of the affected schedule
        timestamp: Epoch milliseconds
        course_id: Identifier of the schedule's course, if known
        course_name: Name of the schedule's course, if known
    """

    schedule_id: int = Field(..., alias="scheduleId")
    course_id: Optional[int] = Field(default=None, alias="courseId")
    course_name: Optional[str] = Field(default=None, alias="courseName")


class BatchScheduleNotification(NotificationMessage):
    """Notification for an operation that touched several schedules at once."""

    schedule_count: int = Field(..., alias="scheduleCount")
