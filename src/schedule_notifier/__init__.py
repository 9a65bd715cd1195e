"""
Package: schedule_notifier
Description: Best-effort SQS notifications for schedule changes.

Typical use from a schedule mutation handler:

    from schedule_notifier import ScheduleEvent, get_notification_dispatcher

    get_notification_dispatcher().notify_schedule(
        ScheduleEvent.UPDATE, schedule.id, course_id=course.id, course_name=course.name
    )
"""

from .config import DispatcherConfig, Settings
from .models import (
    BatchScheduleNotification,
    DispatchOutcome,
    DispatchResult,
    ScheduleEvent,
    ScheduleNotification,
)
from .notifications import (
    AsyncNotificationDispatcher,
    NotificationDispatcher,
    get_async_notification_dispatcher,
    get_notification_dispatcher,
)
from .sqs_queue import (
    CredentialSource,
    DefaultCredentialSource,
    ProfileCredentialSource,
    SQSClientProvider,
    StaticCredentialSource,
    get_queue_client_provider,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncNotificationDispatcher",
    "BatchScheduleNotification",
    "CredentialSource",
    "DefaultCredentialSource",
    "DispatchOutcome",
    "DispatchResult",
    "DispatcherConfig",
    "NotificationDispatcher",
    "ProfileCredentialSource",
    "SQSClientProvider",
    "ScheduleEvent",
    "ScheduleNotification",
    "Settings",
    "StaticCredentialSource",
    "get_async_notification_dispatcher",
    "get_notification_dispatcher",
    "get_queue_client_provider",
]
