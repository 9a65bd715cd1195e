"""
Package: notifications
Description: Schedule change notifications published to SQS.

Provides synchronous and async dispatchers that publish best-effort,
fire-and-forget notifications and never raise to their callers.
"""

from .dispatcher import (
    AsyncNotificationDispatcher,
    NotificationDispatcher,
    get_async_notification_dispatcher,
    get_notification_dispatcher,
)

__all__ = [
    "AsyncNotificationDispatcher",
    "NotificationDispatcher",
    "get_async_notification_dispatcher",
    "get_notification_dispatcher",
]
