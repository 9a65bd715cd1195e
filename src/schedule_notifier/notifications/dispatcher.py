"""
Module: dispatcher.py
Description: Fire-and-forget schedule notifications over SQS.

Publishes a small JSON message whenever schedule records change. The
notification is a side channel to the business operation that triggered
it, so dispatch never raises: every failure ends in a log entry.

Key Components:
- NotificationDispatcher: Synchronous dispatcher (boto3)
- AsyncNotificationDispatcher: Async dispatcher (aioboto3)
- get_notification_dispatcher(): Process-wide dispatcher from settings
- get_async_notification_dispatcher(): Async counterpart

Dependencies: boto3, aioboto3, botocore, pydantic
Author: Schedule Notifier Team
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from schedule_notifier.config.dispatcher import DispatcherConfig
from schedule_notifier.config.settings import settings
from schedule_notifier.models.notification import (
    BatchScheduleNotification,
    NotificationMessage,
    ScheduleNotification,
)
from schedule_notifier.models.result import DispatchOutcome, DispatchResult
from schedule_notifier.sqs_queue.client import SQSClientProvider, get_queue_client_provider
from schedule_notifier.utils.logger import get_logger

logger = get_logger(__name__)

SCHEDULE_LABEL = "Schedule notification"
BATCH_LABEL = "Batch schedule notification"


class BaseNotificationDispatcher:
    """
    Gating, payload construction and result logging shared by both dispatchers.

    Attributes:
        client_provider: Source of the SQS handle
        config: Queue URL and feature toggle
    """

    def __init__(self, client_provider: SQSClientProvider, config: DispatcherConfig):
        self.client_provider = client_provider
        self.config = config

        if config.is_misconfigured:
            logger.warning(
                "Notifications enabled but queue URL not configured; notifications will be skipped"
            )

    @staticmethod
    def _serialize(
        build: Callable[[], NotificationMessage]
    ) -> Tuple[Optional[str], Optional[DispatchResult]]:
        """
        Build and serialize a message.

        Returns:
            (body, None) on success, (None, failure result) otherwise
        """
        try:
            return build().to_message_body(), None
        # pydantic ValidationError and PydanticSerializationError are ValueErrors
        except (TypeError, ValueError) as e:
            return None, DispatchResult.failed(DispatchOutcome.SERIALIZATION_FAILED, e)
        except Exception as e:
            return None, DispatchResult.failed(DispatchOutcome.UNEXPECTED_FAILED, e)

    @staticmethod
    def _classify_send_error(error: Exception) -> DispatchResult:
        if isinstance(error, ClientError):
            return DispatchResult.failed(DispatchOutcome.SERVICE_FAILED, error)
        if isinstance(error, BotoCoreError):
            return DispatchResult.failed(DispatchOutcome.TRANSPORT_FAILED, error)
        return DispatchResult.failed(DispatchOutcome.UNEXPECTED_FAILED, error)

    def _log_result(self, label: str, result: DispatchResult, context: Dict[str, Any]) -> None:
        """Report a dispatch result. This is the only consumer of DispatchResult."""
        try:
            self._emit_result(label, result, context)
        except Exception:
            # A broken log sink must not reach the caller
            pass

    def _emit_result(self, label: str, result: DispatchResult, context: Dict[str, Any]) -> None:
        outcome = result.outcome

        if outcome is DispatchOutcome.SKIPPED:
            logger.info(
                "Notifications disabled or queue URL not configured; skipping",
                **context
            )
        elif outcome is DispatchOutcome.SENT:
            logger.info(
                f"{label} sent to SQS",
                message_id=result.message_id,
                queue_url=self.config.queue_url,
                **context
            )
        elif outcome is DispatchOutcome.SERIALIZATION_FAILED:
            logger.error(
                f"Failed to serialize {label.lower()}",
                error=result.error_message,
                error_type=result.error_type,
                **context
            )
        elif outcome is DispatchOutcome.SERVICE_FAILED:
            logger.error(
                f"Failed to send {label.lower()} to SQS",
                error_code=result.error_code,
                error_message=result.error_message,
                queue_url=self.config.queue_url,
                **context
            )
        elif outcome is DispatchOutcome.TRANSPORT_FAILED:
            logger.error(
                f"Could not reach SQS to send {label.lower()}",
                error=result.error_message,
                error_type=result.error_type,
                queue_url=self.config.queue_url,
                **context
            )
        else:
            logger.error(
                f"Unexpected error sending {label.lower()}",
                error=result.error_message,
                error_type=result.error_type,
                **context
            )


class NotificationDispatcher(BaseNotificationDispatcher):
    """
    Synchronous schedule notification dispatcher.

    Performs one blocking SQS call per notification on the caller's
    thread. Safe to share between threads: the client and configuration
    are read-only after construction.

    Example:
        >>> dispatcher = get_notification_dispatcher()
        >>> dispatcher.notify_schedule(ScheduleEvent.CREATE, 42, course_id=7, course_name="Algebra")
    """

    def notify_schedule(
        self,
        event: str,
        schedule_id: int,
        course_id: Optional[int] = None,
        course_name: Optional[str] = None
    ) -> None:
        """
        Publish a single schedule notification.

        Args:
            event: Event name (e.g., SCHEDULE_CREATE, SCHEDULE_UPDATE, SCHEDULE_DELETE)
            schedule_id: ID of the schedule that was modified
            course_id: ID of the schedule's course, omitted when None
            course_name: Name of the schedule's course, omitted when None
        """
        context = {"event_type": event, "schedule_id": schedule_id}
        result = self._dispatch(
            lambda: ScheduleNotification(
                event=event,
                schedule_id=schedule_id,
                course_id=course_id,
                course_name=course_name
            )
        )
        self._log_result(SCHEDULE_LABEL, result, context)

    def notify_batch(self, event: str, schedule_count: int) -> None:
        """
        Publish a notification for an operation that affected several schedules.

        Args:
            event: Event name
            schedule_count: Number of schedules affected
        """
        context = {"event_type": event, "schedule_count": schedule_count}
        result = self._dispatch(
            lambda: BatchScheduleNotification(event=event, schedule_count=schedule_count)
        )
        self._log_result(BATCH_LABEL, result, context)

    def _dispatch(self, build: Callable[[], NotificationMessage]) -> DispatchResult:
        if not self.config.is_active:
            return DispatchResult.skipped()

        body, failure = self._serialize(build)
        if failure is not None:
            return failure

        try:
            response = self._send(body)
        except Exception as e:
            return self._classify_send_error(e)

        return DispatchResult.sent(response.get('MessageId'))

    def _send(self, body: str) -> Dict[str, Any]:
        sqs = self.client_provider.get_client()
        return sqs.send_message(QueueUrl=self.config.queue_url, MessageBody=body)


class AsyncNotificationDispatcher(BaseNotificationDispatcher):
    """
    Async schedule notification dispatcher.

    Same contract as NotificationDispatcher for asyncio hosts: each call
    awaits one SQS request and never raises.
    """

    async def notify_schedule(
        self,
        event: str,
        schedule_id: int,
        course_id: Optional[int] = None,
        course_name: Optional[str] = None
    ) -> None:
        """Publish a single schedule notification. See NotificationDispatcher.notify_schedule."""
        context = {"event_type": event, "schedule_id": schedule_id}
        result = await self._dispatch(
            lambda: ScheduleNotification(
                event=event,
                schedule_id=schedule_id,
                course_id=course_id,
                course_name=course_name
            )
        )
        self._log_result(SCHEDULE_LABEL, result, context)

    async def notify_batch(self, event: str, schedule_count: int) -> None:
        """Publish a batch notification. See NotificationDispatcher.notify_batch."""
        context = {"event_type": event, "schedule_count": schedule_count}
        result = await self._dispatch(
            lambda: BatchScheduleNotification(event=event, schedule_count=schedule_count)
        )
        self._log_result(BATCH_LABEL, result, context)

    async def _dispatch(self, build: Callable[[], NotificationMessage]) -> DispatchResult:
        if not self.config.is_active:
            return DispatchResult.skipped()

        body, failure = self._serialize(build)
        if failure is not None:
            return failure

        try:
            response = await self._send(body)
        except Exception as e:
            return self._classify_send_error(e)

        return DispatchResult.sent(response.get('MessageId'))

    async def _send(self, body: str) -> Dict[str, Any]:
        session = self.client_provider.get_async_session()
        async with session.client('sqs', endpoint_url=self.client_provider.endpoint_url) as sqs:
            return await sqs.send_message(QueueUrl=self.config.queue_url, MessageBody=body)


@lru_cache(maxsize=None)
def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Get the process-wide synchronous dispatcher built from settings.

    Returns:
        Shared NotificationDispatcher instance
    """
    return NotificationDispatcher(
        client_provider=get_queue_client_provider(),
        config=DispatcherConfig.from_settings(settings)
    )


@lru_cache(maxsize=None)
def get_async_notification_dispatcher() -> AsyncNotificationDispatcher:
    """
    Get the process-wide async dispatcher built from settings.

    Returns:
        Shared AsyncNotificationDispatcher instance
    """
    return AsyncNotificationDispatcher(
        client_provider=get_queue_client_provider(),
        config=DispatcherConfig.from_settings(settings)
    )
