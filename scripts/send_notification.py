#!/usr/bin/env python3
"""
Script: send_notification.py
Description: Publish a one-off schedule notification for smoke testing.

Sends through the same dispatcher the application uses, so the current
environment (.env, AWS_SQS_ENABLED, AWS_SQS_QUEUE_URL, credentials)
decides whether and where the message goes. Results appear in the JSON
log output only; the script exits 0 either way.

Usage:
    python scripts/send_notification.py schedule SCHEDULE_UPDATE 42 --course-id 7 --course-name "Algebra"
    python scripts/send_notification.py batch SCHEDULE_DELETE 12
    python scripts/send_notification.py schedule SCHEDULE_CREATE 42 --queue-url https://sqs... --enable
"""

import argparse

from schedule_notifier.config.dispatcher import DispatcherConfig
from schedule_notifier.config.settings import settings
from schedule_notifier.notifications.dispatcher import NotificationDispatcher
from schedule_notifier.sqs_queue.client import get_queue_client_provider


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Publish a schedule notification to SQS"
    )
    parser.add_argument(
        "--queue-url",
        type=str,
        default=None,
        help="Override AWS_SQS_QUEUE_URL"
    )
    parser.add_argument(
        "--enable",
        action="store_true",
        help="Send even if AWS_SQS_ENABLED is false"
    )

    subparsers = parser.add_subparsers(dest="kind", required=True)

    single = subparsers.add_parser("schedule", help="Single schedule notification")
    single.add_argument("event", type=str, help="Event name, e.g. SCHEDULE_UPDATE")
    single.add_argument("schedule_id", type=int, help="ID of the modified schedule")
    single.add_argument("--course-id", type=int, default=None)
    single.add_argument("--course-name", type=str, default=None)

    batch = subparsers.add_parser("batch", help="Batch schedule notification")
    batch.add_argument("event", type=str, help="Event name")
    batch.add_argument("schedule_count", type=int, help="Number of schedules affected")

    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    config = DispatcherConfig(
        queue_url=args.queue_url if args.queue_url is not None else settings.aws_sqs_queue_url,
        enabled=args.enable or settings.aws_sqs_enabled
    )
    dispatcher = NotificationDispatcher(
        client_provider=get_queue_client_provider(),
        config=config
    )

    if args.kind == "schedule":
        dispatcher.notify_schedule(
            args.event,
            args.schedule_id,
            course_id=args.course_id,
            course_name=args.course_name
        )
    else:
        dispatcher.notify_batch(args.event, args.schedule_count)


if __name__ == "__main__":
    main()
