"""
Module: logger.py
Description: Structured logging configuration for the schedule notifier.

Configures structlog for JSON output optimized for CloudWatch Logs.
Provides consistent logging across all modules with proper context
and structured data.

Key Components:
- JSON output for CloudWatch compatibility
- ISO 8601 UTC timestamp and log level processors
- Level filtering driven by the LOG_LEVEL setting
- get_logger() helper function

Dependencies: structlog, logging
Author: Schedule Notifier Team
"""

import logging

import structlog

from schedule_notifier.config.settings import settings


def _add_log_level(logger, method_name, event_dict):
    """
    Add log level to event dictionary.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with level
    """
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    cache_logger_on_first_use: bool = True
) -> None:
    """
    Configure structlog for JSON output.

    Args:
        log_level: Minimum level name that is emitted (DEBUG, INFO, ...)
        cache_logger_on_first_use: Cache bound loggers after first use.
            Tests turn this off so log capture can reconfigure processors.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


configure_logging(settings.log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Schedule notification sent", schedule_id=42)
        {"event": "Schedule notification sent", "schedule_id": 42, "timestamp": "2024-01-15T10:30:00Z", "level": "INFO"}
    """
    return structlog.get_logger(name)
