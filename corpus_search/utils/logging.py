"""
Logging utilities for the search gateway.

Every event is logged with keyword fields, rendered as JSON lines in
deployment or as coloured console lines during development.
"""

import logging
import sys
from typing import Any

import structlog


def setup_logger(name: str, level: str = "INFO", json_logs: bool = True) -> structlog.BoundLogger:
    """
    Route structlog through stdlib logging on stdout.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Render JSON instead of console output

    Returns:
        Configured structlog logger
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(name)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)


def log_search_event(logger: structlog.BoundLogger, event_type: str, collection: str, **kwargs: Any) -> None:
    """
    Log a search event; `*_failed` and `*_error` events are logged as errors.

    Args:
        logger: Structured logger instance
        event_type: Type of event (search_completed, search_failed, etc.)
        collection: Collection the request was made against
        **kwargs: Additional event data
    """
    if event_type.endswith("_error") or event_type.endswith("_failed"):
        logger.error(event_type, collection=collection, **kwargs)
    else:
        logger.info(event_type, collection=collection, **kwargs)
