"""Tests for structured logging helpers."""

import json
import logging

import structlog
from structlog.testing import capture_logs

from corpus_search.utils.logging import get_logger, log_search_event, setup_logger


def test_setup_logger_emits_json(caplog):
    """Configured loggers write one JSON line with the keyword fields."""
    caplog.set_level(logging.INFO)
    logger = setup_logger("corpus_search.test", level="INFO", json_logs=True)
    try:
        logger.info("search_completed", collection="loc", hits=3)
    finally:
        structlog.reset_defaults()

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "search_completed"
    assert record["collection"] == "loc"
    assert record["hits"] == 3
    assert record["level"] == "info"
    assert record["logger"] == "corpus_search.test"
    assert "timestamp" in record


def test_failed_events_are_errors():
    with capture_logs() as logs:
        log_search_event(get_logger("t"), "search_failed", "legaltext", error="boom")

    assert logs == [{"event": "search_failed", "collection": "legaltext", "error": "boom", "log_level": "error"}]


def test_completed_events_are_info():
    with capture_logs() as logs:
        log_search_event(get_logger("t"), "search_completed", "loc", hits=0)

    assert logs[0]["log_level"] == "info"
    assert logs[0]["collection"] == "loc"
