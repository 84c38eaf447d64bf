"""JSON log formatting: whitelisted extras surface, others stay out."""

import json
import logging

from daily_tracker.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "daily_tracker.services.tasks", logging.INFO, __file__, 1,
        "Task created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(_record(task_id=7, secret="x")))
    assert payload["message"] == "Task created"
    assert payload["level"] == "INFO"
    assert payload["task_id"] == 7
    assert "secret" not in payload


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    count = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == count
    assert logging.root.level == logging.INFO
