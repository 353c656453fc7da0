"""Test structured logging helpers."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.logging_config import JSONFormatter, get_context_logger


def test_context_logger_leaves_caller_extra_alone():
    logger = get_context_logger("tests.logging", session_id="abc123")
    extra = {"extra_data": {"answered": 3}}

    _, kwargs = logger.process("Results shown", {"extra": extra})

    assert kwargs["extra"] == {"extra_data": {"answered": 3}, "session_id": "abc123"}
    assert extra == {"extra_data": {"answered": 3}}


def test_context_logger_without_extra():
    logger = get_context_logger("tests.logging", session_id="abc123")
    _, kwargs = logger.process("Session reset", {})
    assert kwargs["extra"] == {"session_id": "abc123"}


def test_json_formatter_fields():
    record = logging.LogRecord("survey", logging.INFO, __file__, 10, "Results shown", None, None)
    record.extra_data = {"score": 12}
    record.session_id = "abc123"

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "Results shown"
    assert data["extra"] == {"score": 12}
    assert data["session_id"] == "abc123"
