"""Logging setup for the survey surfaces: plain text or one JSON object per line."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty third-party loggers held at WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "watchdog")


class JSONFormatter(logging.Formatter):
    """
    Structured formatter.

    Fields passed as ``extra={"extra_data": {...}}`` land under ``"extra"``;
    a session's id (see ``get_context_logger``) lands under ``"session_id"``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data
        if hasattr(record, "session_id"):
            log_data["session_id"] = record.session_id

        return json.dumps(log_data, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Adapter that stamps every record with fixed context such as ``session_id``."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure the root logger for the API, CLI or dashboard.

    Args:
        level: Logging level name.
        json_format: Emit JSON lines instead of text.
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, DATE_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_context_logger(name: str, **context: Any) -> ContextLogger:
    """Logger whose records all carry ``context``, e.g. ``session_id="3f2a..."``."""
    return ContextLogger(logging.getLogger(name), context)


__all__ = [
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "JSONFormatter",
    "ContextLogger",
]
