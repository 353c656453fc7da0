"""Core utility functions."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Get current UTC datetime with timezone info. Always use this instead of datetime.now()."""
    return datetime.now(timezone.utc)


def generate_unique_key() -> str:
    """Generate a unique random key."""
    return uuid.uuid4().hex


def parse_answer_key(key: object) -> int:
    """
    Convert a JSON object key to a question position.

    JSON objects only have string keys, so positions arrive as "0", "1", ...
    Only the spelling ``str(position)`` is accepted, so "01", " 3" and "1_0"
    are rejected.

    Raises:
        ValueError: If the key is not a canonical integer.
    """
    if isinstance(key, bool):
        raise ValueError(f"{key!r} is not a question position")
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key.isascii() or not key.lstrip("-").isdigit():
        raise ValueError(f"{key!r} is not a question position")
    position = int(key)
    if str(position) != key:
        raise ValueError(f"{key!r} is not a question position")
    return position
