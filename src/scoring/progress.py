"""Completion progress for an answer set."""
from __future__ import annotations

from typing import Any, Mapping

from core.catalog import CATALOG_LENGTH
from core.exceptions import ScoringError


def progress(answers: Mapping[int, Any], catalog_length: int = CATALOG_LENGTH) -> float:
    """
    Percentage of the catalog answered, in [0, 100].

    Decoded share tokens may carry foreign keys, so the value is clamped to
    keep it within range.
    """
    if catalog_length <= 0:
        raise ScoringError("Catalog length must be positive")
    return min(100.0, 100.0 * len(answers) / catalog_length)


def progress_label(answers: Mapping[int, Any], catalog_length: int = CATALOG_LENGTH) -> str:
    return f"{round(progress(answers, catalog_length))}%"
