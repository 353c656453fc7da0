"""Shared dependencies for FastAPI routes."""
from __future__ import annotations

from typing import Sequence

from core.catalog import QUESTIONS, Question
from core.config import Settings, get_settings


def get_catalog() -> Sequence[Question]:
    """
    FastAPI dependency that provides the question catalog.

    Overridable in tests to score against a different catalog.
    """
    return QUESTIONS


def get_app_settings() -> Settings:
    """FastAPI dependency that provides the cached settings."""
    return get_settings()
