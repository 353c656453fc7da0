"""Domain layer for the survey.

Business logic lives here, separate from the surfaces (CLI, API,
dashboard) that drive it.
"""
from __future__ import annotations

from .answers import AnswerStore
from .session import (
    SurveySession,
    SurveyResult,
    ShareNotice,
    build_result,
    build_share_url,
)
from . import share_token

__all__ = [
    "AnswerStore",
    "SurveySession",
    "SurveyResult",
    "ShareNotice",
    "build_result",
    "build_share_url",
    "share_token",
]
