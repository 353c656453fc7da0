"""Shared enums and type aliases."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class Response(str, Enum):
    """A single yes/no answer. Unanswered questions have no entry at all."""

    YES = "yes"
    NO = "no"


class Category(str, Enum):
    """Motivation category derived from the score."""

    AVOID_FAILURE = "avoid_failure"
    MIXED = "mixed"
    SUCCESS = "success"


class Lean(str, Enum):
    """Which pole a mixed score sits closer to."""

    TOWARD_AVOID = "toward_avoid"
    TOWARD_SUCCESS = "toward_success"
    NONE = "none"


class ViewState(str, Enum):
    """Interactive session view state."""

    EDITING = "editing"
    RESULTS_SHOWN = "results_shown"
    SHARED_LOCKED = "shared_locked"


# Decoded share tokens may carry values other than yes/no; those stay raw strings.
AnswerSet = Dict[int, Union[Response, str]]


__all__ = ["Response", "Category", "Lean", "ViewState", "AnswerSet"]
