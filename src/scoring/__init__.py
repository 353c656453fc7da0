"""Scoring utilities for motivation calculations."""
from __future__ import annotations

from .engine import score, score_breakdown, ScoreBreakdown
from .classifier import classify, Classification, CATEGORY_TEMPLATES, LEAN_CLAUSES
from .progress import progress, progress_label

__all__ = [
    "score",
    "score_breakdown",
    "ScoreBreakdown",
    "classify",
    "Classification",
    "CATEGORY_TEMPLATES",
    "LEAN_CLAUSES",
    "progress",
    "progress_label",
]
