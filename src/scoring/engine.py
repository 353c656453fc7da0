"""
Survey scoring engine.

A question scores one point when its answer matches its polarity: "yes" on a
positive item or "no" on a reverse-keyed item. The score is never stored; it
is recomputed from the answers and the catalog whenever it is needed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from core.catalog import QUESTIONS, Question
from core.logging_config import get_logger
from core.types import Response

LOGGER = get_logger(__name__)


@dataclass
class ScoreBreakdown:
    """Score together with the positions that produced it."""

    score: int
    max_score: int
    answered: int
    scoring_positions: List[int] = field(default_factory=list)
    ignored_positions: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "score": self.score,
            "max_score": self.max_score,
            "answered": self.answered,
            "scoring_positions": self.scoring_positions,
            "ignored_positions": self.ignored_positions,
        }


def _counts(question: Question, response: Any) -> bool:
    if question.polarity:
        return response == Response.YES
    return response == Response.NO


def score_breakdown(
    answers: Mapping[int, Any],
    catalog: Sequence[Question] = QUESTIONS,
) -> ScoreBreakdown:
    """
    Score an answer set and report which positions counted.

    Positions outside the catalog are ignored rather than rejected, so stale
    or foreign share tokens still produce a (partial) score.

    Args:
        answers: Mapping of 0-based position to response.
        catalog: Question catalog the positions refer to.

    Returns:
        ScoreBreakdown with total in [0, len(catalog)].
    """
    scoring: List[int] = []
    ignored: List[int] = []
    answered = 0

    for position in sorted(answers):
        if not 0 <= position < len(catalog):
            ignored.append(position)
            continue
        answered += 1
        if _counts(catalog[position], answers[position]):
            scoring.append(position)

    if ignored:
        LOGGER.debug(
            "Ignored answers outside the catalog",
            extra={"extra_data": {"positions": ignored}},
        )

    return ScoreBreakdown(
        score=len(scoring),
        max_score=len(catalog),
        answered=answered,
        scoring_positions=scoring,
        ignored_positions=ignored,
    )


def score(answers: Mapping[int, Any], catalog: Sequence[Question] = QUESTIONS) -> int:
    """Count polarity-matching responses. Well-defined on partial answer sets."""
    return score_breakdown(answers, catalog).score
