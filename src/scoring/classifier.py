"""
Motivation classifier.

Maps a survey score to one of three motivation categories. The long-form
description for each category is static content: a summary template with a
``{lean_clause}`` slot, a traits heading and a list of traits.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from core.catalog import CATALOG_LENGTH
from core.exceptions import ScoringError
from core.types import Category, Lean

# =============================================================================
# THRESHOLDS (fixed for the 20-item instrument)
# =============================================================================

AVOID_FAILURE_MAX = 7     # score <= 7 -> avoid failure
SUCCESS_MIN = 14          # score >= 14 -> success
LEAN_AVOID_MAX = 9        # mixed 8-9 leans toward avoid
LEAN_SUCCESS_MIN = 12     # mixed 12-13 leans toward success

INSTRUMENT_LENGTH = 20


@dataclass(slots=True, frozen=True)
class CategoryTemplate:
    """Static description content for a category."""

    title: str
    summary: str
    traits_heading: str
    traits: Tuple[str, ...]
    tone: str


CATEGORY_TEMPLATES: Dict[Category, CategoryTemplate] = {
    Category.AVOID_FAILURE: CategoryTemplate(
        title="Motivation to Avoid Failures",
        summary=(
            "Your responses indicate a predominant motivation to avoid failures. "
            "This means you tend to focus on preventing negative outcomes rather than "
            "achieving positive ones. In general, this motivation is based on the idea "
            "of avoidance and negative expectations."
        ),
        traits_heading="People with this motivation type often:",
        traits=(
            "Experience increased anxiety about potential failures",
            "Show lower self-confidence",
            "Try to avoid responsible tasks",
            "May experience high anxiety with important tasks",
            "Focus more on avoiding failure than achieving success",
            "Can still maintain a responsible attitude to work",
        ),
        tone="caution",
    ),
    Category.SUCCESS: CategoryTemplate(
        title="Motivation for Success",
        summary=(
            "Your responses indicate a strong motivation for success. Your activity is "
            "based on the hope of success and the need for achievement. You strive for "
            "constructive, positive attainment."
        ),
        traits_heading="Characteristics of this motivation type include:",
        traits=(
            "Taking initiative and showing persistence",
            "Strong belief in yourself and your capabilities",
            "Being responsible and action-oriented",
            "Standing out with persistence in reaching goals",
            "Being purposeful in your approach",
            "Focus on positive outcomes and achievements",
        ),
        tone="success",
    ),
    Category.MIXED: CategoryTemplate(
        title="Mixed Motivation",
        summary=(
            "Your motivation style is not strongly pronounced{lean_clause}. You likely "
            "show flexibility in your approach to challenges, drawing from both "
            "motivation types depending on the situation."
        ),
        traits_heading="This means you tend to:",
        traits=(
            "Adapt your approach based on the context",
            "Balance risk-taking with caution",
            "Maintain realistic expectations",
            "Consider both potential successes and failures",
            "Learn from both positive and negative experiences",
        ),
        tone="caution",
    ),
}

LEAN_CLAUSES: Dict[Lean, str] = {
    Lean.TOWARD_AVOID: " with a slight tendency towards avoiding failure",
    Lean.TOWARD_SUCCESS: " with a slight tendency towards success motivation",
    Lean.NONE: "",
}


@dataclass(slots=True, frozen=True)
class Classification:
    """Category, lean and the rendered description for a score."""

    score: int
    category: Category
    lean: Lean
    title: str
    summary: str
    traits_heading: str
    traits: Tuple[str, ...]
    tone: str

    @property
    def display_text(self) -> str:
        lines = [self.summary, "", self.traits_heading]
        lines.extend(f"- {trait}" for trait in self.traits)
        return "\n".join(lines)

    @property
    def headline(self) -> str:
        return f"Score: {self.score} points – {self.title}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "score": self.score,
            "category": self.category.value,
            "lean": self.lean.value,
            "title": self.title,
            "headline": self.headline,
            "summary": self.summary,
            "traits_heading": self.traits_heading,
            "traits": list(self.traits),
            "tone": self.tone,
            "display_text": self.display_text,
        }


def category_for(score: int) -> Category:
    if score <= AVOID_FAILURE_MAX:
        return Category.AVOID_FAILURE
    if score >= SUCCESS_MIN:
        return Category.SUCCESS
    return Category.MIXED


def lean_for(score: int) -> Lean:
    """Lean is only meaningful inside the mixed band; elsewhere it is NONE."""
    if category_for(score) is not Category.MIXED:
        return Lean.NONE
    if score <= LEAN_AVOID_MAX:
        return Lean.TOWARD_AVOID
    if score >= LEAN_SUCCESS_MIN:
        return Lean.TOWARD_SUCCESS
    return Lean.NONE


def classify(score: int, catalog_length: int = CATALOG_LENGTH) -> Classification:
    """
    Classify a score into a motivation category.

    Args:
        score: Survey score.
        catalog_length: Number of catalog questions the score was taken over.

    Returns:
        Classification with the rendered description.

    Raises:
        ScoringError: If the thresholds do not apply to this catalog length
            or the score is outside [0, catalog_length].
    """
    if catalog_length != INSTRUMENT_LENGTH:
        raise ScoringError(
            f"Thresholds are defined for a {INSTRUMENT_LENGTH}-question catalog, got {catalog_length}"
        )
    if not 0 <= score <= catalog_length:
        raise ScoringError(f"Score {score} is outside [0, {catalog_length}]")

    category = category_for(score)
    lean = lean_for(score)
    template = CATEGORY_TEMPLATES[category]

    return Classification(
        score=score,
        category=category,
        lean=lean,
        title=template.title,
        summary=template.summary.format(lean_clause=LEAN_CLAUSES[lean]),
        traits_heading=template.traits_heading,
        traits=template.traits,
        tone=template.tone,
    )
