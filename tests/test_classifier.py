"""Test the motivation classifier."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.exceptions import ScoringError
from core.types import Category, Lean
from scoring.classifier import LEAN_CLAUSES, classify


def test_categories_partition_score_range():
    """Every score maps to exactly one category band."""
    for value in range(21):
        category = classify(value, 20).category
        if value <= 7:
            assert category == Category.AVOID_FAILURE
        elif value >= 14:
            assert category == Category.SUCCESS
        else:
            assert category == Category.MIXED


@pytest.mark.parametrize(
    "value,lean",
    [
        (8, Lean.TOWARD_AVOID),
        (9, Lean.TOWARD_AVOID),
        (10, Lean.NONE),
        (11, Lean.NONE),
        (12, Lean.TOWARD_SUCCESS),
        (13, Lean.TOWARD_SUCCESS),
    ],
)
def test_mixed_lean(value, lean):
    result = classify(value)
    assert result.category == Category.MIXED
    assert result.lean == lean


@pytest.mark.parametrize("value", [0, 7, 14, 20])
def test_poles_have_no_lean(value):
    assert classify(value).lean == Lean.NONE


def test_boundaries():
    assert classify(7).category == Category.AVOID_FAILURE
    assert classify(8).category == Category.MIXED
    assert classify(13).category == Category.MIXED
    assert classify(14).category == Category.SUCCESS


def test_titles():
    assert classify(0).title == "Motivation to Avoid Failures"
    assert classify(10).title == "Mixed Motivation"
    assert classify(20).title == "Motivation for Success"


def test_lean_clause_is_filled_in():
    """The mixed summary carries the lean clause in its slot."""
    assert LEAN_CLAUSES[Lean.TOWARD_AVOID] in classify(8).summary
    assert LEAN_CLAUSES[Lean.TOWARD_SUCCESS] in classify(13).summary
    assert classify(10).summary.startswith("Your motivation style is not strongly pronounced. ")
    assert "{lean_clause}" not in classify(9).summary


def test_display_text_lists_traits():
    result = classify(16)
    assert result.display_text.startswith(result.summary)
    assert result.traits_heading in result.display_text
    for trait in result.traits:
        assert f"- {trait}" in result.display_text


def test_headline_and_tone():
    assert classify(15).headline == "Score: 15 points – Motivation for Success"
    assert classify(15).tone == "success"
    assert classify(3).tone == "caution"
    assert classify(10).tone == "caution"


def test_to_dict():
    data = classify(12).to_dict()
    assert data["category"] == "mixed"
    assert data["lean"] == "toward_success"
    assert data["score"] == 12
    assert isinstance(data["traits"], list)


def test_score_out_of_range_rejected():
    with pytest.raises(ScoringError):
        classify(21)
    with pytest.raises(ScoringError):
        classify(-1)


def test_other_catalog_lengths_rejected():
    """Thresholds only exist for the 20-item instrument."""
    with pytest.raises(ScoringError):
        classify(5, 10)
