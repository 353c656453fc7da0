"""Pytest configuration and fixtures."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PUBLIC_BASE_URL", "https://survey.example.com/")
os.environ.setdefault("SHARE_QUERY_PARAM", "r")

from core.catalog import QUESTIONS
from core.types import Response


def scoring_response(position: int) -> Response:
    """The response that earns a point for the question at this position."""
    return Response.YES if QUESTIONS[position].polarity else Response.NO


def non_scoring_response(position: int) -> Response:
    return Response.NO if QUESTIONS[position].polarity else Response.YES


def answers_with_score(target: int) -> Dict[int, Response]:
    """A complete answer set in which exactly ``target`` questions score."""
    return {
        question.position: (
            scoring_response(question.position)
            if question.position < target
            else non_scoring_response(question.position)
        )
        for question in QUESTIONS
    }


@pytest.fixture
def make_answers() -> Callable[[int], Dict[int, Response]]:
    """Factory for complete answer sets with a chosen score."""
    return answers_with_score


@pytest.fixture
def all_yes() -> Dict[int, Response]:
    return {question.position: Response.YES for question in QUESTIONS}


@pytest.fixture
def complete_answers() -> Dict[int, Response]:
    """Complete answer set scoring 10 with answers spread over the catalog."""
    answers = {}
    for question in QUESTIONS:
        if question.position % 2 == 0:
            answers[question.position] = scoring_response(question.position)
        else:
            answers[question.position] = non_scoring_response(question.position)
    return answers
