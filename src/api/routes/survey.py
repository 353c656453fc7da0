"""Survey endpoints: catalog, progress, results and shared results."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import get_app_settings, get_catalog
from core.catalog import (
    INSTRUCTION_NOTES,
    INSTRUCTIONS,
    SURVEY_SUBTITLE,
    SURVEY_TITLE,
    Question,
    catalog_as_list,
    catalog_fingerprint,
)
from core.config import Settings
from core.exceptions import IncompleteAnswersError
from core.logging_config import get_logger
from core.types import Response
from domain import share_token
from domain.answers import AnswerStore
from domain.session import build_result, build_share_url
from scoring.progress import progress

router = APIRouter()
LOGGER = get_logger(__name__)


# =============================================================================
# Pydantic Models
# =============================================================================


class AnswersRequest(BaseModel):
    """Request body carrying answers keyed by 0-based question position."""

    answers: Dict[int, Response] = Field(default_factory=dict, description="Position -> yes/no")


class ProgressResponse(BaseModel):
    """Completion progress for a set of answers."""

    answered: int
    total: int
    percent: float
    rounded: int
    complete: bool


class QuestionResponse(BaseModel):
    position: int
    number: int
    text: str
    polarity: bool


class CatalogResponse(BaseModel):
    """The survey as shown to respondents."""

    title: str
    subtitle: str
    instructions: str
    instruction_notes: List[str]
    fingerprint: str
    questions: List[QuestionResponse]


def _store_from(request: AnswersRequest, catalog: Sequence[Question]) -> AnswerStore:
    store = AnswerStore(catalog)
    for position, response in sorted(request.answers.items()):
        store.set_answer(position, response)
    return store


# =============================================================================
# Routes
# =============================================================================


@router.get("/questions", response_model=CatalogResponse)
async def get_questions(catalog: Sequence[Question] = Depends(get_catalog)) -> Dict[str, Any]:
    """Return the question catalog with the survey's title and instructions."""
    return {
        "title": SURVEY_TITLE,
        "subtitle": SURVEY_SUBTITLE,
        "instructions": INSTRUCTIONS,
        "instruction_notes": list(INSTRUCTION_NOTES),
        "fingerprint": catalog_fingerprint(catalog),
        "questions": catalog_as_list(catalog),
    }


@router.post("/progress", response_model=ProgressResponse)
async def get_progress(
    request: AnswersRequest,
    catalog: Sequence[Question] = Depends(get_catalog),
) -> Dict[str, Any]:
    """Report how much of the survey has been answered."""
    store = _store_from(request, catalog)
    percent = progress(store.as_dict(), store.catalog_length)
    return {
        "answered": len(store),
        "total": store.catalog_length,
        "percent": percent,
        "rounded": round(percent),
        "complete": store.is_complete(),
    }


@router.post("/results")
async def get_results(
    request: AnswersRequest,
    catalog: Sequence[Question] = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """
    Score a complete set of answers.

    Returns:
        Score breakdown, classification, share token and share URL.

    Raises:
        IncompleteAnswersError: If any question is unanswered (400).
    """
    store = _store_from(request, catalog)
    if not store.is_complete():
        raise IncompleteAnswersError(len(store), store.catalog_length)

    answers = store.as_dict()
    token = share_token.encode(answers, catalog)
    result = build_result(answers, catalog, token)

    LOGGER.info(
        "Scored survey",
        extra={"extra_data": {
            "score": result.score,
            "category": result.classification.category.value,
        }},
    )
    return {
        **result.to_dict(),
        "share_url": build_share_url(settings.public_base_url, token, settings.share_query_param),
    }


@router.get("/shared/{token:path}")
async def get_shared_result(
    token: str,
    catalog: Sequence[Question] = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """
    Rebuild the read-only view of a shared result.

    The result is only included when the token carries a complete answer set.

    Raises:
        MalformedTokenError: If the token cannot be decoded (400).
        CatalogMismatchError: If the token belongs to another catalog (409).
    """
    answers = share_token.decode(token, catalog, accept_legacy=settings.accept_legacy_tokens)
    store = AnswerStore(catalog, answers)

    result: Optional[Dict[str, Any]] = None
    if store.is_complete():
        result = build_result(answers, catalog, token).to_dict()

    return {
        "locked": True,
        "answers": {str(position): share_token.canonical_value(value) for position, value in sorted(answers.items())},
        "answered": len(store),
        "total": store.catalog_length,
        "complete": store.is_complete(),
        "result": result,
        "share_url": build_share_url(settings.public_base_url, token, settings.share_query_param),
    }
