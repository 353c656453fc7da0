"""
Survey session state machine.

States:
- EDITING: answers can be changed; nothing is published
- RESULTS_SHOWN: every question answered and results requested; the share
  token is published
- SHARED_LOCKED: bootstrapped from a share token; read-only until reset
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence
from urllib.parse import urlencode

from core.catalog import QUESTIONS, Question
from core.exceptions import ClipboardUnavailableError, IncompleteAnswersError, MalformedTokenError, SessionLockedError
from core.logging_config import get_context_logger
from core.types import Response, ViewState
from core.utils import generate_unique_key
from domain import share_token
from domain.answers import AnswerStore
from scoring.classifier import Classification, classify
from scoring.engine import ScoreBreakdown, score_breakdown
from scoring.progress import progress

ClipboardWriter = Callable[[str], None]

LINK_COPIED = "Link Copied!"
LINK_NOT_COPIED = "Couldn't copy link"


@dataclass
class SurveyResult:
    """What the results view shows."""

    breakdown: ScoreBreakdown
    classification: Classification
    token: Optional[str]

    @property
    def score(self) -> int:
        return self.breakdown.score

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
            "classification": self.classification.to_dict(),
            "token": self.token,
        }


@dataclass
class ShareNotice:
    """Transient notification produced by the share action."""

    success: bool
    message: str
    url: str


def build_result(
    answers: Dict[int, Any],
    catalog: Sequence[Question] = QUESTIONS,
    token: Optional[str] = None,
) -> SurveyResult:
    breakdown = score_breakdown(answers, catalog)
    return SurveyResult(
        breakdown=breakdown,
        classification=classify(breakdown.score, len(catalog)),
        token=token,
    )


def build_share_url(base_url: str, token: Optional[str], query_param: str = "") -> str:
    """
    Build the link that reopens a shared result.

    The token goes in the URL fragment, or in ``query_param`` when one is
    given (server-rendered pages never see the fragment).
    """
    base = base_url.split("#", 1)[0]
    if not token:
        return base
    if query_param:
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}{urlencode({query_param: token})}"
    return f"{base}#{token}"


class SurveySession:
    """
    One respondent's interactive session.

    Holds the answers, whether results are shown, whether the session is a
    locked shared view, and the token last published to the location.
    """

    def __init__(self, catalog: Sequence[Question] = QUESTIONS, session_id: Optional[str] = None) -> None:
        self.catalog = catalog
        self.session_id = session_id or generate_unique_key()[:12]
        self.answers = AnswerStore(catalog)
        self.result_shown = False
        self.locked = False
        self.last_token: Optional[str] = None
        self._logger = get_context_logger(__name__, session_id=self.session_id)

    # -------------------------------------------------------------------------
    # Bootstrap
    # -------------------------------------------------------------------------

    @classmethod
    def bootstrap(
        cls,
        token: Optional[str] = None,
        catalog: Sequence[Question] = QUESTIONS,
        accept_legacy: bool = True,
    ) -> "SurveySession":
        """
        Start a session, seeding it from a share token when one is present.

        A token that fails to decode is logged and discarded; the session then
        starts empty in the editing state.
        """
        session = cls(catalog)
        if not token:
            return session

        try:
            decoded = share_token.decode(token, catalog, accept_legacy=accept_legacy)
        except MalformedTokenError as e:
            session._logger.warning(f"Discarding share token: {e}")
            return session

        session.answers = AnswerStore(catalog, decoded)
        session.result_shown = True
        session.locked = True
        session.last_token = token
        session._logger.info(
            "Session opened from share token",
            extra={"extra_data": {"answered": len(decoded), "complete": session.is_complete()}},
        )
        session._publish()
        return session

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def answer(self, position: int, response: Response) -> None:
        """
        Record an answer. Any change hides a displayed result.

        Raises:
            SessionLockedError: If the session is a shared, read-only view.
            InvalidPositionError: If position is outside the catalog.
        """
        if self.locked:
            raise SessionLockedError("Shared results are read-only; start a new survey to answer")
        self.answers.set_answer(position, response)
        self.result_shown = False
        self._publish()

    def show_results(self) -> bool:
        """Show results if every question is answered. Returns whether they are shown."""
        if not self.is_complete():
            self._logger.debug(
                "Results requested before completion",
                extra={"extra_data": {"answered": len(self.answers)}},
            )
            return False
        self.result_shown = True
        self._publish()
        self._logger.info("Results shown", extra={"extra_data": {"token": self.last_token}})
        return True

    def reset(self) -> None:
        """Clear everything and return to an empty editing session."""
        self.answers.reset()
        self.result_shown = False
        self.locked = False
        self.last_token = None
        self._logger.info("Session reset")

    def share(
        self,
        clipboard: Optional[ClipboardWriter],
        base_url: str,
        query_param: str = "",
    ) -> ShareNotice:
        """
        Copy the current location to the clipboard.

        Clipboard failures are reported in the notice; session state is
        never changed.
        """
        url = self.share_url(base_url, query_param)
        try:
            if clipboard is None:
                raise ClipboardUnavailableError("No clipboard available")
            clipboard(url)
        except ClipboardUnavailableError as e:
            self._logger.warning(f"Share failed: {e}")
            return ShareNotice(success=False, message=LINK_NOT_COPIED, url=url)
        return ShareNotice(success=True, message=LINK_COPIED, url=url)

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        if self.locked:
            return ViewState.SHARED_LOCKED
        if self.result_shown:
            return ViewState.RESULTS_SHOWN
        return ViewState.EDITING

    @property
    def published_token(self) -> Optional[str]:
        return self.last_token

    def is_complete(self) -> bool:
        return self.answers.is_complete()

    def progress(self) -> float:
        return progress(self.answers.as_dict(), self.answers.catalog_length)

    def result(self) -> Optional[SurveyResult]:
        """The results view, or None when it must not be displayed."""
        if not (self.result_shown and self.is_complete()):
            return None
        return build_result(self.answers.as_dict(), self.catalog, self.last_token)

    def share_url(self, base_url: str, query_param: str = "") -> str:
        return build_share_url(base_url, self.published_token, query_param)

    def _publish(self) -> None:
        """Keep the published token in sync with the view state."""
        if self.result_shown and self.is_complete():
            try:
                self.last_token = share_token.encode(self.answers.as_dict(), self.catalog)
            except IncompleteAnswersError:
                # Decoded sets with foreign positions keep the token they came with
                pass
        elif not self.result_shown and not self.locked:
            self.last_token = None

    def __repr__(self) -> str:
        return (
            f"SurveySession(id={self.session_id}, state={self.state.value}, "
            f"answered={len(self.answers)}/{self.answers.catalog_length})"
        )
