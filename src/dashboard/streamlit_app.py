"""Streamlit dashboard for the Rean Motivation Survey.

Start Dashboard: cd src && python cli.py dashboard
             or: streamlit run dashboard/streamlit_app.py

A shared link carries its token in the query string (default ``?r=...``):
Streamlit never sees the URL fragment.
"""
from __future__ import annotations

import os
import sys

# Add src/ to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from typing import Optional

import streamlit as st

from core.catalog import INSTRUCTION_NOTES, INSTRUCTIONS, QUESTIONS, SURVEY_SUBTITLE, SURVEY_TITLE
from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from core.types import Response, ViewState
from domain.session import SurveySession

SETTINGS = get_settings()
LOGGER = get_logger(__name__)

QUERY_PARAM = SETTINGS.share_query_param or "r"
SESSION_KEY = "survey_session"
SHARE_LINK_KEY = "share_link"

ANSWER_LABELS = {Response.YES: "Yes", Response.NO: "No"}

st.set_page_config(
    page_title=SURVEY_TITLE,
    page_icon="🧭",
    layout="centered",
)


# =============================================================================
# Session & location
# =============================================================================


def get_survey() -> SurveySession:
    """Bootstrap once per browser session from the token in the query string."""
    if SESSION_KEY not in st.session_state:
        setup_logging(level=SETTINGS.log_level, json_format=SETTINGS.log_format == "json")
        token: Optional[str] = st.query_params.get(QUERY_PARAM)
        st.session_state[SESSION_KEY] = SurveySession.bootstrap(
            token, accept_legacy=SETTINGS.accept_legacy_tokens
        )
    return st.session_state[SESSION_KEY]


def sync_location(survey: SurveySession) -> None:
    """Mirror the published token into the query string."""
    token = survey.published_token
    if token:
        if st.query_params.get(QUERY_PARAM) != token:
            st.query_params[QUERY_PARAM] = token
    elif QUERY_PARAM in st.query_params:
        del st.query_params[QUERY_PARAM]


def remember_share_link(url: str) -> None:
    """Clipboard writer for the browser: hand the link to a copyable code block."""
    st.session_state[SHARE_LINK_KEY] = url


# =============================================================================
# Callbacks
# =============================================================================


def on_answer(position: int) -> None:
    survey = get_survey()
    choice = st.session_state.get(f"q_{position}")
    if choice is None or survey.locked:
        return
    response = Response.YES if choice == ANSWER_LABELS[Response.YES] else Response.NO
    survey.answer(position, response)
    st.session_state.pop(SHARE_LINK_KEY, None)


def on_show_results() -> None:
    get_survey().show_results()


def on_reset() -> None:
    get_survey().reset()
    for question in QUESTIONS:
        st.session_state.pop(f"q_{question.position}", None)
    st.session_state.pop(SHARE_LINK_KEY, None)


def on_share() -> None:
    notice = get_survey().share(remember_share_link, SETTINGS.public_base_url, QUERY_PARAM)
    st.toast(notice.message)


# =============================================================================
# Rendering
# =============================================================================


def render_instructions() -> None:
    notes = "\n".join(f"- {note}" for note in INSTRUCTION_NOTES)
    st.info(f"**Instructions**\n\n{INSTRUCTIONS}\n\n{notes}")


def render_progress(survey: SurveySession) -> None:
    value = survey.progress()
    col1, col2 = st.columns([4, 1])
    with col1:
        st.caption("Progress")
    with col2:
        st.caption(f"{round(value)}%")
    st.progress(int(round(value)))


def render_questions(survey: SurveySession) -> None:
    labels = [ANSWER_LABELS[Response.YES], ANSWER_LABELS[Response.NO]]
    for question in QUESTIONS:
        current = survey.answers.get(question.position)
        index = labels.index(ANSWER_LABELS[current]) if current in ANSWER_LABELS else None
        st.radio(
            f"{question.number}. {question.text}",
            labels,
            index=index,
            key=f"q_{question.position}",
            horizontal=True,
            disabled=survey.locked,
            on_change=on_answer,
            args=(question.position,),
        )


def render_actions(survey: SurveySession) -> None:
    result_visible = survey.result() is not None
    columns = st.columns(3)
    if not survey.locked:
        columns[0].button(
            "Show Results",
            on_click=on_show_results,
            disabled=not survey.is_complete(),
            use_container_width=True,
        )
    if result_visible:
        columns[1].button("Share Results", on_click=on_share, use_container_width=True)
    columns[2].button("Start New Survey", on_click=on_reset, use_container_width=True)

    share_link = st.session_state.get(SHARE_LINK_KEY)
    if share_link and result_visible:
        st.code(share_link, language=None)


def render_result(survey: SurveySession) -> None:
    result = survey.result()
    if result is None:
        if survey.state == ViewState.SHARED_LOCKED:
            st.warning("This shared link does not contain a complete set of answers.")
        return

    classification = result.classification
    icon = "✅" if classification.tone == "success" else "⚠️"
    st.subheader(f"{icon} {classification.headline}")
    st.write(classification.summary)
    st.write(classification.traits_heading)
    st.markdown("\n".join(f"- {trait}" for trait in classification.traits))


def main() -> None:
    survey = get_survey()

    st.title(SURVEY_TITLE)
    st.caption(SURVEY_SUBTITLE)

    if not survey.locked:
        render_instructions()
        render_progress(survey)

    render_questions(survey)
    st.divider()
    render_actions(survey)
    render_result(survey)

    sync_location(survey)


main()
