#!/usr/bin/env python3
"""Command Line Interface for the Rean Motivation Survey.

Usage:
    cd src
    python cli.py take              # Take the survey interactively
    python cli.py score YNYN...     # Score 20 answers given as Y/N letters
    python cli.py show LINK         # Open a shared result (link or token)
    python cli.py server            # Start API server
    python cli.py dashboard         # Start Streamlit dashboard
    python cli.py info              # Show configuration
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Optional

import typer

from core.catalog import (
    CATALOG_LENGTH,
    INSTRUCTION_NOTES,
    INSTRUCTIONS,
    QUESTIONS,
    SURVEY_SUBTITLE,
    SURVEY_TITLE,
    catalog_fingerprint,
)
from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from core.types import Response
from domain import share_token
from domain.session import SurveyResult, SurveySession, build_result
from scoring.progress import progress_label
from services.clipboard import copy_to_clipboard

LOGGER = get_logger(__name__)
SETTINGS = get_settings()

app = typer.Typer(help="Rean Motivation Survey CLI")

ANSWER_LETTERS: Dict[str, Response] = {"y": Response.YES, "n": Response.NO}


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """A.A. Rean's Motivation Survey - score, classify and share results."""
    log_level = "DEBUG" if verbose else SETTINGS.log_level
    setup_logging(level=log_level, json_format=SETTINGS.log_format == "json")


# =============================================================================
# Output helpers
# =============================================================================


def _echo_result(result: SurveyResult) -> None:
    classification = result.classification
    color = "green" if classification.tone == "success" else "yellow"
    typer.echo("")
    typer.secho(classification.headline, fg=color, bold=True)
    typer.echo("")
    typer.echo(classification.display_text)


def _echo_answers(session: SurveySession) -> None:
    for question in QUESTIONS:
        answer = session.answers.get(question.position)
        label = share_token.canonical_value(answer) if answer is not None else "-"
        typer.echo(f"  {question.number:>2}. [{label:>3}] {question.text}")


def _parse_answer_string(letters: str) -> Dict[int, Response]:
    cleaned = "".join(letters.split()).lower()
    if len(cleaned) != CATALOG_LENGTH:
        raise typer.BadParameter(f"Expected {CATALOG_LENGTH} answers, got {len(cleaned)}")
    answers: Dict[int, Response] = {}
    for position, letter in enumerate(cleaned):
        if letter not in ANSWER_LETTERS:
            raise typer.BadParameter(f"Answer {position + 1} must be Y or N, got {letter!r}")
        answers[position] = ANSWER_LETTERS[letter]
    return answers


def _offer_share(session: SurveySession) -> None:
    if not typer.confirm("Copy a share link to the clipboard?", default=False):
        return
    notice = session.share(copy_to_clipboard, SETTINGS.public_base_url, SETTINGS.share_query_param)
    typer.secho(notice.message, fg="green" if notice.success else "yellow")
    typer.echo(notice.url)


# =============================================================================
# Survey Commands
# =============================================================================


@app.command("questions")
def list_questions() -> None:
    """List the survey questions."""
    typer.secho(SURVEY_TITLE, bold=True)
    typer.echo(SURVEY_SUBTITLE)
    typer.echo("")
    for question in QUESTIONS:
        typer.echo(f"{question.number:>2}. {question.text}")


@app.command("take")
def take_survey() -> None:
    """Answer the survey interactively and show the result."""
    session = SurveySession()

    typer.secho(SURVEY_TITLE, bold=True)
    typer.echo(INSTRUCTIONS)
    for note in INSTRUCTION_NOTES:
        typer.echo(f"  • {note}")
    typer.echo("")

    for question in QUESTIONS:
        while True:
            reply = typer.prompt(f"{question.number}. {question.text} [y/n]").strip().lower()
            if reply[:1] in ANSWER_LETTERS:
                session.answer(question.position, ANSWER_LETTERS[reply[:1]])
                break
            typer.secho("Please answer y or n.", fg="yellow")
        typer.echo(f"   Progress: {progress_label(session.answers.as_dict())}")

    session.show_results()
    result = session.result()
    if result is None:
        typer.secho("✗ Survey is incomplete", fg="red")
        raise typer.Exit(1)

    _echo_result(result)
    typer.echo("")
    typer.echo(f"Share token: {result.token}")
    _offer_share(session)


@app.command("score")
def score_answers(
    answers: str = typer.Argument(..., help=f"{CATALOG_LENGTH} answers as Y/N letters, in question order"),
) -> None:
    """Score a complete answer string and print the share token."""
    parsed = _parse_answer_string(answers)
    token = share_token.encode(parsed)
    _echo_result(build_result(parsed, QUESTIONS, token))
    typer.echo("")
    typer.echo(f"Share token: {token}")


@app.command("show")
def show_shared(
    link: str = typer.Argument(..., help="Shared link or bare share token"),
) -> None:
    """Open a shared result in read-only mode."""
    token = share_token.extract_token(link, SETTINGS.share_query_param)
    session = SurveySession.bootstrap(token, accept_legacy=SETTINGS.accept_legacy_tokens)
    if not session.locked:
        typer.secho("✗ No readable shared result in that link", fg="red")
        raise typer.Exit(1)

    typer.secho(f"{SURVEY_TITLE} (shared, read-only)", bold=True)
    _echo_answers(session)

    result = session.result()
    if result is None:
        typer.secho(
            f"Shared answers are incomplete ({len(session.answers)}/{CATALOG_LENGTH}); no result to show",
            fg="yellow",
        )
        return
    _echo_result(result)


# =============================================================================
# Server Commands
# =============================================================================


@app.command("server")
def run_server(
    host: Optional[str] = typer.Option(None, help="Host to bind to"),
    port: Optional[int] = typer.Option(None, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the FastAPI server."""
    import uvicorn

    host = host or SETTINGS.api_host
    port = port or SETTINGS.api_port
    typer.echo(f"Starting API server on {host}:{port}...")
    uvicorn.run("api.app:app", host=host, port=port, reload=reload)


@app.command("dashboard")
def run_dashboard(
    port: Optional[int] = typer.Option(None, help="Port for Streamlit dashboard"),
) -> None:
    """Start the Streamlit dashboard."""
    import subprocess

    port = port or SETTINGS.streamlit_port
    script = Path(__file__).resolve().parent / "dashboard" / "streamlit_app.py"
    typer.echo(f"Starting Streamlit dashboard on port {port}...")
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(script),
        "--server.port", str(port),
        "--server.address", "0.0.0.0",
    ])


# =============================================================================
# Utility Commands
# =============================================================================


@app.command("info")
def show_info() -> None:
    """Show application configuration info."""
    typer.echo(f"{SETTINGS.app_name} Configuration:")
    typer.echo(f"  Environment: {SETTINGS.environment}")
    typer.echo(f"  Log Level: {SETTINGS.log_level}")
    typer.echo(f"  Questions: {CATALOG_LENGTH}")
    typer.echo(f"  Catalog Fingerprint: {catalog_fingerprint()}")
    typer.echo(f"  Public Base URL: {SETTINGS.public_base_url}")
    typer.echo(f"  Share Query Param: {SETTINGS.share_query_param}")
    typer.echo(f"  Accept Legacy Tokens: {SETTINGS.accept_legacy_tokens}")


if __name__ == "__main__":
    app()
