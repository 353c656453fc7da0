"""Core module exports."""
from __future__ import annotations

from core.config import Settings, get_settings, reload_settings
from core.catalog import (
    Question,
    QUESTIONS,
    CATALOG_LENGTH,
    catalog_fingerprint,
)
from core.exceptions import (
    # Base
    SurveyError,
    # Configuration
    ConfigurationError,
    # Validation
    ValidationError,
    InvalidPositionError,
    IncompleteAnswersError,
    # Scoring
    ScoringError,
    # Tokens
    TokenError,
    MalformedTokenError,
    CatalogMismatchError,
    # Session
    SessionError,
    SessionLockedError,
    # External Services
    ExternalServiceError,
    ClipboardUnavailableError,
)
from core.logging_config import (
    setup_logging,
    get_logger,
    get_context_logger,
    JSONFormatter,
    ContextLogger,
)
from core.types import AnswerSet, Category, Lean, Response, ViewState

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "reload_settings",
    # Catalog
    "Question",
    "QUESTIONS",
    "CATALOG_LENGTH",
    "catalog_fingerprint",
    # Types
    "AnswerSet",
    "Category",
    "Lean",
    "Response",
    "ViewState",
    # Exceptions
    "SurveyError",
    "ConfigurationError",
    "ValidationError",
    "InvalidPositionError",
    "IncompleteAnswersError",
    "ScoringError",
    "TokenError",
    "MalformedTokenError",
    "CatalogMismatchError",
    "SessionError",
    "SessionLockedError",
    "ExternalServiceError",
    "ClipboardUnavailableError",
    # Logging
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "JSONFormatter",
    "ContextLogger",
]
