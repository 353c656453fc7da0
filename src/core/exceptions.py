"""Custom exceptions for the rean_survey application."""
from __future__ import annotations


class SurveyError(Exception):
    """Base exception for all application errors."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SurveyError):
    """Raised when required configuration is missing or invalid."""

    pass


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(SurveyError):
    """Raised when input data fails validation."""

    pass


class InvalidPositionError(ValidationError):
    """Raised when an answer targets a position outside the question catalog."""

    def __init__(self, position: int, catalog_length: int) -> None:
        self.position = position
        self.catalog_length = catalog_length
        super().__init__(
            f"Question position {position} is outside the catalog range [0, {catalog_length})"
        )


class IncompleteAnswersError(ValidationError):
    """Raised when an operation requires every question to be answered."""

    def __init__(self, answered: int, total: int) -> None:
        self.answered = answered
        self.total = total
        super().__init__(f"Only {answered} of {total} questions answered")


# =============================================================================
# Scoring Errors
# =============================================================================


class ScoringError(SurveyError):
    """Base exception for scoring-related errors."""

    pass


# =============================================================================
# Share Token Errors
# =============================================================================


class TokenError(SurveyError):
    """Base exception for share token errors."""

    pass


class MalformedTokenError(TokenError):
    """Raised when a share token cannot be decoded into an answer mapping."""

    pass


class CatalogMismatchError(MalformedTokenError):
    """Raised when a token was produced against a different question catalog."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Token catalog fingerprint {found or '<none>'} does not match {expected}"
        )


# =============================================================================
# Session Errors
# =============================================================================


class SessionError(SurveyError):
    """Base exception for survey session errors."""

    pass


class SessionLockedError(SessionError):
    """Raised when a shared, read-only session is edited."""

    pass


# =============================================================================
# External Service Errors
# =============================================================================


class ExternalServiceError(SurveyError):
    """Base exception for all external service errors."""

    pass


class ClipboardUnavailableError(ExternalServiceError):
    """Raised when the system clipboard cannot be written."""

    pass


__all__ = [
    # Base
    "SurveyError",
    # Configuration
    "ConfigurationError",
    # Validation
    "ValidationError",
    "InvalidPositionError",
    "IncompleteAnswersError",
    # Scoring
    "ScoringError",
    # Tokens
    "TokenError",
    "MalformedTokenError",
    "CatalogMismatchError",
    # Session
    "SessionError",
    "SessionLockedError",
    # External Services
    "ExternalServiceError",
    "ClipboardUnavailableError",
]
