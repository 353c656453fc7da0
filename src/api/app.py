"""FastAPI application entry point with global error handling."""
from __future__ import annotations

import os
import sys

# Add src/ to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.catalog import CATALOG_LENGTH, catalog_fingerprint
from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from core.exceptions import (
    SurveyError,
    CatalogMismatchError,
    ConfigurationError,
    IncompleteAnswersError,
    InvalidPositionError,
    MalformedTokenError,
    SessionLockedError,
    ValidationError,
)
from api.routes import health, survey

LOGGER = get_logger(__name__)
SETTINGS = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Sets up logging and logs startup/shutdown events.
    """
    json_logging = SETTINGS.log_format == "json"
    setup_logging(level=SETTINGS.log_level, json_format=json_logging)

    LOGGER.info(
        "API application starting",
        extra={"extra_data": {
            "environment": SETTINGS.environment,
            "questions": CATALOG_LENGTH,
            "catalog_fingerprint": catalog_fingerprint(),
            "accept_legacy_tokens": SETTINGS.accept_legacy_tokens,
        }}
    )

    yield
    LOGGER.info("API application shutting down")


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance with:
        - CORS middleware
        - Global exception handlers
        - All API routes
    """
    application = FastAPI(
        title=SETTINGS.app_name,
        description="Scoring, classification and share links for A.A. Rean's motivation survey",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=SETTINGS.get_allowed_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Global Exception Handlers
    # -------------------------------------------------------------------------

    @application.exception_handler(CatalogMismatchError)
    async def catalog_mismatch_handler(
        request: Request, exc: CatalogMismatchError
    ) -> JSONResponse:
        """Handle tokens produced against another question catalog."""
        LOGGER.warning(f"Catalog mismatch: {exc}", extra={"extra_data": {"path": request.url.path}})
        return _error(409, "catalog_mismatch", str(exc))

    @application.exception_handler(MalformedTokenError)
    async def malformed_token_handler(
        request: Request, exc: MalformedTokenError
    ) -> JSONResponse:
        """Handle share tokens that cannot be decoded."""
        LOGGER.warning(f"Malformed token: {exc}", extra={"extra_data": {"path": request.url.path}})
        return _error(400, "malformed_token", str(exc))

    @application.exception_handler(IncompleteAnswersError)
    async def incomplete_answers_handler(
        request: Request, exc: IncompleteAnswersError
    ) -> JSONResponse:
        """Handle results requested before every question is answered."""
        return _error(400, "incomplete_answers", str(exc))

    @application.exception_handler(InvalidPositionError)
    async def invalid_position_handler(
        request: Request, exc: InvalidPositionError
    ) -> JSONResponse:
        """Handle answers addressed to positions outside the catalog."""
        LOGGER.warning(f"Invalid position: {exc}", extra={"extra_data": {"path": request.url.path}})
        return _error(400, "invalid_position", str(exc))

    @application.exception_handler(ValidationError)
    async def validation_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle validation errors."""
        LOGGER.warning(f"Validation error: {exc}", extra={"extra_data": {"path": request.url.path}})
        return _error(400, "validation_error", str(exc))

    @application.exception_handler(SessionLockedError)
    async def session_locked_handler(
        request: Request, exc: SessionLockedError
    ) -> JSONResponse:
        """Handle edits against a read-only shared session."""
        return _error(409, "session_locked", str(exc))

    @application.exception_handler(ConfigurationError)
    async def configuration_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        """Handle configuration errors."""
        LOGGER.error(f"Configuration error: {exc}")
        return _error(500, "configuration_error", "Service misconfiguration")

    @application.exception_handler(SurveyError)
    async def app_error_handler(
        request: Request, exc: SurveyError
    ) -> JSONResponse:
        """Handle all other application errors."""
        LOGGER.error(f"Application error: {exc}", exc_info=True)
        return _error(500, "application_error", str(exc))

    # -------------------------------------------------------------------------
    # Include Routers
    # -------------------------------------------------------------------------
    application.include_router(health.router, prefix="/health", tags=["Health"])
    application.include_router(survey.router, prefix="/survey", tags=["Survey"])

    return application


# Create the application instance
app = create_app()

LOGGER.info("API application initialized")
