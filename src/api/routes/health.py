"""Health check routes."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from core.catalog import CATALOG_LENGTH, catalog_fingerprint
from core.config import get_settings
from core.logging_config import get_logger
from core.utils import utcnow

router = APIRouter()
LOGGER = get_logger(__name__)
SETTINGS = get_settings()


@router.get("")
async def health_check() -> Dict[str, Any]:
    """Basic health check - always returns OK."""
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "environment": SETTINGS.environment,
    }


@router.get("/detailed")
async def detailed_health_check() -> Dict[str, Any]:
    """Health check including the catalog the service scores against."""
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "environment": SETTINGS.environment,
        "catalog": {
            "questions": CATALOG_LENGTH,
            "fingerprint": catalog_fingerprint(),
        },
        "sharing": {
            "public_base_url": SETTINGS.public_base_url,
            "accept_legacy_tokens": SETTINGS.accept_legacy_tokens,
        },
    }
