"""API route modules."""
from __future__ import annotations

from . import (
    health,
    survey,
)

__all__ = [
    "health",
    "survey",
]
