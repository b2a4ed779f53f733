"""Shared FastAPI dependency definitions."""
from __future__ import annotations

from salary_calc.services import CompensationService


def get_compensation_service() -> CompensationService:
    """Return a service instance per request."""

    return CompensationService()
