"""Service layer entrypoints for the calculator."""

from .compensation_service import CompensationService

__all__ = ["CompensationService"]
