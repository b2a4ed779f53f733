"""Pydantic schemas for response payloads."""

from .compensation import (
    CompensationRequest,
    CompensationResponse,
    CompensationResult,
    SalaryTableListing,
    ScaleSteps,
    StepAmount,
)

__all__ = [
    "CompensationRequest",
    "CompensationResponse",
    "CompensationResult",
    "SalaryTableListing",
    "ScaleSteps",
    "StepAmount",
]
