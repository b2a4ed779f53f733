"""Schema definitions for calculator responses."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, field_serializer

from salary_calc.domain import CompensationBreakdown


class CompensationRequest(BaseModel):
    """Scale, step and hours after parsing and defaulting."""

    scale: int
    step: int
    hours: int
    fallback: bool = False


class CompensationResult(BaseModel):
    """Breakdown of one combination, amounts unrounded."""

    scale: int
    step: int
    contracted_hours: Decimal
    monthly_base: Decimal
    scale_factor: Decimal
    yearly_gross: Decimal
    employee_pension: Decimal
    employer_pension: Decimal
    total_pension: Decimal
    individual_choice_budget: Decimal
    gross_incl_benefits: Decimal
    total_compensation: Decimal
    five_day_equivalent: Decimal | None = None
    exceeds_pension_threshold: bool = False

    @field_serializer(
        "contracted_hours",
        "monthly_base",
        "scale_factor",
        "yearly_gross",
        "employee_pension",
        "employer_pension",
        "total_pension",
        "individual_choice_budget",
        "gross_incl_benefits",
        "total_compensation",
    )
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)

    @field_serializer("five_day_equivalent")
    def _serialize_optional(self, value: Decimal | None) -> str | None:
        return None if value is None else str(value)

    @classmethod
    def from_breakdown(cls, breakdown: CompensationBreakdown) -> "CompensationResult":
        return cls(
            scale=breakdown.scale,
            step=breakdown.step,
            contracted_hours=breakdown.contracted_hours,
            monthly_base=breakdown.monthly_base,
            scale_factor=breakdown.scale_factor,
            yearly_gross=breakdown.yearly_gross,
            employee_pension=breakdown.employee_pension,
            employer_pension=breakdown.employer_pension,
            total_pension=breakdown.total_pension,
            individual_choice_budget=breakdown.individual_choice_budget,
            gross_incl_benefits=breakdown.gross_incl_benefits,
            total_compensation=breakdown.total_compensation,
            five_day_equivalent=breakdown.five_day_equivalent,
            exceeds_pension_threshold=breakdown.exceeds_pension_threshold,
        )


class CompensationResponse(BaseModel):
    """Payload returned by the compensation API and passed to the page."""

    request: CompensationRequest
    result: CompensationResult


class StepAmount(BaseModel):
    step: int
    monthly_base: Decimal

    @field_serializer("monthly_base")
    def _serialize_amount(self, value: Decimal) -> str:
        return str(value)


class ScaleSteps(BaseModel):
    """All steps of one scale with their monthly base amounts."""

    scale: int
    steps: list[StepAmount]


class SalaryTableListing(BaseModel):
    """Contents of the salary table plus the selectable contract sizes."""

    version: str
    hours_options: list[int]
    scales: list[ScaleSteps]
