"""Salary table and compensation formulas."""

from .compensation import (
    PENSION_THRESHOLD,
    CompensationBreakdown,
    compute,
    exceeds_pension_threshold,
    scale_factor,
)
from .salary_table import (
    AGREEMENT_VERSION,
    SALARY_TABLE,
    SalaryNotFoundError,
    SalaryTable,
    available_scales,
    available_steps,
    monthly_base,
)

__all__ = [
    "AGREEMENT_VERSION",
    "PENSION_THRESHOLD",
    "SALARY_TABLE",
    "CompensationBreakdown",
    "SalaryNotFoundError",
    "SalaryTable",
    "available_scales",
    "available_steps",
    "compute",
    "exceeds_pension_threshold",
    "monthly_base",
    "scale_factor",
]
