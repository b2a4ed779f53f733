"""Compensation formulas of the collective labour agreement.

Every amount is derived from the full-time monthly base of a scale/step
combination. Percentages are fixed by the agreement:

* employee pension contribution: 8.1% of the base
* total pension premium: 27% of the base, the employer pays the part the
  employee does not
* individual choice budget (IKB): 16.5% of the base

Monthly amounts in the table refer to a 36 hour week. ``scale_factor``
annualises them and scales them to the contracted hours.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .salary_table import SALARY_TABLE, SalaryTable

LOGGER = logging.getLogger(__name__)

MONTHS_PER_YEAR = Decimal("12")
FULL_TIME_HOURS = Decimal("36")
EMPLOYEE_PENSION_RATE = Decimal("0.081")
TOTAL_PENSION_RATE = Decimal("0.27")
EMPLOYER_PENSION_RATE = TOTAL_PENSION_RATE - EMPLOYEE_PENSION_RATE
INDIVIDUAL_CHOICE_BUDGET_RATE = Decimal("0.165")
# Above this yearly income (gross + IKB) pension accrual follows different rules.
PENSION_THRESHOLD = Decimal("130000")
FIVE_DAY_RATIO = Decimal("5") / Decimal("4")


@dataclass(frozen=True)
class CompensationBreakdown:
    """All compensation components for one scale/step/hours combination."""

    scale: int
    step: int
    contracted_hours: Decimal
    monthly_base: Decimal
    scale_factor: Decimal
    yearly_gross: Decimal
    employee_pension: Decimal
    employer_pension: Decimal
    individual_choice_budget: Decimal
    gross_incl_benefits: Decimal
    total_compensation: Decimal
    five_day_equivalent: Optional[Decimal] = None

    @property
    def total_pension(self) -> Decimal:
        return self.employee_pension + self.employer_pension

    @property
    def threshold_income(self) -> Decimal:
        """Income compared against ``PENSION_THRESHOLD``."""

        return self.yearly_gross + self.individual_choice_budget

    @property
    def exceeds_pension_threshold(self) -> bool:
        return exceeds_pension_threshold(self.yearly_gross, self.individual_choice_budget)


def scale_factor(contracted_hours: int | Decimal) -> Decimal:
    """Return the multiplier turning a 36 hour monthly amount into a yearly one."""

    hours = Decimal(str(contracted_hours))
    if hours <= 0:
        raise ValueError(f"Contracted hours must be positive, got {contracted_hours}")
    return MONTHS_PER_YEAR * (hours / FULL_TIME_HOURS)


def exceeds_pension_threshold(
    yearly_gross: Decimal, individual_choice_budget: Decimal
) -> bool:
    return yearly_gross + individual_choice_budget > PENSION_THRESHOLD


def compute(
    scale: int,
    step: int,
    contracted_hours: int | Decimal,
    *,
    table: SalaryTable | None = None,
) -> CompensationBreakdown:
    """Compute the compensation breakdown for a scale, step and contract size.

    Raises ``SalaryNotFoundError`` when the combination is not in ``table``
    (the published table by default). No rounding is applied; formatting is
    left to the caller.
    """

    source = table or SALARY_TABLE
    base = source.monthly_base(scale, step)
    factor = scale_factor(contracted_hours)
    hours = Decimal(str(contracted_hours))

    yearly_gross = base * factor
    employee_pension = base * EMPLOYEE_PENSION_RATE * factor
    individual_choice_budget = base * INDIVIDUAL_CHOICE_BUDGET_RATE * factor
    gross_incl_benefits = yearly_gross + individual_choice_budget - employee_pension
    employer_pension = base * EMPLOYER_PENSION_RATE * factor
    total_compensation = gross_incl_benefits + employee_pension + employer_pension

    five_day_equivalent = None
    if hours == FULL_TIME_HOURS:
        five_day_equivalent = total_compensation * FIVE_DAY_RATIO

    LOGGER.debug(
        "Computed compensation scale=%s step=%s hours=%s total=%s",
        scale,
        step,
        hours,
        total_compensation,
    )
    return CompensationBreakdown(
        scale=scale,
        step=step,
        contracted_hours=hours,
        monthly_base=base,
        scale_factor=factor,
        yearly_gross=yearly_gross,
        employee_pension=employee_pension,
        employer_pension=employer_pension,
        individual_choice_budget=individual_choice_budget,
        gross_incl_benefits=gross_incl_benefits,
        total_compensation=total_compensation,
        five_day_equivalent=five_day_equivalent,
    )
