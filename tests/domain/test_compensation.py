"""Tests for the compensation formulas."""
from __future__ import annotations

from decimal import Decimal

import pytest

from salary_calc.domain import (
    PENSION_THRESHOLD,
    SALARY_TABLE,
    SalaryNotFoundError,
    compute,
    exceeds_pension_threshold,
    scale_factor,
)

CENT = Decimal("0.01")


def test_round_example_breakdown(example_table) -> None:
    breakdown = compute(11, 5, 36, table=example_table)

    assert breakdown.monthly_base == Decimal("4000")
    assert breakdown.scale_factor == 12
    assert breakdown.yearly_gross == Decimal("48000")
    assert breakdown.employee_pension == Decimal("3888")
    assert breakdown.individual_choice_budget == Decimal("7920")
    assert breakdown.gross_incl_benefits == Decimal("52032")
    assert breakdown.employer_pension == Decimal("9072")
    assert breakdown.total_pension == Decimal("12960")
    assert breakdown.total_compensation == Decimal("64992")
    assert breakdown.five_day_equivalent == Decimal("81240")
    assert breakdown.exceeds_pension_threshold is False


def test_part_time_contract_scales_amounts(example_table) -> None:
    breakdown = compute(11, 5, 27, table=example_table)

    assert breakdown.scale_factor == 9
    assert breakdown.yearly_gross == Decimal("36000")
    assert breakdown.total_compensation == Decimal("48744")
    assert breakdown.five_day_equivalent is None


@pytest.mark.parametrize("hours", [27, 38, 40])
def test_yearly_gross_is_linear_in_hours(hours: int) -> None:
    reference = compute(11, 5, 36).yearly_gross
    scaled = compute(11, 5, hours).yearly_gross

    assert scaled.quantize(CENT) == (reference * hours / 36).quantize(CENT)


@pytest.mark.parametrize("hours", [27, 36, 38, 40])
def test_total_never_below_yearly_gross(hours: int) -> None:
    for scale, step, _ in SALARY_TABLE:
        breakdown = compute(scale, step, hours)
        assert breakdown.total_compensation >= breakdown.yearly_gross


def test_full_time_reference_values() -> None:
    breakdown = compute(7, 3, 36)

    assert scale_factor(36) == 12
    assert breakdown.five_day_equivalent == breakdown.total_compensation * Decimal("1.25")
    assert breakdown.contracted_hours == Decimal("36")


def test_published_amount_is_used_by_default() -> None:
    breakdown = compute(11, 5, 36)

    assert breakdown.total_compensation == Decimal("76087.59672")


def test_unknown_combination_propagates_not_found(example_table) -> None:
    with pytest.raises(SalaryNotFoundError):
        compute(11, 6, 36, table=example_table)
    with pytest.raises(SalaryNotFoundError):
        compute(19, 0, 36)


@pytest.mark.parametrize("hours", [0, -36])
def test_non_positive_hours_are_rejected(hours: int) -> None:
    with pytest.raises(ValueError, match="positive"):
        compute(11, 5, hours)


def test_threshold_is_strictly_greater_than() -> None:
    assert PENSION_THRESHOLD == Decimal("130000")
    assert not exceeds_pension_threshold(Decimal("120000"), Decimal("10000"))
    assert not exceeds_pension_threshold(Decimal("119999.99"), Decimal("10000"))
    assert exceeds_pension_threshold(Decimal("120000"), Decimal("10000.01"))


def test_threshold_flag_depends_on_contracted_hours() -> None:
    full_time = compute(18, 12, 36)
    extended = compute(18, 12, 40)

    assert full_time.threshold_income < PENSION_THRESHOLD
    assert full_time.exceeds_pension_threshold is False
    assert extended.threshold_income > PENSION_THRESHOLD
    assert extended.exceeds_pension_threshold is True


def test_breakdown_is_immutable(example_table) -> None:
    breakdown = compute(11, 5, 36, table=example_table)

    with pytest.raises(AttributeError):
        breakdown.yearly_gross = Decimal("0")  # type: ignore[misc]
