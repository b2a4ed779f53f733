"""Print a compensation breakdown for a scale/step combination."""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich.console import Console
from rich.table import Table

from salary_calc.core.config import get_settings
from salary_calc.core.formatting import format_euro
from salary_calc.core.logger import get_logger, init_logging
from salary_calc.domain import PENSION_THRESHOLD, SalaryNotFoundError
from salary_calc.schemas import CompensationResult
from salary_calc.services import CompensationService

logger = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    defaults = settings.defaults
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--scale", type=int, default=defaults.scale, help="Salary scale (schaal)")
    parser.add_argument("--step", "--trede", type=int, default=defaults.step, help="Step within the scale (trede)")
    parser.add_argument(
        "--hours",
        "--uren",
        type=int,
        choices=defaults.hours_options,
        default=defaults.hours,
        help="Contracted hours per week",
    )
    parser.add_argument("--list", action="store_true", help="List the scales and steps of the salary table")
    parser.add_argument("--log-level", default=settings.logging.level, help="Logging level")
    return parser.parse_args(argv)


def render_breakdown(result: CompensationResult) -> Table:
    table = Table(
        title=f"Scale {result.scale} step {result.step}, {result.contracted_hours} hours",
        show_header=False,
    )
    table.add_column("Component")
    table.add_column("Amount", justify="right")
    table.add_row("Monthly salary (36 hours)", format_euro(result.monthly_base))
    table.add_row("Yearly gross salary", format_euro(result.yearly_gross))
    table.add_row("Individual choice budget (IKB)", format_euro(result.individual_choice_budget))
    table.add_row("Employee pension contribution", format_euro(-result.employee_pension))
    table.add_row("Gross incl. IKB", format_euro(result.gross_incl_benefits))
    table.add_row("Employer pension contribution", format_euro(result.employer_pension))
    table.add_row("Total compensation", format_euro(result.total_compensation), style="bold")
    if result.five_day_equivalent is not None:
        table.add_row("Equivalent for a 5-day week", format_euro(result.five_day_equivalent), style="dim")
    return table


def render_listing(service: CompensationService) -> Table:
    listing = service.list_table()
    table = Table(title=f"Salary table {listing.version}")
    table.add_column("Scale", justify="right")
    table.add_column("Steps")
    table.add_column("Range", justify="right")
    for entry in listing.scales:
        first, last = entry.steps[0], entry.steps[-1]
        table.add_row(
            str(entry.scale),
            f"{first.step}-{last.step}",
            f"{format_euro(first.monthly_base)} - {format_euro(last.monthly_base)}",
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    init_logging(level=args.log_level)
    console = Console()
    service = CompensationService()

    if args.list:
        console.print(render_listing(service))
        return 0

    try:
        result = service.calculate(args.scale, args.step, args.hours)
    except SalaryNotFoundError as exc:
        logger.error("%s", exc)
        console.print(f"[red]{exc}[/]")
        return 1

    console.print(render_breakdown(result))
    if result.exceeds_pension_threshold:
        console.print(
            f"[yellow]Gross salary plus IKB exceeds {format_euro(PENSION_THRESHOLD)}; "
            "pension accrual above this amount follows different rules.[/]"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
