"""Service turning request parameters into compensation breakdowns."""
from __future__ import annotations

from salary_calc.core.config import Settings, get_settings
from salary_calc.core.logger import get_logger, log_context, timeit
from salary_calc.domain import SALARY_TABLE, SalaryNotFoundError, SalaryTable, compute
from salary_calc.schemas import (
    CompensationRequest,
    CompensationResponse,
    CompensationResult,
    SalaryTableListing,
    ScaleSteps,
    StepAmount,
)
from salary_calc.web.query_params import ParamsMapping, extract_calculator_params

LOGGER = get_logger(__name__)


class CompensationService:
    """Service exposing the calculator to the HTTP and command line layers."""

    def __init__(
        self,
        settings: Settings | None = None,
        table: SalaryTable | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.table = table or SALARY_TABLE

    def resolve(self, params: ParamsMapping) -> CompensationRequest:
        """Parse query parameters, falling back to the default combination."""

        defaults = self.settings.defaults
        parsed = extract_calculator_params(
            params,
            default_scale=defaults.scale,
            default_step=defaults.step,
            default_hours=defaults.hours,
            hours_options=defaults.hours_options,
        )
        if self.table.contains(parsed.scale, parsed.step):
            return CompensationRequest(scale=parsed.scale, step=parsed.step, hours=parsed.hours)

        LOGGER.warning(
            "Unknown combination scale=%s step=%s, using default scale=%s step=%s",
            parsed.scale,
            parsed.step,
            defaults.scale,
            defaults.step,
        )
        return CompensationRequest(
            scale=defaults.scale,
            step=defaults.step,
            hours=parsed.hours,
            fallback=True,
        )

    def calculate(self, scale: int, step: int, hours: int) -> CompensationResult:
        """Compute one breakdown; ``SalaryNotFoundError`` propagates."""

        with log_context.bound(scale=scale, step=step, hours=hours):
            with timeit("Compensation calculation", logger=LOGGER):
                breakdown = compute(scale, step, hours, table=self.table)
            if breakdown.exceeds_pension_threshold:
                LOGGER.info("Income above pension threshold, caveat applies")
        return CompensationResult.from_breakdown(breakdown)

    def calculate_from_params(self, params: ParamsMapping) -> CompensationResponse:
        request = self.resolve(params)
        try:
            result = self.calculate(request.scale, request.step, request.hours)
        except SalaryNotFoundError:
            LOGGER.exception("Default combination missing from salary table")
            raise
        return CompensationResponse(request=request, result=result)

    def list_table(self) -> SalaryTableListing:
        scales = [
            ScaleSteps(
                scale=scale,
                steps=[
                    StepAmount(step=step, monthly_base=self.table.monthly_base(scale, step))
                    for step in self.table.available_steps(scale)
                ],
            )
            for scale in self.table.available_scales()
        ]
        return SalaryTableListing(
            version=self.table.version,
            hours_options=list(self.settings.defaults.hours_options),
            scales=scales,
        )
