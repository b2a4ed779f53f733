"""Server-rendered calculator page."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from salary_calc.core.logger import get_logger
from salary_calc.core.templates import templates
from salary_calc.domain import PENSION_THRESHOLD
from salary_calc.routers.dependencies import get_compensation_service
from salary_calc.services import CompensationService

router = APIRouter(tags=["calculator"])
LOGGER = get_logger(__name__)


@router.get("/", response_class=HTMLResponse)
def calculator_page(
    request: Request,
    service: CompensationService = Depends(get_compensation_service),
) -> HTMLResponse:
    response = service.calculate_from_params(request.query_params)
    listing = service.list_table()
    steps_by_scale = {
        entry.scale: [item.step for item in entry.steps] for entry in listing.scales
    }
    LOGGER.debug(
        "Rendering calculator scale=%s step=%s hours=%s",
        response.request.scale,
        response.request.step,
        response.request.hours,
    )
    return templates.TemplateResponse(
        request,
        "calculator.html",
        {
            "title": service.settings.app_title,
            "selection": response.request,
            "result": response.result,
            "scales": list(steps_by_scale),
            "steps": steps_by_scale[response.request.scale],
            "hours_options": listing.hours_options,
            "version": listing.version,
            "threshold": PENSION_THRESHOLD,
        },
    )
