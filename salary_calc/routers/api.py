"""JSON endpoints exposing the calculator."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from salary_calc.routers.dependencies import get_compensation_service
from salary_calc.schemas import CompensationResponse, SalaryTableListing
from salary_calc.services import CompensationService

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/compensation", response_model=CompensationResponse)
def compensation(
    request: Request,
    service: CompensationService = Depends(get_compensation_service),
) -> CompensationResponse:
    """Breakdown for ``scale``, ``step``/``trede`` and ``hours``/``uren``."""

    return service.calculate_from_params(request.query_params)


@router.get("/scales", response_model=SalaryTableListing)
def scales(
    service: CompensationService = Depends(get_compensation_service),
) -> SalaryTableListing:
    return service.list_table()
