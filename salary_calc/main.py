"""FastAPI application instance and startup hooks."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from salary_calc.core import get_logger, get_settings
from salary_calc.core.logger import init_logging
from salary_calc.domain import SALARY_TABLE, SalaryNotFoundError
from salary_calc.routers import api_router, calculator_router

LOGGER = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    init_logging(level=settings.logging.level, log_dir=settings.logging.log_dir)

    app = FastAPI(title=settings.app_title, version="0.1.0")
    app.include_router(calculator_router)
    app.include_router(api_router)

    @app.exception_handler(SalaryNotFoundError)
    async def salary_not_found(request: Request, exc: SalaryNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict[str, str]:
        return {"status": "ok", "table_version": SALARY_TABLE.version}

    LOGGER.info(
        "FastAPI application initialised (salary table %s, %s scales)",
        SALARY_TABLE.version,
        len(SALARY_TABLE.available_scales()),
    )
    return app


app = create_app()
