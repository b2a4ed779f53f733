"""FastAPI routers for the calculator application."""

from .api import router as api_router
from .calculator import router as calculator_router

__all__ = ["api_router", "calculator_router"]
