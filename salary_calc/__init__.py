"""Compensation calculator for salary scales of a collective labour agreement."""

from .core import get_logger, get_settings
from .domain import SalaryNotFoundError, compute

__all__ = ["SalaryNotFoundError", "compute", "get_logger", "get_settings"]
