from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from salary_calc.core.formatting import format_euro

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Single shared templates environment
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

templates.env.filters["euro"] = format_euro
