from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from starlette.datastructures import QueryParams

ParamsMapping = Mapping[str, str] | QueryParams

SCALE_PARAMS = ("scale", "schaal")
STEP_PARAMS = ("step", "trede")
HOURS_PARAMS = ("hours", "uren")


@dataclass(frozen=True)
class CalculatorParams:
    """Raw calculator input; the combination is not checked against the table."""

    scale: int
    step: int
    hours: int


def parse_int(value: str | None, *, default: int, minimum: int = 0) -> int:
    try:
        parsed = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def parse_positive_int(value: str | None, *, default: int) -> int:
    return parse_int(value, default=default, minimum=1)


def first_present(params: ParamsMapping, keys: Sequence[str]) -> str | None:
    """Return the first non-blank value among ``keys`` (``step`` before ``trede``)."""

    for key in keys:
        value = params.get(key)
        if value is not None and value.strip():
            return value.strip()
    return None


def normalize_hours(value: str | None, *, options: Sequence[int], default: int) -> int:
    parsed = parse_positive_int(value, default=default)
    return parsed if parsed in options else default


def extract_calculator_params(
    params: ParamsMapping,
    *,
    default_scale: int,
    default_step: int,
    default_hours: int,
    hours_options: Sequence[int],
) -> CalculatorParams:
    scale = parse_positive_int(first_present(params, SCALE_PARAMS), default=default_scale)
    step = parse_int(first_present(params, STEP_PARAMS), default=default_step)
    hours = normalize_hours(
        first_present(params, HOURS_PARAMS),
        options=hours_options,
        default=default_hours,
    )
    return CalculatorParams(scale=scale, step=step, hours=hours)
