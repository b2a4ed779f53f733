"""Helper functions for formatting euro amounts."""

from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal


def _group_thousands(digits: str, separator: str) -> str:
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def round_to_whole(value: int | float | Decimal) -> Decimal:
    """Round half-up to a whole currency unit."""

    return Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_euro(
    value: int | float | Decimal,
    symbol: str = "€",
    thousands_separator: str = ".",
) -> str:
    """Format an amount the way Dutch salary tables print it: ``€ 48.000``.

    Amounts are rounded to whole euros; negative values keep their sign
    in front of the digits (``€ -3.888``).
    """
    rounded = round_to_whole(value)
    sign = "-" if rounded < 0 else ""
    digits = str(abs(rounded))
    return f"{symbol} {sign}{_group_thousands(digits, thousands_separator)}"

