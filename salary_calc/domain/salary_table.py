"""Static salary table of the collective labour agreement.

Monthly base amounts are the full-time (36 hour) gross amounts per scale
(``schaal``) and step (``trede``). Scales run from 1 to 18. Step sets differ
per scale: scales 1-3 run 0-7, scales 4-8 run 0-10, scales 9-14 run 0-11 and
scales 15-18 run 0-12. Update ``AGREEMENT_VERSION`` together with the
amounts whenever a new table is published.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType

LOGGER = logging.getLogger(__name__)

AGREEMENT_VERSION = "2024-07"

_RAW_TABLE: dict[int, dict[int, str]] = {
    1: {
        0: "2100.00", 1: "2165.10", 2: "2230.20", 3: "2295.30", 4: "2360.40",
        5: "2425.50", 6: "2490.60", 7: "2555.70",
    },
    2: {
        0: "2242.80", 1: "2312.33", 2: "2381.85", 3: "2451.38", 4: "2520.91",
        5: "2590.43", 6: "2659.96", 7: "2729.49",
    },
    3: {
        0: "2395.31", 1: "2469.57", 2: "2543.82", 3: "2618.07", 4: "2692.33",
        5: "2766.58", 6: "2840.84", 7: "2915.09",
    },
    4: {
        0: "2558.19", 1: "2637.50", 2: "2716.80", 3: "2796.10", 4: "2875.41",
        5: "2954.71", 6: "3034.02", 7: "3113.32", 8: "3192.62", 9: "3271.93",
        10: "3351.23",
    },
    5: {
        0: "2732.15", 1: "2816.85", 2: "2901.54", 3: "2986.24", 4: "3070.93",
        5: "3155.63", 6: "3240.33", 7: "3325.02", 8: "3409.72", 9: "3494.42",
        10: "3579.11",
    },
    6: {
        0: "2917.93", 1: "3008.39", 2: "3098.85", 3: "3189.30", 4: "3279.76",
        5: "3370.21", 6: "3460.67", 7: "3551.13", 8: "3641.58", 9: "3732.04",
        10: "3822.49",
    },
    7: {
        0: "3116.35", 1: "3212.96", 2: "3309.57", 3: "3406.18", 4: "3502.78",
        5: "3599.39", 6: "3696.00", 7: "3792.60", 8: "3889.21", 9: "3985.82",
        10: "4082.42",
    },
    8: {
        0: "3328.27", 1: "3431.44", 2: "3534.62", 3: "3637.80", 4: "3740.97",
        5: "3844.15", 6: "3947.32", 7: "4050.50", 8: "4153.68", 9: "4256.85",
        10: "4360.03",
    },
    9: {
        0: "3554.59", 1: "3664.78", 2: "3774.97", 3: "3885.17", 4: "3995.36",
        5: "4105.55", 6: "4215.74", 7: "4325.93", 8: "4436.13", 9: "4546.32",
        10: "4656.51", 11: "4766.70",
    },
    10: {
        0: "3796.30", 1: "3913.99", 2: "4031.67", 3: "4149.36", 4: "4267.04",
        5: "4384.73", 6: "4502.41", 7: "4620.10", 8: "4737.78", 9: "4855.47",
        10: "4973.15", 11: "5090.84",
    },
    11: {
        0: "4054.45", 1: "4180.14", 2: "4305.82", 3: "4431.51", 4: "4557.20",
        5: "4682.89", 6: "4808.58", 7: "4934.26", 8: "5059.95", 9: "5185.64",
        10: "5311.33", 11: "5437.02",
    },
    12: {
        0: "4330.15", 1: "4464.39", 2: "4598.62", 3: "4732.86", 4: "4867.09",
        5: "5001.32", 6: "5135.56", 7: "5269.79", 8: "5404.03", 9: "5538.26",
        10: "5672.50", 11: "5806.73",
    },
    13: {
        0: "4624.60", 1: "4767.96", 2: "4911.33", 3: "5054.69", 4: "5198.05",
        5: "5341.41", 6: "5484.78", 7: "5628.14", 8: "5771.50", 9: "5914.87",
        10: "6058.23", 11: "6201.59",
    },
    14: {
        0: "4939.07", 1: "5092.19", 2: "5245.30", 3: "5398.41", 4: "5551.52",
        5: "5704.63", 6: "5857.74", 7: "6010.85", 8: "6163.97", 9: "6317.08",
        10: "6470.19", 11: "6623.30",
    },
    15: {
        0: "5274.93", 1: "5438.45", 2: "5601.98", 3: "5765.50", 4: "5929.02",
        5: "6092.55", 6: "6256.07", 7: "6419.59", 8: "6583.11", 9: "6746.64",
        10: "6910.16", 11: "7073.68", 12: "7237.21",
    },
    16: {
        0: "5633.63", 1: "5808.27", 2: "5982.91", 3: "6157.55", 4: "6332.20",
        5: "6506.84", 6: "6681.48", 7: "6856.12", 8: "7030.77", 9: "7205.41",
        10: "7380.05", 11: "7554.69", 12: "7729.34",
    },
    17: {
        0: "6016.71", 1: "6203.23", 2: "6389.75", 3: "6576.27", 4: "6762.79",
        5: "6949.30", 6: "7135.82", 7: "7322.34", 8: "7508.86", 9: "7695.38",
        10: "7881.89", 11: "8068.41", 12: "8254.93",
    },
    18: {
        0: "6425.85", 1: "6625.05", 2: "6824.25", 3: "7023.45", 4: "7222.66",
        5: "7421.86", 6: "7621.06", 7: "7820.26", 8: "8019.46", 9: "8218.66",
        10: "8417.86", 11: "8617.06", 12: "8816.27",
    },
}


class SalaryNotFoundError(LookupError):
    """Raised when a scale/step combination is not part of the table."""

    def __init__(self, scale: int, step: int | None = None) -> None:
        self.scale = scale
        self.step = step
        if step is None:
            message = f"Scale {scale} is not part of the salary table"
        else:
            message = f"Scale {scale} step {step} is not part of the salary table"
        super().__init__(message)


class SalaryTable:
    """Read-only view over monthly base amounts keyed by scale and step."""

    def __init__(
        self,
        amounts: Mapping[int, Mapping[int, Decimal | str | int]],
        *,
        version: str = AGREEMENT_VERSION,
    ) -> None:
        table: dict[int, Mapping[int, Decimal]] = {}
        for scale in sorted(amounts):
            steps = amounts[scale]
            if not steps:
                raise ValueError(f"Scale {scale} has no steps")
            row: dict[int, Decimal] = {}
            for step in sorted(steps):
                amount = Decimal(str(steps[step]))
                if amount < 0:
                    raise ValueError(
                        f"Scale {scale} step {step} has a negative amount {amount}"
                    )
                row[step] = amount
            table[scale] = MappingProxyType(row)
        self._table: Mapping[int, Mapping[int, Decimal]] = MappingProxyType(table)
        self.version = version

    def __repr__(self) -> str:
        return f"SalaryTable(version={self.version!r}, scales={len(self._table)})"

    def __iter__(self) -> Iterator[tuple[int, int, Decimal]]:
        """Yield ``(scale, step, monthly_base)`` in ascending order."""

        for scale, steps in self._table.items():
            for step, amount in steps.items():
                yield scale, step, amount

    def contains(self, scale: int, step: int) -> bool:
        steps = self._table.get(scale)
        return steps is not None and step in steps

    def monthly_base(self, scale: int, step: int) -> Decimal:
        """Return the full-time monthly base amount for ``scale``/``step``."""

        steps = self._table.get(scale)
        if steps is None or step not in steps:
            LOGGER.debug("Lookup miss for scale=%s step=%s", scale, step)
            raise SalaryNotFoundError(scale, step)
        return steps[step]

    def available_scales(self) -> tuple[int, ...]:
        return tuple(self._table)

    def available_steps(self, scale: int) -> tuple[int, ...]:
        steps = self._table.get(scale)
        if steps is None:
            raise SalaryNotFoundError(scale)
        return tuple(steps)


SALARY_TABLE = SalaryTable(_RAW_TABLE)


def monthly_base(scale: int, step: int) -> Decimal:
    """Module-level shortcut for ``SALARY_TABLE.monthly_base``."""

    return SALARY_TABLE.monthly_base(scale, step)


def available_scales() -> tuple[int, ...]:
    return SALARY_TABLE.available_scales()


def available_steps(scale: int) -> tuple[int, ...]:
    return SALARY_TABLE.available_steps(scale)
