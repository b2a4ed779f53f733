"""Timing helper that logs how long a block of work took."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    logger: logging.Logger
    level: int
    unit: str
    count: int = 0
    start: float = field(default_factory=perf_counter)

    def add(self, amount: int = 1) -> None:
        self.count += amount

    @property
    def elapsed(self) -> float:
        return perf_counter() - self.start

    def finish(self, success: bool = True) -> None:
        elapsed = self.elapsed
        if success:
            message = f"{self.label} completed in {elapsed * 1000:.2f}ms"
            if self.count:
                message += f" ({self.count:,} {self.unit})"
            self.logger.log(self.level, message)
        else:
            self.logger.error("%s failed after %.2fms", self.label, elapsed * 1000)


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    unit: str = "items",
) -> Iterator[_Timer]:
    """Context manager that logs the duration of the wrapped block.

    Args:
        label: Description of the operation being timed
        logger: Logger instance to use (defaults to "salary_calc.timer")
        level: Logging level for the timing message
        unit: Unit reported next to the count accumulated with ``add``
    """
    log = logger or logging.getLogger("salary_calc.timer")
    timer = _Timer(label=label, logger=log, level=level, unit=unit)
    try:
        yield timer
    except Exception:
        timer.finish(success=False)
        raise
    else:
        timer.finish(success=True)
