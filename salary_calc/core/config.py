"""Configuration system for the calculator application."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from salary_calc.domain.salary_table import SALARY_TABLE

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(slots=True, frozen=True)
class CalculatorDefaults:
    """Combination shown when a request does not specify a valid one."""

    scale: int
    step: int
    hours: int
    hours_options: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """Options forwarded to ``init_logging``."""

    level: str = "INFO"
    log_dir: Optional[Path] = Path("logs")


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level application configuration container."""

    defaults: CalculatorDefaults
    logging: LoggingSettings
    app_title: str = "Salary scale calculator"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        def _get_env(name: str, default: str) -> str:
            return os.getenv(name, default)

        def _parse_int(name: str, default: str) -> int:
            raw_value = _get_env(name, default).strip()
            try:
                return int(raw_value)
            except ValueError as exc:
                raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc

        def _parse_hours(value: str) -> Tuple[int, ...]:
            options: list[int] = []
            for item in value.split(","):
                item = item.strip()
                if not item:
                    continue
                if not item.isdigit() or int(item) <= 0:
                    raise ValueError(
                        "SALARY_HOURS_OPTIONS must be a comma separated list of positive integers."
                    )
                options.append(int(item))
            if not options:
                raise ValueError("At least one contracted hours option must be configured.")
            return tuple(sorted(set(options)))

        hours_options = _parse_hours(_get_env("SALARY_HOURS_OPTIONS", "27,36,38,40"))
        defaults = CalculatorDefaults(
            scale=_parse_int("SALARY_DEFAULT_SCALE", "11"),
            step=_parse_int("SALARY_DEFAULT_STEP", "5"),
            hours=_parse_int("SALARY_DEFAULT_HOURS", "36"),
            hours_options=hours_options,
        )
        if defaults.hours not in hours_options:
            raise ValueError(
                f"SALARY_DEFAULT_HOURS={defaults.hours} is not one of {hours_options}."
            )

        if not SALARY_TABLE.contains(defaults.scale, defaults.step):
            raise ValueError(
                f"Default combination scale={defaults.scale} step={defaults.step} "
                "is not part of the salary table."
            )

        log_dir = _get_env("LOG_DIR", "logs").strip()
        logging_settings = LoggingSettings(
            level=_get_env("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir) if log_dir else None,
        )
        return cls(
            defaults=defaults,
            logging=logging_settings,
            app_title=_get_env("APP_TITLE", "Salary scale calculator"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()

    from .logger import get_logger

    logger = get_logger(__name__)
    logger.debug(
        "Settings initialised",
        extra={
            "defaults": {
                "scale": settings.defaults.scale,
                "step": settings.defaults.step,
                "hours": settings.defaults.hours,
                "hours_options": settings.defaults.hours_options,
            },
            "log_level": settings.logging.level,
        },
    )
    return settings
