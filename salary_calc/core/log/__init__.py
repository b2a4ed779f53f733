"""Logging setup for the calculator: rich console output plus optional daily files.

``init_logging`` is called by the entry points (``main.create_app`` and
``cli.main``). Records go through a ``QueueHandler`` on the root logger and
are written by a ``QueueListener`` thread, so request handlers never block
on file I/O.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from threading import RLock
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .context import ContextFilter, log_context
from .timing import timeit

__all__ = [
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "timeit",
]

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LoggingConfig:
    """Options accepted by ``init_logging``."""

    app_name: str = "salary_calc"
    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True
    queue: bool = True


@dataclass
class _LoggingState:
    config: LoggingConfig | None = None
    listener: QueueListener | None = None
    handlers: list[logging.Handler] = field(default_factory=list)


_lock = RLock()
_state = _LoggingState()
_context_filter = ContextFilter()


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


class DailyFileHandler(logging.FileHandler):
    """Append to ``<log_dir>/YYYY_MM_DD.log``, switching files at midnight."""

    def __init__(self, directory: Path, *, encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.current_date: date = datetime.now().date()
        super().__init__(self.path_for(self.current_date), mode="a", encoding=encoding)

    def path_for(self, day: date) -> Path:
        return self.directory / f"{day:%Y_%m_%d}.log"

    def emit(self, record: logging.LogRecord) -> None:
        record_date = datetime.fromtimestamp(record.created).date()
        if record_date != self.current_date:
            self.current_date = record_date
            self.close()
            self.baseFilename = os.fspath(self.path_for(record_date))
        # FileHandler reopens a closed stream lazily.
        super().emit(record)


def _build_handlers(cfg: LoggingConfig, level: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if cfg.console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            log_time_format=DATE_FORMAT,
        )
        console_handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
        handlers.append(console_handler)

    if cfg.log_dir:
        file_handler = DailyFileHandler(Path(cfg.log_dir))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_context_filter)
    return handlers


def init_logging(**kwargs: object) -> None:
    """Configure the root logger.

    Repeated calls with the same options are no-ops; different options tear
    down the previous handlers first.
    """

    with _lock:
        cfg = LoggingConfig()
        for key, value in kwargs.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)  # type: ignore[arg-type]

        if _state.config == cfg:
            return
        _teardown_locked()

        level = _parse_level(cfg.level)
        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        handlers = _build_handlers(cfg, level)

        if cfg.queue and handlers:
            log_queue: SimpleQueue = SimpleQueue()
            queue_handler = QueueHandler(log_queue)
            queue_handler.setLevel(level)
            # Context is captured here; the listener thread has its own contextvars.
            queue_handler.addFilter(_context_filter)
            root.addHandler(queue_handler)
            _state.listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
            _state.listener.start()
        else:
            for handler in handlers:
                root.addHandler(handler)

        _state.handlers = handlers
        _state.config = cfg


def _teardown_locked() -> None:
    if _state.listener is not None:
        _state.listener.stop()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in _state.handlers:
        handler.close()
    _state.listener = None
    _state.handlers = []
    _state.config = None


def shutdown_logging() -> None:
    """Flush pending records and remove every handler this module installed."""

    with _lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, configuring console logging on first use."""

    with _lock:
        if _state.config is None:
            init_logging()
        return logging.getLogger(name or _state.config.app_name)
