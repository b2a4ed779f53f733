from __future__ import annotations

import logging
import os
import subprocess
import sys
from datetime import date
from pathlib import Path

import pytest

from salary_calc.core.log.context import ContextFilter
from salary_calc.core.logger import (
    get_logger,
    init_logging,
    log_context,
    shutdown_logging,
    timeit,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


def test_bound_context_is_restored_after_block() -> None:
    log_context.clear()
    log_context.bind(request="abc")

    with log_context.bound(scale=11, step=None):
        assert log_context.as_dict() == {"request": "abc", "scale": 11}

    assert log_context.as_dict() == {"request": "abc"}
    log_context.clear()


def test_context_filter_prefixes_records() -> None:
    record = _record()
    with log_context.bound(scale=11, step=5):
        ContextFilter().filter(record)

    assert record.context == "scale=11 step=5 "


def test_context_filter_without_context() -> None:
    log_context.clear()
    record = _record()

    ContextFilter().filter(record)

    assert record.context == ""


def test_timeit_logs_completion(caplog) -> None:
    logger = logging.getLogger("salary_calc.tests.timer")
    with caplog.at_level(logging.DEBUG, logger="salary_calc.tests.timer"):
        with timeit("Lookup", logger=logger) as timer:
            timer.add(3)

    assert "Lookup completed in" in caplog.text
    assert "(3 items)" in caplog.text


def test_timeit_logs_failure(caplog) -> None:
    logger = logging.getLogger("salary_calc.tests.timer")
    with caplog.at_level(logging.DEBUG, logger="salary_calc.tests.timer"):
        with pytest.raises(RuntimeError):
            with timeit("Lookup", logger=logger):
                raise RuntimeError("boom")

    assert "Lookup failed after" in caplog.text


def test_context_filter_keeps_prefix_set_by_another_thread() -> None:
    record = _record()
    record.context = "scale=3 "

    with log_context.bound(scale=11):
        ContextFilter().filter(record)

    assert record.context == "scale=3 "


def test_file_logging_writes_dated_file_with_context(tmp_path) -> None:
    init_logging(log_dir=tmp_path, console=False)
    try:
        logger = get_logger("salary_calc.tests.file")
        with log_context.bound(scale=11, step=5):
            logger.info("Breakdown ready")
        logger.debug("Below the configured level")
    finally:
        shutdown_logging()
        init_logging()

    log_file = tmp_path / f"{date.today():%Y_%m_%d}.log"
    content = log_file.read_text(encoding="utf-8")
    assert "| INFO     | salary_calc.tests.file | scale=11 step=5 Breakdown ready" in content
    assert "Below the configured level" not in content


def test_importing_domain_leaves_logging_unconfigured() -> None:
    root = Path(__file__).resolve().parents[2]
    code = (
        "import logging, sys\n"
        "import salary_calc.domain\n"
        "salary_calc.domain.compute(11, 5, 36)\n"
        "sys.exit(len(logging.getLogger().handlers))\n"
    )
    env = {**os.environ, "PYTHONPATH": str(root)}

    result = subprocess.run([sys.executable, "-c", code], cwd=root, env=env, check=False)

    assert result.returncode == 0
