"""
Logging for the Lesson Slicer

Every record carries the lesson it belongs to in ``extra["lesson"]``, so
the log files of separate single-page runs stay identifiable. The lesson is
"-" until Step 0 has read the lesson number from the page.

Sinks installed by setup_logger():
- stderr: short format for the terminal
- logs/<page>_<timestamp>.log: complete record of one run
- logs/errors.log: errors of all runs, appended to one file
"""

import sys
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union
from loguru import logger as _logger

from src.config import (
    LOG_LEVEL,
    LOGS_DIR,
)


UNKNOWN_LESSON = "-"

ERROR_LOG_NAME = "errors.log"

RUN_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | lesson {extra[lesson]} | "
    "{name}:{function}:{line} | {message}"
)

CONSOLE_LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | lesson {extra[lesson]} | {message}"


def bind_lesson(lesson_number: Union[int, str]) -> None:
    """Attach the lesson number to every record logged from now on."""
    _logger.configure(extra={"lesson": str(lesson_number)})


def setup_logger(page_path: Optional[Path] = None) -> Path:
    """
    Configure loguru for one slicing run.

    Args:
        page_path: Page being sliced; its stem names the run log

    Returns:
        Path of the run log file

    Example:
        >>> run_log = setup_logger(Path("pages/lesson-12.html"))
        >>> run_log.name
        'lesson-12_20240101_120000.log'
    """
    _logger.remove()
    bind_lesson(UNKNOWN_LESSON)

    LOGS_DIR.mkdir(parents=True, exist_ok=True)

    run_name = page_path.stem if page_path is not None else "slicer"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    _logger.add(
        sys.stderr,
        format=CONSOLE_LOG_FORMAT,
        level=LOG_LEVEL,
        colorize=True,
    )

    run_log = LOGS_DIR / f"{run_name}_{timestamp}.log"
    _logger.add(run_log, format=RUN_LOG_FORMAT, level=LOG_LEVEL)

    _logger.add(
        LOGS_DIR / ERROR_LOG_NAME,
        format=RUN_LOG_FORMAT,
        level="ERROR",
        rotation="1 MB",
        retention=5,
    )

    _logger.debug(f"Logging run to {run_log}")
    return run_log


@contextmanager
def pipeline_step(step_name: str) -> Iterator[None]:
    """
    Frame a pipeline step with start, completion and duration messages.

    A step that raises is not reported as completed.

    Example:
        >>> with pipeline_step("Step 1: Automatic Tagging"):
        ...     auto_tag(page.content)
    """
    _logger.info("=" * 80)
    _logger.info(f"STARTING: {step_name}")
    _logger.info("=" * 80)
    start_time = time.time()

    yield

    _logger.success(f"COMPLETED: {step_name} ({time.time() - start_time:.2f}s)")


# Records logged before setup_logger() still need the lesson field
bind_lesson(UNKNOWN_LESSON)

logger = _logger


__all__ = [
    "UNKNOWN_LESSON",
    "bind_lesson",
    "setup_logger",
    "pipeline_step",
    "logger",
]
