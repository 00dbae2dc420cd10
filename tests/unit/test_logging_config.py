"""
Unit Tests for src.utils.logging_config

Tests the per-run log files, the lesson field on records and step framing.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from src.utils.logging_config import (
    ERROR_LOG_NAME,
    UNKNOWN_LESSON,
    bind_lesson,
    logger,
    pipeline_step,
    setup_logger,
)


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
    bind_lesson(UNKNOWN_LESSON)


@pytest.fixture
def captured():
    """Messages and lesson fields of records logged during the test."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["message"], message.record["extra"]["lesson"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


class TestSetupLogger:
    """Tests for setup_logger()"""

    def test_run_log_named_after_page(self, tmp_path):
        """The run log is named after the page being sliced"""
        with patch("src.utils.logging_config.LOGS_DIR", tmp_path):
            run_log = setup_logger(Path("pages/lesson-12.html"))

        assert run_log.parent == tmp_path
        assert run_log.name.startswith("lesson-12_")
        assert run_log.suffix == ".log"

    def test_records_carry_lesson(self, tmp_path):
        """Run log lines show the bound lesson number"""
        with patch("src.utils.logging_config.LOGS_DIR", tmp_path):
            run_log = setup_logger(Path("lesson-12.html"))

        logger.info("before loading")
        bind_lesson(12)
        logger.info("after loading")
        logger.remove()

        lines = run_log.read_text(encoding="utf-8").splitlines()
        assert any("lesson - |" in line and "before loading" in line for line in lines)
        assert any("lesson 12 |" in line and "after loading" in line for line in lines)

    def test_errors_collected_in_shared_file(self, tmp_path):
        """Only errors reach errors.log"""
        with patch("src.utils.logging_config.LOGS_DIR", tmp_path):
            setup_logger(Path("lesson-3.html"))

        logger.info("routine message")
        logger.error("broken page")
        logger.remove()

        errors = (tmp_path / ERROR_LOG_NAME).read_text(encoding="utf-8")
        assert "broken page" in errors
        assert "routine message" not in errors


class TestBindLesson:
    """Tests for bind_lesson()"""

    def test_default_lesson(self, captured):
        """Records default to the unknown lesson marker"""
        logger.info("no lesson yet")

        assert captured[-1] == ("no lesson yet", UNKNOWN_LESSON)

    def test_bound_lesson_applies_to_bound_loggers(self, captured):
        """Loggers with their own context still carry the lesson"""
        bind_lesson(7)
        logger.bind(parser="LessonPageParser").info("parsed")

        assert captured[-1] == ("parsed", "7")

    def test_step0_binds_lesson(self, sample_lesson_path, captured):
        """Loading a page attaches its lesson number to later records"""
        from src.pipeline.step0_loading import run as run_step0

        run_step0(sample_lesson_path)
        logger.info("next step")

        assert captured[-1] == ("next step", "12")


class TestPipelineStep:
    """Tests for pipeline_step()"""

    def test_step_framed(self, captured):
        """Start and completion are logged around the step"""
        with pipeline_step("Step 9: Example"):
            logger.info("working")

        messages = [message for message, _ in captured]
        assert "STARTING: Step 9: Example" in messages
        assert messages.index("working") < len(messages) - 1
        assert messages[-1].startswith("COMPLETED: Step 9: Example (")

    def test_failed_step_not_completed(self, captured):
        """A raising step is not reported as completed"""
        with pytest.raises(ValueError):
            with pipeline_step("Step 9: Example"):
                raise ValueError("boom")

        assert not any(message.startswith("COMPLETED") for message, _ in captured)
