"""
Pytest configuration and shared fixtures for Lesson Slicer tests.

Provides sample lesson pages and temporary export directories for unit and
integration tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from tests.test_helpers import SAMPLE_LESSON_BODY, lesson_page_markup


@pytest.fixture
def sample_lesson_markup() -> str:
    """Full markup of the sample lesson page (lesson 12)."""
    return lesson_page_markup(SAMPLE_LESSON_BODY)


@pytest.fixture
def write_page(tmp_path: Path) -> Callable[[str], Path]:
    """
    Factory writing page markup to a temporary HTML file.

    Example:
        >>> def test_something(write_page):
        ...     path = write_page(lesson_page_markup("<p>a</p>"))
    """
    def _write(markup: str, name: str = "lesson.html") -> Path:
        path = tmp_path / name
        path.write_text(markup, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_lesson_path(write_page, sample_lesson_markup: str) -> Path:
    """Sample lesson page saved to a temporary file."""
    return write_page(sample_lesson_markup)


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """Temporary directory for exported CSV files."""
    path = tmp_path / "exports"
    path.mkdir()
    return path
