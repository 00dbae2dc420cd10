"""
Parser Base Classes and Data Structures

Defines the abstract lesson page parser interface, the parsed page dataclass
and the errors raised when a page does not have the expected layout.

All parser implementations must inherit from BaseParser and return a
LessonPage containing:
- soup: The full parsed document
- content: The lesson content container whose children are sliced
- lesson_number: Numeric lesson identifier from the titlebar
- source_path: File the page was read from
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Tag

from src.utils.logging_config import logger


class LessonPageError(Exception):
    """Base class for lesson page layout errors."""
    pass


class StructureError(LessonPageError):
    """Raised when the content container or titlebar is missing or malformed."""
    pass


class ParseError(LessonPageError):
    """Raised when the lesson identifier is not numeric."""
    pass


@dataclass
class LessonPage:
    """
    Parsed lesson page.

    Example:
        >>> page = parser.parse(Path("lesson-12.html"))
        >>> print(f"Lesson {page.lesson_number}: {len(page.content.contents)} nodes")
    """

    soup: BeautifulSoup
    content: Tag
    lesson_number: int
    source_path: Optional[Path] = None

    def __post_init__(self):
        """Validate fields after initialization."""
        if not isinstance(self.content, Tag):
            raise TypeError("content must be an element")
        if not isinstance(self.lesson_number, int):
            raise TypeError("lesson_number must be an integer")


class BaseParser(ABC):
    """
    Abstract base class for lesson page parsers.

    The parser is responsible for:
    1. Loading the page markup
    2. Locating the lesson content container
    3. Reading the lesson number
    4. Removing page noise (scripts, ads, player buttons)
    """

    def __init__(self):
        """Initialize the parser."""
        self.logger = logger.bind(parser=self.__class__.__name__)
        self.logger.debug(f"Initialized {self.__class__.__name__}")

    @abstractmethod
    def parse(self, html_path: Path) -> LessonPage:
        """
        Parse a lesson page file and return the located content.

        Args:
            html_path: Path to the saved HTML page

        Returns:
            LessonPage with content container and lesson number

        Raises:
            FileNotFoundError: If the file doesn't exist
            StructureError: If the page layout is not a lesson page
            ParseError: If the lesson number cannot be read
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement parse() method"
        )
