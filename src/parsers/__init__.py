"""
Parser Module for the Lesson Slicer

Provides parser implementations for locating lesson content in saved pages.
Currently includes a BeautifulSoup-based lesson page parser.
"""

from src.parsers.base import (
    BaseParser,
    LessonPage,
    LessonPageError,
    ParseError,
    StructureError,
)
from src.parsers.lesson_page_parser import LessonPageParser

__all__ = [
    "BaseParser",
    "LessonPage",
    "LessonPageError",
    "ParseError",
    "StructureError",
    "LessonPageParser",
]
