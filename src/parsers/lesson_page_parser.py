"""
Lesson Page Parser Implementation

Uses BeautifulSoup to read a saved lesson page and locate the pieces the
slicer needs.

Page layout:
- #main > div > div > div  is the content container; its direct element
  children are the block nodes that get tagged and grouped
- #page-titlebar > * > *   holds the title text, e.g. "Lesson 12: Verbs"
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from src.config import (
    CONTENT_DEPTH,
    HTML_PARSER,
    MAIN_CONTAINER_ID,
    NOISE_CLASSES,
    NOISE_TAGS,
    TITLEBAR_ID,
)
from src.utils.segmentation.dom import first_element_child
from .base import BaseParser, LessonPage, ParseError, StructureError


TITLE_SPLIT_PATTERN = re.compile(r'[ :]')


def _descend(element: Optional[Tag], depth: int) -> Optional[Tag]:
    """Follow first element children ``depth`` levels down."""
    for _ in range(depth):
        if element is None:
            return None
        element = first_element_child(element)
    return element


def grab_content(soup: BeautifulSoup) -> Tag:
    """
    Locate the lesson content container.

    Raises:
        StructureError: If #main is missing or has no nested content
    """
    main = soup.find(id=MAIN_CONTAINER_ID)
    if main is None:
        raise StructureError("Page contains no main")

    content = _descend(main, CONTENT_DEPTH)
    if content is None:
        raise StructureError("Improper main tree found")

    return content


def grab_lesson_number(soup: BeautifulSoup) -> int:
    """
    Read the lesson number from the titlebar.

    The title text is split on spaces and colons and the second token is
    parsed: "Lesson 12: Verbs" -> 12.

    Raises:
        StructureError: If the titlebar is missing or malformed
        ParseError: If the second token is not an integer
    """
    titlebar = soup.find(id=TITLEBAR_ID)
    if titlebar is None:
        raise StructureError("Page contains no title")

    heading = _descend(titlebar, 2)
    if heading is None:
        raise StructureError("Improper titlebar found")

    tokens = TITLE_SPLIT_PATTERN.split(heading.get_text())
    if len(tokens) < 2:
        raise ParseError("Can't find lesson number")

    try:
        return int(tokens[1])
    except ValueError as e:
        raise ParseError("Can't find lesson number") from e


def clean_page(soup: BeautifulSoup, content: Tag) -> int:
    """
    Remove scripts and ads from the content and player buttons from the page.

    Returns:
        Number of elements removed
    """
    noise = list(content.find_all(list(NOISE_TAGS)))
    for class_name in NOISE_CLASSES:
        noise.extend(soup.find_all(class_=class_name))

    removed = 0
    for element in noise:
        # nested noise may already be gone with its parent
        if element.decomposed:
            continue
        element.decompose()
        removed += 1

    return removed


class LessonPageParser(BaseParser):
    """
    BeautifulSoup-based lesson page parser.

    Example:
        >>> parser = LessonPageParser()
        >>> page = parser.parse(Path("pages/lesson-12.html"))
        >>> page.lesson_number
        12
    """

    def __init__(self, features: str = HTML_PARSER) -> None:
        super().__init__()
        self._features = features

    def parse_markup(self, markup: Union[str, bytes], source_path: Optional[Path] = None) -> LessonPage:
        """
        Parse page markup already in memory.

        Bytes are decoded by BeautifulSoup, which honors the page's own
        charset declaration.

        Raises:
            StructureError: If the page layout is not a lesson page
            ParseError: If the lesson number cannot be read
        """
        soup = BeautifulSoup(markup, self._features)

        content = grab_content(soup)
        lesson_number = grab_lesson_number(soup)
        self.logger.info(f"Found lesson {lesson_number}")

        removed = clean_page(soup, content)
        self.logger.debug(f"Removed {removed} noise elements")

        return LessonPage(
            soup=soup,
            content=content,
            lesson_number=lesson_number,
            source_path=source_path,
        )

    def parse(self, html_path: Path) -> LessonPage:
        """
        Parse a saved lesson page.

        Raises:
            FileNotFoundError: If the file doesn't exist
            StructureError: If the page layout is not a lesson page
            ParseError: If the lesson number cannot be read
        """
        if not html_path.exists():
            self.logger.error(f"Page not found: {html_path}")
            raise FileNotFoundError(f"Page not found at {html_path}")

        self.logger.info(f"Parsing lesson page: {html_path.name}")
        markup = html_path.read_bytes()

        return self.parse_markup(markup, source_path=html_path)
