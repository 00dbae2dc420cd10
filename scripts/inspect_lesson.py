#!/usr/bin/env python3
"""
Lesson page inspection script.

Lists every content node of a saved lesson page with its index, tags and
detected role, followed by the resulting sections. Use the indexes with
`python -m src.main slice PAGE --retag N`.
"""

import sys
import argparse
from pathlib import Path

# Add project root to path for proper module resolution
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.parsers import LessonPageError, LessonPageParser
from src.utils.logging_config import logger
from src.utils.segmentation import (
    TAG_ROTATION,
    auto_tag,
    has_tag,
    is_break,
    is_ignore,
    is_title,
    parse_sections,
)
from src.utils.segmentation.dom import element_children


def describe_role(element) -> str:
    if is_ignore(element):
        return "ignored"
    if is_title(element):
        return "title"
    if is_break(element):
        return "break"
    return "body"


def inspect_lesson(page_path: Path) -> int:
    """
    Print nodes and sections of one lesson page.

    Returns:
        Process exit code
    """
    try:
        page = LessonPageParser().parse(page_path)
    except (LessonPageError, FileNotFoundError) as e:
        logger.error(f"Cannot inspect {page_path}: {e}")
        return 1

    auto_tag(page.content)

    logger.info("=" * 80)
    logger.info(f"LESSON {page.lesson_number}: {page_path.name}")
    logger.info("=" * 80)

    logger.info("NODES:")
    for index, element in enumerate(element_children(page.content)):
        tags = ",".join(tag.name.lower() for tag in TAG_ROTATION if has_tag(element, tag)) or "-"
        text = element.get_text(" ", strip=True)
        logger.info(f"  [{index:3d}] <{element.name}> {describe_role(element):<7} {tags:<10} {text[:50]}")
    logger.info("")

    sections = parse_sections(page.content)
    logger.info(f"SECTIONS ({len(sections)}):")
    for position, section in enumerate(sections, 1):
        title = section.title_element.get_text(" ", strip=True) if section.title_element is not None else "-"
        logger.info(
            f"  {position:3d}. {section.supersection}-{section.subsection} "
            f"{title[:40]} ({len(section.body_elements)} body nodes)"
        )

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inspect the nodes and sections of a lesson page")
    parser.add_argument("page", type=Path, help="Saved lesson page (HTML)")
    args = parser.parse_args()

    sys.exit(inspect_lesson(args.page))
