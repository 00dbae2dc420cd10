"""
STEP 2 - SECTION SEGMENTATION

Groups the tagged content nodes into numbered sections.

Process:
1. Skip tertiary headings
2. Open a new section at every title or break (titles start a supersection)
3. Strip disregarded nodes and drop poisoned sections
4. Log statistics (section, supersection and titled-section counts)

Input: Tagged LessonPage (from Step 1, optionally manually retagged)
Output: Ordered list of finalized sections
"""

from typing import List, Sequence

from src.utils.logging_config import logger, pipeline_step
from src.parsers import LessonPage
from src.utils.segmentation import Section, parse_sections


STEP_NAME = "Step 2: Section Segmentation"


def log_section_statistics(sections: Sequence[Section]) -> None:
    """Log counts and a one-line outline per section."""
    supersections = {section.supersection for section in sections}
    titled = sum(1 for section in sections if section.title_element is not None)

    logger.info(f"  - Sections: {len(sections)}")
    logger.info(f"  - Supersections: {len(supersections)}")
    logger.info(f"  - Titled sections: {titled}")

    for section in sections:
        title = section.title_element.get_text(" ", strip=True) if section.title_element is not None else "-"
        logger.debug(
            f"    {section.supersection}-{section.subsection}: "
            f"{title[:40]} ({len(section.body_elements)} body nodes)"
        )


def run(page: LessonPage) -> List[Section]:
    """
    Execute Step 2: Section Segmentation.

    Returns:
        Finalized sections in document order
    """
    with pipeline_step(STEP_NAME):
        sections = parse_sections(page.content)

        if not sections:
            logger.warning("⚠ No sections found in lesson content")
        else:
            logger.success(f"✓ Built {len(sections)} sections")
            log_section_statistics(sections)

    return sections
