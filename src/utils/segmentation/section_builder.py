"""
Section Builder for Lesson Segmentation

Folds the ordered sequence of content elements into numbered sections.

Each section has a supersection number (incremented by titles), a subsection
number (reset by titles, incremented by breaks), an optional title element
and one or more body elements.

Key Functions:
- all_elements: Title followed by body elements of a section
- finalize_section: Resolve disregard/poison tags on a building section
- start_section: Open the next building section at a boundary
- parse_sections_from_nodes: Run the grouping over an element sequence
- parse_sections: Run the grouping over a content container
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from bs4 import Tag as Element

from src.utils.logging_config import logger
from src.utils.segmentation.dom import element_children
from src.utils.segmentation.roles import is_break, is_ignore, is_title
from src.utils.segmentation.tags import Tag, has_tag


# Numbering of the building section open at the start of a page
INITIAL_SUPERSECTION = 0
INITIAL_SUBSECTION = 1


@dataclass(frozen=True)
class Section:
    """
    Finalized section.

    Invariant: body_elements is never empty, and no element in the section
    carries a disregard or poison tag at the time it was finalized.
    """

    supersection: int
    subsection: int
    title_element: Optional[Element]
    body_elements: Tuple[Element, ...]


@dataclass
class BuildingSection:
    """Section under construction; the body may still be empty."""

    supersection: int = INITIAL_SUPERSECTION
    subsection: int = INITIAL_SUBSECTION
    title_element: Optional[Element] = None
    body_elements: List[Element] = field(default_factory=list)


def all_elements(section: Section) -> List[Element]:
    if section.title_element is None:
        return list(section.body_elements)
    return [section.title_element, *section.body_elements]


def finalize_section(building: BuildingSection) -> Optional[Section]:
    """
    Convert a building section into a finalized Section.

    Steps:
    1. Empty body -> discarded
    2. Disregarded title is dropped, disregarded body elements removed
    3. Empty body after stripping -> discarded
    4. Poisoned title or any poisoned body element -> discarded

    The building section itself is left unchanged.

    Returns:
        Finalized Section, or None if discarded
    """
    if not building.body_elements:
        return None

    title = building.title_element
    if title is not None and has_tag(title, Tag.DISREGARD):
        title = None

    body = tuple(
        element for element in building.body_elements
        if not has_tag(element, Tag.DISREGARD)
    )

    if not body:
        return None

    if title is not None and has_tag(title, Tag.POISON):
        logger.debug(
            f"Dropping section {building.supersection}-{building.subsection}: poisoned title"
        )
        return None

    if any(has_tag(element, Tag.POISON) for element in body):
        logger.debug(
            f"Dropping section {building.supersection}-{building.subsection}: poisoned body"
        )
        return None

    return Section(
        supersection=building.supersection,
        subsection=building.subsection,
        title_element=title,
        body_elements=body,
    )


def start_section(previous: BuildingSection, element: Element, title: bool) -> BuildingSection:
    """
    Open the building section that follows a boundary element.

    A title starts the next supersection and becomes the new title. Any
    other boundary continues the current supersection and carries the
    previous title over. Only ``break``-tagged elements are kept as the
    first body element; dividers are consumed as separators.
    """
    if title:
        return BuildingSection(
            supersection=previous.supersection + 1,
            subsection=0,
            title_element=element,
            body_elements=[],
        )

    return BuildingSection(
        supersection=previous.supersection,
        subsection=previous.subsection + 1,
        title_element=previous.title_element,
        body_elements=[element] if has_tag(element, Tag.BREAK) else [],
    )


def parse_sections_from_nodes(elements: Iterable[Element]) -> List[Section]:
    """
    Group content elements into sections.

    Tags on the elements are only read, never written, so running the
    grouping repeatedly over the same elements yields the same sections.

    Args:
        elements: Content elements in document order

    Returns:
        Finalized sections in document order (empty for empty input)
    """
    sections: List[Section] = []
    building = BuildingSection()
    previous_title = False

    def save(candidate: BuildingSection) -> None:
        section = finalize_section(candidate)
        if section is not None:
            sections.append(section)

    for element in elements:
        if is_ignore(element):
            continue

        title = is_title(element)
        breaking = is_break(element)

        if (title or breaking) and not previous_title:
            save(building)
            building = start_section(building, element, title)
        else:
            building.body_elements.append(element)

        previous_title = title

    # save the last section
    save(building)

    return sections


def parse_sections(content: Element) -> List[Section]:
    """Group the direct element children of a content container."""
    return parse_sections_from_nodes(element_children(content))


__all__ = [
    'Section',
    'BuildingSection',
    'INITIAL_SUPERSECTION',
    'INITIAL_SUBSECTION',
    'all_elements',
    'finalize_section',
    'start_section',
    'parse_sections_from_nodes',
    'parse_sections',
]
