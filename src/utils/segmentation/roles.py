"""
Structural Role Detection

Stateless predicates evaluated for every content element during grouping.
Unlike poison/disregard, roles are never stored as tags; they are derived
fresh on each segmentation run so manual retagging is always reflected.
"""

from bs4 import Tag as Element

from src.utils.segmentation.dom import (
    direct_text_nodes,
    element_children,
    has_image,
    inline_style,
    is_underlined,
    text_content,
)
from src.utils.segmentation.tags import Tag, has_tag


DIVIDER_KIND = 'hr'
IGNORED_KIND = 'h3'


def is_ignore(element: Element) -> bool:
    """Tertiary headings are skipped entirely during grouping."""
    return element.name == IGNORED_KIND


def is_title(element: Element) -> bool:
    """
    Detect a section title.

    Titles consist only of child elements (no bare text of their own) and
    have at least one non-blank underlined child. A ``join`` tag suppresses
    the title role.
    """
    if has_tag(element, Tag.JOIN):
        return False

    # titles only contain spans, no immediate text
    if any(text.strip() != '' for text in direct_text_nodes(element)):
        return False

    for child in element_children(element):
        if text_content(child).strip() != '' and is_underlined(child):
            return True

    return False


def is_centered(element: Element) -> bool:
    text_align = inline_style(element, 'text-align')
    if text_align == 'left':
        return False

    legacy_align = (element.get('align') or '').strip().lower()
    return text_align == 'center' or legacy_align == 'center'


def is_break(element: Element) -> bool:
    """
    Detect a section break.

    Dividers and ``break``-tagged elements always break; elements holding
    images never do; otherwise centered or blank elements break. A ``join``
    tag suppresses the break role.
    """
    if has_tag(element, Tag.JOIN):
        return False

    if element.name == DIVIDER_KIND or has_tag(element, Tag.BREAK):
        return True

    # images are part of the section
    if has_image(element):
        return False

    if is_centered(element):
        return True

    return text_content(element).strip() == ''


__all__ = [
    'is_ignore',
    'is_title',
    'is_centered',
    'is_break',
]
