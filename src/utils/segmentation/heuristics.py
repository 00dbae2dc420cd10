"""
Heuristic Classification of Lesson Content

Assigns automatic structural tags before grouping, based on fixed textual
and structural signatures of the lesson pages.

Key Functions:
- just_letters: Normalize text to lower-case letters and spaces
- is_introduction: Lesson intro / alternate-format notices (poison)
- is_practice_link: Image links to practice tools (poison)
- is_vocab_header: Underlined vocabulary list headers (poison)
- is_closer: Lesson closers and boilerplate notes (disregard)
- classify_element: Tag one element
- auto_tag: Tag every direct child of the content container
"""

import re
from typing import Dict, Optional

from bs4 import Tag as Element

from src.utils.logging_config import logger
from src.utils.segmentation.dom import (
    element_children,
    first_element_child,
    is_underlined,
    text_content,
)
from src.utils.segmentation.tags import Tag, add_tag


NON_LETTER_PATTERN = re.compile(r'[^a-z ]')

INTRODUCTION_PREFIXES = (
    'introduction',
    'this lesson is also available',
)
INTRODUCTION_MARKER = 'memrise tool'

VOCAB_HEADER_PREFIXES = (
    'nouns',
    'verb',
    'adjectives',
    'adverbs',
    'vocabulary',
)

CLOSER_PREFIXES = (
    'thats it for this lesson',
    'thats it for lesson',
    'okay i got it',
    'click here for a workbook',
    'all entries are linked to an audio file',
)
EXAMPLE_COUNT_PREFIX = 'there are'
EXAMPLE_COUNT_MARKER = 'example sentences in unit'


def just_letters(text: str) -> str:
    """
    Lower-case text and drop everything except a-z and spaces.

    Example:
        >>> just_letters("That's it for Lesson 12!")
        'thats it for lesson '
    """
    return NON_LETTER_PATTERN.sub('', text.lower())


def is_introduction(element: Element) -> bool:
    text = just_letters(text_content(element))

    return (
        text.startswith(INTRODUCTION_PREFIXES)
        or INTRODUCTION_MARKER in text
    )


def is_practice_link(element: Element) -> bool:
    """Non-blank element with a direct ``<a>`` child wrapping an ``<img>``."""
    if text_content(element).strip() == '':
        return False

    for child in element_children(element):
        if child.name == 'a':
            for grandchild in element_children(child):
                if grandchild.name == 'img':
                    return True

    return False


def is_vocab_header(element: Element) -> bool:
    header = first_element_child(element)

    if header is None or not is_underlined(header):
        return False

    return just_letters(text_content(header)).startswith(VOCAB_HEADER_PREFIXES)


def is_closer(element: Element) -> bool:
    text = just_letters(text_content(element))

    if text.startswith(CLOSER_PREFIXES):
        return True

    return text.startswith(EXAMPLE_COUNT_PREFIX) and EXAMPLE_COUNT_MARKER in text


def classify_element(element: Element) -> Optional[Tag]:
    """
    Apply the automatic tag for one element, if any.

    Poison signatures are checked before disregard signatures; an element
    matching neither is left untouched.

    Returns:
        The tag applied, or None
    """
    if is_introduction(element) or is_practice_link(element) or is_vocab_header(element):
        add_tag(element, Tag.POISON)
        return Tag.POISON

    if is_closer(element):
        add_tag(element, Tag.DISREGARD)
        return Tag.DISREGARD

    return None


def auto_tag(content: Element) -> Dict[str, int]:
    """
    Classify every direct child of the content container.

    Args:
        content: Lesson content container

    Returns:
        Counts of elements tagged per tag name, e.g. {'poison': 2, 'disregard': 1}
    """
    counts = {'poison': 0, 'disregard': 0}

    for element in element_children(content):
        applied = classify_element(element)
        if applied is Tag.POISON:
            counts['poison'] += 1
        elif applied is Tag.DISREGARD:
            counts['disregard'] += 1

    logger.debug(
        f"Auto-tagged {counts['poison']} poison and {counts['disregard']} disregard elements"
    )
    return counts


__all__ = [
    'just_letters',
    'is_introduction',
    'is_practice_link',
    'is_vocab_header',
    'is_closer',
    'classify_element',
    'auto_tag',
    'INTRODUCTION_PREFIXES',
    'VOCAB_HEADER_PREFIXES',
    'CLOSER_PREFIXES',
]
