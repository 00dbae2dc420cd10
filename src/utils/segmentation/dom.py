"""
DOM Helpers for Lesson Segmentation

Small accessors over BeautifulSoup elements that mirror the browser DOM
properties the segmentation heuristics rely on (element children, inline
style values, underline emphasis, direct text).
"""

import re
from typing import List, Optional

from bs4 import Comment, NavigableString, Tag


IMPORTANT_FLAG = re.compile(r"!\s*important$")


def element_children(element: Tag) -> List[Tag]:
    """Direct element children, text nodes excluded."""
    return [child for child in element.children if isinstance(child, Tag)]


def first_element_child(element: Tag) -> Optional[Tag]:
    for child in element.children:
        if isinstance(child, Tag):
            return child
    return None


def text_content(element: Tag) -> str:
    """Concatenated text of the element and all descendants."""
    return element.get_text()


def direct_text_nodes(element: Tag) -> List[str]:
    """Text nodes owned directly by the element (comments excluded)."""
    return [
        str(child) for child in element.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]


def inline_style(element: Tag, prop: str) -> str:
    """
    Read one property from the element's inline ``style`` attribute.

    Args:
        element: Element to inspect
        prop: CSS property name, e.g. ``text-align``

    Returns:
        Lower-cased property value without any ``!important`` flag, or an
        empty string when not set

    Example:
        >>> inline_style(soup.p, "text-align")  # <p style="TEXT-ALIGN: Center !important">
        'center'
    """
    style = element.get("style")
    if not style:
        return ""

    value = ""
    important = False
    for declaration in style.split(";"):
        name, sep, raw = declaration.partition(":")
        if not sep or name.strip().lower() != prop:
            continue

        raw = raw.strip().lower()
        flagged = IMPORTANT_FLAG.search(raw)
        if flagged:
            raw = raw[:flagged.start()].rstrip()

        # Later declarations win unless an earlier one is important
        if flagged or not important:
            value = raw
            important = important or bool(flagged)
    return value


def is_underlined(element: Tag) -> bool:
    """True for ``<u>`` elements or inline ``text-decoration: underline``."""
    return element.name == "u" or inline_style(element, "text-decoration") == "underline"


def has_image(element: Tag) -> bool:
    return element.find("img") is not None


def class_list(element: Tag) -> List[str]:
    classes = element.get("class")
    if classes is None:
        return []
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


__all__ = [
    "element_children",
    "first_element_child",
    "text_content",
    "direct_text_nodes",
    "inline_style",
    "is_underlined",
    "has_image",
    "class_list",
]
