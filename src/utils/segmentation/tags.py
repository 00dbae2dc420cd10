"""
Structural Tag Store

Structural tags are stored as CSS classes on each content element, so the
exported markup carries the same annotations a reviewer saw on the page.

Tags come from two sources:
- automatic heuristics (poison/disregard, see heuristics.py)
- manual retagging, which cycles one element through the fixed rotation
  none -> disregard -> poison -> join -> break -> none
"""

from enum import Enum
from typing import Optional

from bs4 import Tag as Element

from src.utils.segmentation.dom import class_list


class Tag(Enum):
    """Structural annotation carried by a content element."""

    DISREGARD = "section-disregard"
    POISON = "section-poison"
    JOIN = "section-join"
    BREAK = "section-break"

    @property
    def class_name(self) -> str:
        return self.value


# Manual rotation order; None is the untagged state
TAG_ROTATION = (Tag.DISREGARD, Tag.POISON, Tag.JOIN, Tag.BREAK)


def next_tag(current: Optional[Tag]) -> Optional[Tag]:
    """
    Successor of a tag in the manual rotation.

    Example:
        >>> next_tag(None)
        <Tag.DISREGARD: 'section-disregard'>
        >>> next_tag(Tag.BREAK) is None
        True
    """
    if current is None:
        return TAG_ROTATION[0]

    index = TAG_ROTATION.index(current)
    if index + 1 < len(TAG_ROTATION):
        return TAG_ROTATION[index + 1]
    return None


def has_tag(element: Element, tag: Tag) -> bool:
    return tag.class_name in class_list(element)


def add_tag(element: Element, tag: Tag) -> None:
    """Add a tag to the element. Adding a tag it already has is a no-op."""
    classes = class_list(element)
    if tag.class_name not in classes:
        classes.append(tag.class_name)
        element["class"] = classes


def remove_tag(element: Element, tag: Tag) -> None:
    classes = class_list(element)
    if tag.class_name not in classes:
        return

    classes = [name for name in classes if name != tag.class_name]
    if classes:
        element["class"] = classes
    else:
        del element["class"]


def manual_tag(element: Element) -> Optional[Tag]:
    """First tag in rotation order that the element carries, if any."""
    for tag in TAG_ROTATION:
        if has_tag(element, tag):
            return tag
    return None


def cycle_tag(element: Element) -> Optional[Tag]:
    """
    Advance the element's active tag to the next value in the rotation.

    The current tag is removed and its successor added (nothing is added
    after ``break``). An automatic poison/disregard tag counts as the
    current position in the rotation.

    Returns:
        The element's new tag, or None when it is now untagged
    """
    current = manual_tag(element)
    if current is not None:
        remove_tag(element, current)

    successor = next_tag(current)
    if successor is not None:
        add_tag(element, successor)
    return successor


__all__ = [
    "Tag",
    "TAG_ROTATION",
    "next_tag",
    "has_tag",
    "add_tag",
    "remove_tag",
    "manual_tag",
    "cycle_tag",
]
