"""
Slicing Session

Holds one lesson's content container together with its latest sections and
supports manual retagging: each retag cycles one node's tag and re-runs the
full grouping over the content. Automatic classification is not re-run.
"""

from typing import List, Optional

from bs4 import Tag as Element

from src.utils.logging_config import logger
from src.utils.segmentation import Section, Tag, cycle_tag, parse_sections
from src.utils.segmentation.dom import element_children


class SlicingSession:
    """
    Section state for one lesson page.

    Example:
        >>> session = SlicingSession(page.content)
        >>> session.find_sections()
        >>> session.retag_index(4)   # node 4 now disregarded
        >>> len(session.sections)
    """

    def __init__(self, content: Element):
        self.content = content
        self.sections: List[Section] = []

    def find_sections(self) -> List[Section]:
        self.sections = parse_sections(self.content)
        logger.debug(f"Found {len(self.sections)} sections")
        return self.sections

    def retag(self, element: Element) -> Optional[Tag]:
        """
        Cycle the manual tag of a content node and regroup.

        Nodes that are not direct children of the content container are
        ignored.

        Returns:
            The node's new tag (None when cleared or ignored)
        """
        if element.parent is not self.content:
            logger.debug(f"Ignoring retag of <{element.name}> outside the content container")
            return None

        new_tag = cycle_tag(element)
        logger.info(
            f"Retagged <{element.name}> as {new_tag.name.lower() if new_tag else 'untagged'}"
        )

        self.find_sections()
        return new_tag

    def retag_index(self, index: int) -> Optional[Tag]:
        """
        Cycle the manual tag of the n-th content node and regroup.

        Raises:
            IndexError: If no content node has this index
        """
        children = element_children(self.content)
        if not 0 <= index < len(children):
            raise IndexError(
                f"Content node {index} out of range (lesson has {len(children)} nodes)"
            )
        return self.retag(children[index])
