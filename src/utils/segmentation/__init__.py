"""
Segmentation Utilities (Step 1-2)

Utilities for tagging lesson content and grouping it into sections.
"""

from src.utils.segmentation.tags import (
    Tag,
    TAG_ROTATION,
    next_tag,
    has_tag,
    add_tag,
    remove_tag,
    manual_tag,
    cycle_tag,
)

from src.utils.segmentation.heuristics import (
    just_letters,
    is_introduction,
    is_practice_link,
    is_vocab_header,
    is_closer,
    classify_element,
    auto_tag,
)

from src.utils.segmentation.roles import (
    is_ignore,
    is_title,
    is_break,
)

from src.utils.segmentation.section_builder import (
    Section,
    BuildingSection,
    all_elements,
    finalize_section,
    parse_sections_from_nodes,
    parse_sections,
)

__all__ = [
    # tags
    'Tag',
    'TAG_ROTATION',
    'next_tag',
    'has_tag',
    'add_tag',
    'remove_tag',
    'manual_tag',
    'cycle_tag',
    # heuristics
    'just_letters',
    'is_introduction',
    'is_practice_link',
    'is_vocab_header',
    'is_closer',
    'classify_element',
    'auto_tag',
    # roles
    'is_ignore',
    'is_title',
    'is_break',
    # section_builder
    'Section',
    'BuildingSection',
    'all_elements',
    'finalize_section',
    'parse_sections_from_nodes',
    'parse_sections',
]
