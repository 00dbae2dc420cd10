"""
Test Helper Utilities

Provides builders for lesson page markup and content containers, and
helpers for summarizing section lists in assertions.
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from src.utils.segmentation import Section


CONTENT_ID = "content"

# Content nodes of a typical lesson page:
#   0 intro (poison), 1 title, 2 body, 3 divider, 4 body, 5 tertiary heading,
#   6 closer (disregard)
SAMPLE_LESSON_BODY = (
    "<p>Introduction to lesson 12</p>"
    "<p><u>Greetings</u></p>"
    "<p>Hello, friend</p>"
    "<hr/>"
    "<p>Goodbye</p>"
    "<h3>Extra</h3>"
    "<p>That's it for this lesson!</p>"
)


def content_from(body_html: str) -> Tag:
    """
    Parse a fragment of block nodes into a content container.

    Example:
        >>> content = content_from("<p>cat</p><hr/><p>dog</p>")
        >>> len(content.find_all(recursive=False))
        3
    """
    soup = BeautifulSoup(f'<div id="{CONTENT_ID}">{body_html}</div>', "html.parser")
    return soup.find(id=CONTENT_ID)


def element_from(html: str) -> Tag:
    """Parse a single element."""
    return content_from(html).find(recursive=False)


def lesson_page_markup(body_html: str, title: Optional[str] = "Lesson 12: Verbs") -> str:
    """
    Build a full lesson page around the given content nodes.

    Args:
        body_html: Markup of the content container's children
        title: Titlebar text, or None for a page without titlebar
    """
    titlebar = "" if title is None else (
        f'<div id="page-titlebar"><div><h1>{title}</h1></div></div>'
    )
    return (
        "<html><head><title>Lesson</title></head><body>"
        f"{titlebar}"
        '<div id="main"><div><div><div class="entry-content">'
        f"{body_html}"
        "</div></div></div></div>"
        "</body></html>"
    )


def text_of(element: Optional[Tag]) -> Optional[str]:
    if element is None:
        return None
    return element.get_text(" ", strip=True)


def section_outline(sections: List[Section]) -> List[Tuple[int, int, Optional[str], List[str]]]:
    """
    Summarize sections as (supersection, subsection, title text, body texts).

    Example:
        >>> section_outline(parse_sections(content))
        [(1, 0, 'Nouns', ['cat', 'dog'])]
    """
    return [
        (
            section.supersection,
            section.subsection,
            text_of(section.title_element),
            [text_of(element) for element in section.body_elements],
        )
        for section in sections
    ]
