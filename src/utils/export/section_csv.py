"""
Section CSV Export (Step 3)

Serializes finalized sections into one flat record per line and writes the
records to lesson-<id>.csv files.

Record format:
    "<id>-<supersection>-<subsection>, <markup>, <id>, <position>"

where <markup> is the outer HTML of the title element (if any) followed by
every body element, with newlines removed and commas escaped as ``&#44;``.
"""

import time
from pathlib import Path
from typing import List, Sequence

from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from src.config import EXPORT_ENCODING, EXPORT_FILENAME_TEMPLATE
from src.utils.logging_config import logger
from src.utils.segmentation.section_builder import Section, all_elements


FIELD_SEPARATOR = ", "
COMMA_ESCAPE = "&#44;"

# Browser outerHTML style: minimal escaping, void elements written as <br>
OUTER_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def section_unique_id(lesson_number: int, section: Section) -> str:
    """
    Key of a section within the whole course.

    Example:
        >>> section_unique_id(12, Section(2, 0, None, (p,)))
        '12-2-0'
    """
    return f"{lesson_number}-{section.supersection}-{section.subsection}"


def csv_filename(lesson_number: int) -> str:
    return EXPORT_FILENAME_TEMPLATE.format(lesson_number=lesson_number)


def section_markup(section: Section) -> str:
    """Concatenated outer HTML of the section, flattened and comma-escaped."""
    markup = "".join(
        element.decode(formatter=OUTER_HTML_FORMATTER) for element in all_elements(section)
    )
    return markup.replace("\n", "").replace(",", COMMA_ESCAPE)


def csv_body(lesson_number: int, sections: Sequence[Section]) -> str:
    """
    Serialize sections into newline-joined records.

    Args:
        lesson_number: Lesson identifier
        sections: Finalized sections in output order

    Returns:
        One record per section; positions are 1-based
    """
    return "\n".join(
        FIELD_SEPARATOR.join([
            section_unique_id(lesson_number, section),
            section_markup(section),
            str(lesson_number),
            str(position),
        ])
        for position, section in enumerate(sections, 1)
    )


def write_files(files: Sequence[tuple], export_dir: Path, write_delay: float) -> List[Path]:
    """
    Write (filename, content) pairs, pausing after each write.

    Args:
        files: Sequence of (filename, content) tuples
        export_dir: Directory to write into (created if missing)
        write_delay: Seconds to sleep after each write

    Returns:
        Paths of the written files
    """
    export_dir.mkdir(parents=True, exist_ok=True)
    written = []

    for filename, content in files:
        path = export_dir / filename
        with open(path, 'w', encoding=EXPORT_ENCODING) as f:
            f.write(content)
        logger.info(f"Wrote {path}")
        written.append(path)

        if write_delay > 0:
            time.sleep(write_delay)

    return written


def save_sections(
    lesson_number: int,
    sections: Sequence[Section],
    export_dir: Path,
    write_delay: float = 0.0,
) -> Path:
    """
    Export the sections of one lesson to lesson-<id>.csv.

    Returns:
        Path of the written CSV file
    """
    written = write_files(
        [(csv_filename(lesson_number), csv_body(lesson_number, sections))],
        export_dir,
        write_delay,
    )
    return written[0]


__all__ = [
    "FIELD_SEPARATOR",
    "COMMA_ESCAPE",
    "section_unique_id",
    "csv_filename",
    "section_markup",
    "csv_body",
    "write_files",
    "save_sections",
]
