"""
Export Utilities (Step 3)

Utilities for serializing sections and writing lesson CSV files.
"""

from src.utils.export.section_csv import (
    FIELD_SEPARATOR,
    COMMA_ESCAPE,
    section_unique_id,
    csv_filename,
    section_markup,
    csv_body,
    write_files,
    save_sections,
)

__all__ = [
    'FIELD_SEPARATOR',
    'COMMA_ESCAPE',
    'section_unique_id',
    'csv_filename',
    'section_markup',
    'csv_body',
    'write_files',
    'save_sections',
]
