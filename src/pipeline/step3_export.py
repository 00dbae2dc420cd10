"""
STEP 3 - CSV EXPORT

Serializes the sections of one lesson and writes them to lesson-<id>.csv.

Input: Lesson number and finalized sections (from Step 2)
Output: data/exports/lesson-<id>.csv (or the configured export directory)
"""

from pathlib import Path
from typing import Optional, Sequence

from src.config import EXPORTS_DIR, EXPORT_WRITE_DELAY
from src.utils.logging_config import logger, pipeline_step
from src.utils.export import csv_body, save_sections
from src.utils.segmentation import Section


STEP_NAME = "Step 3: CSV Export"


def run(
    lesson_number: int,
    sections: Sequence[Section],
    export_dir: Optional[Path] = None,
    dry_run: bool = False,
) -> Optional[Path]:
    """
    Execute Step 3: CSV Export.

    Args:
        lesson_number: Lesson identifier
        sections: Finalized sections
        export_dir: Output directory (defaults to EXPORTS_DIR)
        dry_run: Log the records instead of writing them

    Returns:
        Path of the written CSV file, or None on a dry run
    """
    with pipeline_step(STEP_NAME):
        if dry_run:
            logger.info("Dry run, CSV not written:")
            for line in csv_body(lesson_number, sections).splitlines():
                logger.info(f"  {line}")
            return None

        path = save_sections(
            lesson_number,
            sections,
            export_dir or EXPORTS_DIR,
            write_delay=EXPORT_WRITE_DELAY,
        )
        logger.success(f"✓ Saved {len(sections)} sections to {path}")

    return path
