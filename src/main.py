"""
Lesson Slicer Main Entry Point

Provides the CLI for slicing a saved lesson page into sections and exporting
them as CSV. Initializes logging on startup and runs the pipeline steps in
order.

Usage:
    python -m src.main slice pages/lesson-12.html
    python -m src.main slice pages/lesson-12.html --retag 3 --retag 7 --dry-run
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from src.config import ConfigurationError, print_configuration
from src.parsers import LessonPageError
from src.utils.logging_config import logger, setup_logger
from src.pipeline.session import SlicingSession
from src.pipeline.step0_loading import run as run_step0
from src.pipeline.step1_tagging import run as run_step1
from src.pipeline.step2_segmentation import log_section_statistics, run as run_step2
from src.pipeline.step3_export import run as run_step3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lesson-slicer",
        description="Slice lesson pages into numbered sections and export them as CSV.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    slice_parser = subparsers.add_parser("slice", help="Slice one saved lesson page")
    slice_parser.add_argument("page", type=Path, help="Saved lesson page (HTML)")
    slice_parser.add_argument(
        "--retag",
        type=int,
        action="append",
        default=[],
        metavar="N",
        help="Cycle the manual tag of content node N before export (repeatable)",
    )
    slice_parser.add_argument("--export-dir", type=Path, help="Directory for lesson CSV files")
    slice_parser.add_argument("--dry-run", action="store_true", help="Log the CSV instead of writing it")

    subparsers.add_parser("config", help="Print the current configuration")

    return parser


def slice_page(page_path: Path, retag: List[int], export_dir: Optional[Path], dry_run: bool) -> Optional[Path]:
    """Run all steps for one lesson page."""
    page = run_step0(page_path)
    run_step1(page)
    sections = run_step2(page)

    if retag:
        session = SlicingSession(page.content)
        for index in retag:
            session.retag_index(index)
        sections = session.sections
        log_section_statistics(sections)

    return run_step3(page.lesson_number, sections, export_dir=export_dir, dry_run=dry_run)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Lesson Slicer.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "config":
        print_configuration()
        return 0

    run_log = setup_logger(args.page)

    logger.info(f"Lesson Slicer: {args.page} (log: {run_log.name})")

    try:
        slice_page(args.page, args.retag, args.export_dir, args.dry_run)
    except (LessonPageError, ConfigurationError, FileNotFoundError, IndexError) as e:
        logger.error(f"Slicing failed: {e}")
        logger.exception("Full traceback:")
        return 1

    logger.success("Lesson sliced successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
