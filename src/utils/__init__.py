"""
Utilities Module for the Lesson Slicer

Organized by pipeline step for clarity and maintainability.

Structure:
- logging_config.py: Shared logging utilities
- segmentation/: Step 1-2 utilities (tags, heuristics, roles, section building)
- export/: Step 3 utilities (CSV serialization and file writing)
"""

# Re-export logging utilities at top level
from src.utils.logging_config import setup_logger, bind_lesson, pipeline_step, logger

__all__ = [
    "setup_logger",
    "bind_lesson",
    "pipeline_step",
    "logger",
]
