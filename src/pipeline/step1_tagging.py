"""
STEP 1 - AUTOMATIC TAGGING

Applies the heuristic classifier to every content node, tagging lesson
introductions, practice links and vocabulary headers as poison and lesson
closers as disregard.

Input: LessonPage (from Step 0)
Output: Content nodes carrying automatic tags (in place)
"""

from typing import Dict

from src.utils.logging_config import logger, pipeline_step
from src.parsers import LessonPage
from src.utils.segmentation import auto_tag


STEP_NAME = "Step 1: Automatic Tagging"


def run(page: LessonPage) -> Dict[str, int]:
    """
    Execute Step 1: Automatic Tagging.

    Returns:
        Counts of nodes tagged poison and disregard
    """
    with pipeline_step(STEP_NAME):
        counts = auto_tag(page.content)

        logger.success(
            f"✓ Tagged {counts['poison']} poison and {counts['disregard']} disregard nodes"
        )

    return counts
