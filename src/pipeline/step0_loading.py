"""
STEP 0 - PAGE LOADING

Loads a saved lesson page and locates the lesson content.

Process:
1. Validate the HTML file exists
2. Parse the page with BeautifulSoup
3. Locate the content container (#main, three levels down)
4. Read the lesson number from the titlebar
5. Remove scripts, ads and player buttons
6. Attach the lesson number to all following log records

Input: Saved lesson page (HTML file)
Output: LessonPage with content container and lesson number
"""

from pathlib import Path

from src.utils.logging_config import logger, bind_lesson, pipeline_step
from src.parsers import LessonPage, LessonPageError, LessonPageParser


STEP_NAME = "Step 0: Page Loading"


def run(html_path: Path) -> LessonPage:
    """
    Execute Step 0: Page Loading.

    Args:
        html_path: Path to the saved lesson page

    Returns:
        Parsed LessonPage

    Raises:
        FileNotFoundError: If the page file is missing
        StructureError: If the page is not a lesson page
        ParseError: If the lesson number is not numeric
    """
    with pipeline_step(STEP_NAME):
        parser = LessonPageParser()

        try:
            page = parser.parse(html_path)
        except LessonPageError as e:
            logger.error(f"❌ Not a lesson page: {e}")
            raise

        bind_lesson(page.lesson_number)

        node_count = len(page.content.find_all(recursive=False))
        logger.success(f"✓ Lesson {page.lesson_number}: {node_count} content nodes")

    return page
