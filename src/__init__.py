"""
Lesson Slicer

Slices rendered lesson pages into numbered sections (title + body nodes)
and exports each lesson as a flat CSV file for import elsewhere.
"""

__version__ = "0.1.0"
