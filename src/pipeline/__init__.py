"""
Pipeline Module for the Lesson Slicer

Contains the four pipeline steps (Step 0-3) for turning a saved lesson page
into a CSV of sections, plus the slicing session used for manual retagging.
"""

__all__ = []
