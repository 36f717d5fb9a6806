"""
SOLID examples.

Small before/after examples for the five SOLID design principles.
"""

__version__ = "0.1.0"
