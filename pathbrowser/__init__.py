"""
pathbrowser: cross-platform file paths and include-path file lookup.
"""

__version__ = "0.1.0"
