"""
Personal website directory generator.
Validates directory entries and builds the HTML page and OPML feed list.
"""

__version__ = '1.0.0'
