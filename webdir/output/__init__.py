"""
Output generation module.
Builds the OPML feed list and HTML page, and writes them to disk.
"""

from .html import HTMLTemplateBuilder
from .opml import OPMLTemplateBuilder
from .writer import DocumentWriter

__all__ = [
    'HTMLTemplateBuilder',
    'OPMLTemplateBuilder',
    'DocumentWriter',
]
