"""
OPML template builder.
Lists every entry that has a feed as an OPML 2.0 outline.
"""

from datetime import datetime
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape, quoteattr

from ..models import Entry
from ..utils import PROJECT_EPOCH, format_timestamp, get_logger


class OPMLTemplateBuilder:
    """Builds the OPML feed list."""

    def __init__(self, title: str = "HN Personal Websites"):
        self.title = title
        self.logger = get_logger()

    @staticmethod
    def has_outline(entry: Entry) -> bool:
        """Only entries with a name, feed and site get an outline."""
        return None not in (entry.name, entry.feed, entry.site)

    def build_outline(self, entry: Entry) -> str:
        """Build a single outline element."""
        return (
            f'    <outline type="rss"'
            f' text={quoteattr(entry.name)}'
            f' title={quoteattr(entry.name)}'
            f' xmlUrl={quoteattr(entry.feed)}'
            f' htmlUrl={quoteattr(entry.site)}/>'
        )

    def build(self, entries: Sequence[Entry], now: Optional[datetime] = None) -> str:
        """
        Build the full OPML document.

        The count comment reports every entry passed in, not only
        the ones that got an outline.
        """
        lines: List[str] = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<opml version="2.0">',
            '  <head>',
            f'    <title>{escape(self.title)}</title>',
            f'    <dateCreated>{format_timestamp(PROJECT_EPOCH)}</dateCreated>',
            f'    <dateModified>{format_timestamp(now)}</dateModified>',
            '  </head>',
            '  <body>',
            f'    <!-- {len(entries)} entries -->',
        ]

        outlines = [self.build_outline(entry) for entry in entries if self.has_outline(entry)]
        lines.extend(outlines)

        lines.append('  </body>')
        lines.append('</opml>')

        self.logger.debug(f"Built OPML with {len(outlines)} outline(s)")
        return "\n".join(lines) + "\n"
