"""
HTML template builder.
Renders the directory page, one section per entry.
"""

from datetime import datetime
from html import escape
from typing import List, Optional, Sequence

from ..models import DirectoryConfig, Entry
from ..utils import URLValidator, format_timestamp, get_logger


DISCLAIMER = (
    "This is an unofficial, community maintained directory of personal "
    "websites. It is not affiliated with Hacker News or Y Combinator. "
    "Listed websites are owned and run by their authors."
)


class HTMLTemplateBuilder:
    """
    Builds the static directory page.
    Head, footer and assets are fixed; only sections vary with the entries.
    """

    def __init__(self, config: Optional[DirectoryConfig] = None):
        self.config = config or DirectoryConfig()
        self.logger = get_logger()

    def _link(self, url: str, text: str) -> str:
        """Build an anchor with escaped href and text."""
        return f'<a href="{escape(url)}">{escape(text)}</a>'

    def build_nav(self, entry: Entry) -> List[str]:
        """
        Build the navigation links of an entry.
        Website always comes first; the rest follow with a "|" separator.
        """
        links = [
            ("Website", entry.site),
            ("Blog", entry.blog),
            ("About", entry.about),
            ("Now", entry.now),
            ("Feed", entry.feed),
        ]
        if entry.hnuid is not None:
            links.append(("HN", self.config.hn_profile_url + entry.hnuid))

        lines = []
        for label, url in links:
            if url is None:
                continue
            prefix = "" if label == "Website" else "| "
            lines.append(f"      {prefix}{self._link(url, label)}")
        return lines

    def build_section(self, entry: Entry) -> str:
        """Build the section for a single entry."""
        host = URLValidator.get_host(entry.site)

        lines = [
            '  <section>',
            f'    <h2>{escape(entry.name)}</h2>',
            f'    <p class="site">{self._link(entry.site, host)}</p>',
            '    <nav>',
        ]
        lines.extend(self.build_nav(entry))
        lines.append('    </nav>')

        if entry.bio is not None:
            lines.append(f'    <p class="bio">{escape(entry.bio)}</p>')

        lines.append('  </section>')
        return "\n".join(lines)

    def build_head(self) -> List[str]:
        """Build the fixed document head and page heading."""
        title = escape(self.config.title)
        return [
            '<!DOCTYPE html>',
            '<html lang="en">',
            '<head>',
            f'  <title>{title}</title>',
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1">',
            '  <link rel="stylesheet" href="style.css">',
            '  <link rel="icon" type="image/png" href="favicon.png">',
            '  <script src="script.js"></script>',
            '</head>',
            '<body>',
            f'<h1>{title}</h1>',
        ]

    def build_footer(self, now: Optional[datetime] = None) -> List[str]:
        """Build the footer with static links and the generation time."""
        nav = " | ".join([
            self._link(self.config.readme_url, "README"),
            self._link(self.config.opml_file, "OPML"),
            self._link(self.config.irc_url, "IRC"),
        ])
        return [
            '<footer>',
            f'  <nav>{nav}</nav>',
            f'  <p>{DISCLAIMER}</p>',
            f'  <p class="updated">Last updated on {format_timestamp(now)}.</p>',
            '</footer>',
            '</body>',
            '</html>',
        ]

    def build(self, entries: Sequence[Entry], now: Optional[datetime] = None) -> str:
        """
        Build the full HTML document.

        Raises:
            MalformedURLError: an entry site has no scheme
        """
        lines = self.build_head()

        count = len(entries)
        noun = "entry" if count == 1 else "entries"
        lines.append(f'<p class="count">{count} {noun}</p>')

        lines.append('<main>')
        for entry in entries:
            lines.append(self.build_section(entry))
        lines.append('</main>')

        lines.extend(self.build_footer(now))

        self.logger.debug(f"Built HTML with {count} section(s)")
        return "\n".join(lines) + "\n"
