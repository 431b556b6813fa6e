"""
Build driver for the directory generator.
Coordinates loading, validation, rendering and output.
"""

from datetime import datetime
from typing import List, Optional

from .loader import EntryLoader
from .models import BuildResult, DirectoryConfig, Entry
from .output import DocumentWriter, HTMLTemplateBuilder, OPMLTemplateBuilder
from .utils import get_logger, utc_now, validate_entries


def load_and_validate(config: DirectoryConfig) -> List[Entry]:
    """
    Load entries from the data file and run every editorial check.

    Raises:
        DataFormatError: the data file cannot be parsed
        EntryValidationError: an entry breaks a rule
    """
    logger = get_logger()

    entries = EntryLoader().load_file(config.data_file)

    logger.debug("Validating entries...")
    validate_entries(entries)
    logger.success(f"Validated {len(entries)} entries")

    return entries


def run_build(config: DirectoryConfig, now: Optional[datetime] = None) -> BuildResult:
    """
    Run a full build: load, validate, render both documents, write them.

    Both documents are rendered before either is written, so any failure
    leaves the output directory untouched.

    Args:
        config: Build configuration
        now: Generation time (defaults to the current UTC time)

    Returns:
        BuildResult summary
    """
    logger = get_logger()
    logger.print_header(config.title)

    entries = load_and_validate(config)

    # Both documents share one generation timestamp
    now = now or utc_now()

    logger.print_section("Rendering")
    opml_builder = OPMLTemplateBuilder(title=config.title)
    html_builder = HTMLTemplateBuilder(config)

    opml = opml_builder.build(entries, now=now)
    html = html_builder.build(entries, now=now)

    writer = DocumentWriter(config.output_dir)
    written = [
        writer.write(config.opml_file, opml),
        writer.write(config.html_file, html),
    ]

    result = BuildResult(
        entries=len(entries),
        outlines=sum(1 for entry in entries if OPMLTemplateBuilder.has_outline(entry)),
        written=[str(path) for path in written],
    )

    logger.print_summary(
        entries=result.entries,
        outlines=result.outlines,
        written=result.written,
    )

    return result
