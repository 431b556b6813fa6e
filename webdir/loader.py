"""
Entry loader.
Reads raw records from the YAML data file and turns them into Entry models.
"""

from pathlib import Path
from typing import Any, List, Sequence
import yaml
from pydantic import ValidationError

from .errors import DataFormatError
from .models import Entry
from .utils import get_logger


# A record holding only this key marks the end of the list
SENTINEL_KEY = 'end'


class EntryLoader:
    """
    Loads directory entries from raw records.
    Drops the end-of-list sentinel and placeholder records with an empty site.
    """

    def __init__(self):
        self.logger = get_logger()

    @staticmethod
    def is_sentinel(record: Any) -> bool:
        """Check if a record is the end-of-list marker."""
        return isinstance(record, dict) and set(record) == {SENTINEL_KEY}

    @staticmethod
    def is_placeholder(record: dict) -> bool:
        """Check if a record is a placeholder with an empty site."""
        return record.get('site') == ''

    def load(self, records: Sequence[Any]) -> List[Entry]:
        """
        Build entries from raw records, keeping source order.

        Raises:
            DataFormatError: a record is not a mapping or does not fit Entry
        """
        entries = []

        for index, record in enumerate(records):
            if self.is_sentinel(record):
                self.logger.debug(f"Skipping end marker at record {index}")
                continue

            if not isinstance(record, dict):
                raise DataFormatError(
                    f"Record {index} is not a mapping: {record!r}"
                )

            if self.is_placeholder(record):
                self.logger.debug(f"Skipping placeholder record {index}")
                continue

            try:
                entries.append(Entry(**record))
            except (ValidationError, TypeError) as e:
                raise DataFormatError(f"Record {index} is invalid: {e}") from e

        self.logger.debug(f"Loaded {len(entries)} of {len(records)} record(s)")
        return entries

    def load_file(self, data_file: str) -> List[Entry]:
        """
        Parse a YAML data file and load its entries.

        Raises:
            DataFormatError: the file is missing, unreadable, or not a list
        """
        path = Path(data_file)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = yaml.safe_load(f)
        except OSError as e:
            raise DataFormatError(f"Cannot read data file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise DataFormatError(f"Cannot parse data file {path}: {e}") from e

        if not isinstance(records, list):
            raise DataFormatError(
                f"Data file {path} must hold a list of records"
            )

        self.logger.info(f"Read {len(records)} record(s) from {path}")
        return self.load(records)
