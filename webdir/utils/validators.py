"""
Editorial rules for directory entries.
"""

from typing import List, Optional, Sequence, Tuple

from ..errors import (
    BioFormatError,
    DuplicateURLError,
    MalformedURLError,
    OrderingError,
)
from ..models import Entry


BIO_MAX_LENGTH = 80


class NameOrderValidator:
    """Checks that entries are sorted by name."""

    @staticmethod
    def find_out_of_order(entries: Sequence[Entry]) -> Optional[Entry]:
        """
        Return the first entry whose name sorts before the previous one.

        Comparison is plain ordinal string comparison, so it is
        case-sensitive and equal names are allowed.
        """
        for previous, current in zip(entries, entries[1:]):
            if current.name < previous.name:
                return current
        return None

    @staticmethod
    def validate(entries: Sequence[Entry]):
        entry = NameOrderValidator.find_out_of_order(entries)
        if entry is not None:
            raise OrderingError(entry.name, "entries must be sorted alphabetically by name")


class URLValidator:
    """Checks and takes apart entry URLs."""

    @staticmethod
    def find_duplicate(urls: List[str]) -> Optional[str]:
        """Return the first URL that appears more than once."""
        seen = set()
        for url in urls:
            if url in seen:
                return url
            seen.add(url)
        return None

    @staticmethod
    def validate(entries: Sequence[Entry]):
        for entry in entries:
            duplicate = URLValidator.find_duplicate(entry.urls())
            if duplicate is not None:
                raise DuplicateURLError(entry.name, f"duplicate URL {duplicate}")

    @staticmethod
    def get_host(url: str) -> str:
        """
        Extract the display host from a URL.

        "https://www.example.com/page" -> "example.com"
        """
        index = url.find('://')
        if index == -1:
            raise MalformedURLError(f"URL has no scheme: {url!r}")

        rest = url[index + 3:]
        end = rest.find('/')
        host = rest if end == -1 else rest[:end]

        if host.startswith('www.'):
            host = host[4:]
        return host


class BioValidator:
    """Checks bio text rules."""

    @staticmethod
    def validate_bio(bio: str, max_length: int = BIO_MAX_LENGTH) -> Tuple[bool, str]:
        """
        Validate one bio.
        Returns (is_valid, error_message) for the first rule broken.
        """
        if len(bio) > max_length:
            return False, f"bio is {len(bio)} characters long; maximum is {max_length}"

        if '&' in bio:
            return False, "bio must not contain '&'"

        if not bio.endswith('.'):
            return False, "bio must end with a full stop"

        if ', and' in bio:
            return False, "bio must not contain ', and'"

        return True, ""

    @staticmethod
    def validate(entries: Sequence[Entry]):
        for entry in entries:
            if entry.bio is None:
                continue
            is_valid, error_msg = BioValidator.validate_bio(entry.bio)
            if not is_valid:
                raise BioFormatError(entry.name, error_msg)


def validate_entries(entries: Sequence[Entry]):
    """
    Run every check over the full entry list.
    Raises an EntryValidationError subclass on the first violation.
    """
    NameOrderValidator.validate(entries)
    URLValidator.validate(entries)
    BioValidator.validate(entries)
