"""
Exception types for the directory generator.
Components raise these; only the CLI turns them into an exit status.
"""


class DirectoryError(Exception):
    """Base class for all generator errors."""


class DataFormatError(DirectoryError):
    """The data source could not be parsed into entry records."""


class EntryValidationError(DirectoryError):
    """An entry broke one of the editorial rules."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"{name}: {reason}")


class OrderingError(EntryValidationError):
    """Entries are not sorted by name."""


class DuplicateURLError(EntryValidationError):
    """An entry lists the same URL more than once."""


class BioFormatError(EntryValidationError):
    """An entry bio breaks a text rule."""


class RenderError(DirectoryError):
    """An entry could not be rendered."""


class MalformedURLError(RenderError):
    """A URL has no scheme separator, so its host cannot be extracted."""
