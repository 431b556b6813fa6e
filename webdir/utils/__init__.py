"""
Utility modules for the generator.
"""

from .logger import DirectoryLogger, get_logger, init_logger
from .dates import PROJECT_EPOCH, format_timestamp, utc_now
from .validators import (
    BIO_MAX_LENGTH,
    NameOrderValidator,
    URLValidator,
    BioValidator,
    validate_entries,
)

__all__ = [
    'DirectoryLogger',
    'get_logger',
    'init_logger',
    'PROJECT_EPOCH',
    'format_timestamp',
    'utc_now',
    'BIO_MAX_LENGTH',
    'NameOrderValidator',
    'URLValidator',
    'BioValidator',
    'validate_entries',
]
