"""
Timestamp helpers shared by the renderers.
"""

from datetime import datetime
from typing import Optional
import pytz


# Fixed creation date of the directory
PROJECT_EPOCH = datetime(2026, 1, 11, 0, 0, 0, tzinfo=pytz.utc)

RFC2822_FORMAT = "%a, %d %b %Y %H:%M:%S UTC"


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(pytz.utc)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an RFC-2822 style string, e.g.
    "Sun, 11 Jan 2026 00:00:00 UTC".

    Naive datetimes are taken to be UTC already.
    """
    if moment is None:
        moment = utc_now()
    elif moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    else:
        moment = moment.astimezone(pytz.utc)
    return moment.strftime(RFC2822_FORMAT)
