from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from recordquery.models.hotel import Availability
from recordquery.utils.logger import setup_logger

logger = setup_logger(__name__)

MIN_YEAR = 1900

# YYYY, YYYY-MM or YYYY-MM-DD; month and day may drop the leading zero.
PARTIAL_DATE_RE = re.compile(r"^([0-9]{4})(?:-([0-9]{1,2})(?:-([0-9]{1,2}))?)?$")


@dataclass(frozen=True)
class DateInterval:
    """Closed interval [start, end]; start never after end."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Interval start {self.start} is after end {self.end}")


def parse_partial_date(text: str) -> Optional[DateInterval]:
    """
    Expand a partial date into the widest interval it can denote.

    "2025"       -> 2025-01-01 00:00:00 .. 2025-12-31 23:59:59
    "2025-02"    -> 2025-02-01 00:00:00 .. 2025-02-28 23:59:59
    "2025-02-14" -> 2025-02-14 00:00:00 .. 2025-02-14 00:00:00

    Returns None for any other shape, a year before 1900, or a month/day
    that does not exist.
    """
    if not text:
        return None
    match = PARTIAL_DATE_RE.match(text.strip())
    if not match:
        logger.debug(f"Unparseable partial date: {text!r}")
        return None

    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else None
    day = int(match.group(3)) if match.group(3) else None
    if year < MIN_YEAR:
        return None

    try:
        if day is not None:
            instant = datetime(year, month, day)
            return DateInterval(instant, instant)
        if month is not None:
            last_day = calendar.monthrange(year, month)[1]
            return DateInterval(datetime(year, month, 1), datetime(year, month, last_day, 23, 59, 59))
    except ValueError:
        logger.debug(f"Partial date out of calendar range: {text!r}")
        return None
    return DateInterval(datetime(year, 1, 1), datetime(year, 12, 31, 23, 59, 59))


def overlaps(a: DateInterval, b: DateInterval) -> bool:
    """Closed intervals intersect. Touching endpoints count."""
    return a.start <= b.end and a.end >= b.start


def availability_interval(availability: Availability) -> DateInterval:
    """A hotel's bookable window, from checkIn midnight to checkOut midnight."""
    return DateInterval(
        datetime.combine(availability.checkIn, time.min),
        datetime.combine(availability.checkOut, time.min),
    )
