"""Conversions between epoch-millisecond instants and the local calendar.

An instant is an ``int`` count of milliseconds since the Unix epoch, or
``float('nan')`` for an invalid date. Calendar fields are always read in the
process's local time zone from a naive ``datetime``. Instants beyond
+/-8.64e15 ms, or outside what ``datetime`` can represent (years 1-9999),
are invalid.
"""

import math
from datetime import date, datetime, time

INVALID: float = math.nan

# 100,000,000 days either side of the epoch
MAX_INSTANT = 8.64e15


def is_valid(instant: float) -> bool:
    return not math.isnan(instant)


def to_local(instant: float) -> datetime:
    """Return the naive local date-time of a valid instant."""
    return datetime.fromtimestamp(instant / 1000)


def clip(instant: float) -> float:
    """Return the instant, or INVALID if it has no local calendar date."""
    if not math.isfinite(instant) or abs(instant) > MAX_INSTANT:
        return INVALID
    try:
        to_local(instant)
    except (ValueError, OverflowError, OSError):
        return INVALID
    return instant


def from_datetime(dt: datetime) -> int:
    """Convert a datetime to an instant.

    Naive values are read as local time, aware values by their offset.
    """
    return round(dt.timestamp() * 1000)


def from_date(d: date) -> int:
    """Convert a date to the instant of its local midnight."""
    return from_datetime(datetime.combine(d, time.min))


def from_number(value: float) -> float:
    """Truncate an epoch-millisecond number, mapping unrepresentable input to INVALID."""
    if not math.isfinite(value):
        return INVALID
    return clip(math.trunc(value))


def start_of_year(dt: datetime) -> datetime:
    return dt.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


def start_of_month(dt: datetime) -> datetime:
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
