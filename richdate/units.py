"""Unit and pattern vocabularies."""

from enum import Enum, StrEnum


class TimeUnits(StrEnum):
    YEARS = "YEARS"
    MONTHS = "MONTHS"
    DAYS = "DAYS"
    HOURS = "HOURS"
    MINUTES = "MINUTES"
    SECONDS = "SECONDS"


class DateFormats(StrEnum):
    """Well-known patterns for RichDate.format().

    Free-form patterns are accepted too. Tokens: YYYY, MM, DD, HH, mm, ss.
    """

    DEFAULT = "DD.MM.YYYY"
    DASHED = "DD-MM-YYYY"
    DATE_TIME = "DD.MM.YYYY HH:mm:ss"
    DASHED_DATE_TIME = "DD-MM-YYYY HH:mm:ss"


class ChangeAction(Enum):
    ADD = "add"
    SUBTRACT = "subtract"


DIFF_UNITS: tuple[TimeUnits, ...] = (TimeUnits.YEARS, TimeUnits.MONTHS, TimeUnits.DAYS)
CHANGE_UNITS: tuple[TimeUnits, ...] = tuple(TimeUnits)
