"""Date values with formatting, calendar arithmetic, differences and comparisons."""

import logging

from .core import DateLike, RichDate, richdate, to_instant
from .errors import (
    RichDateError,
    UnsupportedChangeUnit,
    UnsupportedDiffUnit,
    UnsupportedUnitError,
)
from .units import DateFormats, TimeUnits
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR

# Library logging: records go nowhere unless the application configures a handler
root_logger = logging.getLogger(name=__name__)
if not root_logger.handlers:
    root_logger.addHandler(logging.NullHandler())

__all__ = [
    "RichDate",
    "DateLike",
    "richdate",
    "to_instant",
    "TimeUnits",
    "DateFormats",
    "RichDateError",
    "UnsupportedUnitError",
    "UnsupportedDiffUnit",
    "UnsupportedChangeUnit",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
]
