import logging
from datetime import date, datetime
from time import time as current_time
from typing import Any, TypeAlias

from dateutil import parser
from typing_extensions import Self, override

from richdate.arithmetic import change, diff
from richdate.calendar import (
    INVALID,
    clip,
    from_date,
    from_datetime,
    from_number,
    is_valid,
    to_local,
)
from richdate.formatting import format_instant
from richdate.units import ChangeAction, DateFormats, TimeUnits

logger = logging.getLogger(__name__)

DateLike: TypeAlias = "RichDate | datetime | date | int | float | str"


def _parse(text: str) -> float:
    try:
        parsed = parser.parse(text)
    except (ValueError, OverflowError):
        logger.debug("Unparseable date string %r, producing an invalid date", text)
        return INVALID
    return clip(from_datetime(parsed))


def to_instant(value: "DateLike | None") -> float:
    """Normalize a date-like value to epoch milliseconds.

    Accepts:
    - None or "": the current instant
    - RichDate: its instant
    - int/float: epoch milliseconds (truncated toward zero)
    - str: anything dateutil can parse; naive results are local time,
      unparseable text yields an invalid (NaN) instant
    - datetime: naive values are local, aware values use their offset
    - date: local midnight of that day

    Raises:
        TypeError: If value is of any other type (bool included)
    """
    if isinstance(value, RichDate):
        return value._instant
    if value is None or value == "":
        return int(current_time() * 1000)
    if isinstance(value, bool):
        raise TypeError(
            f"Date value must not be a bool.\n"
            f"Got {value!r}\n"
            f"Hint: pass epoch milliseconds as an int, e.g. richdate(0)"
        )
    if isinstance(value, (int, float)):
        return from_number(value)
    if isinstance(value, str):
        return _parse(value)
    if isinstance(value, datetime):
        return clip(from_datetime(value))
    if isinstance(value, date):
        return clip(from_date(value))
    raise TypeError(
        f"Date value must be RichDate, datetime, date, int, float, str or None.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  richdate()                           # now\n"
        f"  richdate(1672531200000)              # epoch milliseconds\n"
        f"  richdate('2023-01-01 12:00')         # parsed as local time\n"
        f"  richdate(datetime(2023, 1, 1, 12))   # naive datetime, local time"
    )


class RichDate:
    """A mutable point in time with calendar formatting, arithmetic and comparison.

    The only state is the instant, in milliseconds since the Unix epoch.
    Calendar fields are read in the local time zone. ``add`` and ``subtract``
    shift the instant in place and return the same object for chaining:

        >>> d = richdate("2023-01-31 10:00")
        >>> d.add(1, TimeUnits.YEARS).subtract(2, TimeUnits.DAYS).format()
        '29.01.2024'
    """

    __slots__ = ("_instant",)

    DEFAULT_DATE_FORMAT: str = DateFormats.DEFAULT

    def __init__(self, value: "DateLike | None" = None):
        self._instant: float = to_instant(value)

    @property
    def timestamp(self) -> float:
        """Epoch milliseconds, NaN for an invalid date."""
        return self._instant

    @property
    def is_valid(self) -> bool:
        return is_valid(self._instant)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        """Month of the year, 1-12."""
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.to_datetime().hour

    @property
    def minute(self) -> int:
        return self.to_datetime().minute

    @property
    def second(self) -> int:
        return self.to_datetime().second

    def to_datetime(self) -> datetime:
        """Return the naive local datetime of this instant."""
        if not self.is_valid:
            raise ValueError("Cannot convert an invalid date to datetime")
        return to_local(self._instant)

    def copy(self) -> "RichDate":
        return RichDate(self)

    def __copy__(self) -> "RichDate":
        return self.copy()

    # Formatter

    def format(self, pattern: str = DEFAULT_DATE_FORMAT) -> str:
        """Render this date with a token pattern (YYYY, MM, DD, HH, mm, ss).

        Only the first occurrence of each token is substituted.
        """
        return format_instant(self._instant, pattern)

    # Differ

    def diff(
        self,
        other: "DateLike | None",
        unit: TimeUnits | str = TimeUnits.YEARS,
        use_decimal: bool = False,
    ) -> float:
        """Signed difference from ``other`` to this date; positive when this is later.

        Args:
            other: Date to measure against
            unit: TimeUnits.YEARS, MONTHS or DAYS
            use_decimal: Include the fractional part (365-day years,
                365/12-day months for YEARS and MONTHS)

        Raises:
            UnsupportedDiffUnit: For any other unit
        """
        return diff(self._instant, to_instant(other), unit, use_decimal)

    # Comparator

    def is_before(self, other: "DateLike | None") -> bool:
        return self._instant < to_instant(other)

    def is_after(self, other: "DateLike | None") -> bool:
        return to_instant(other) < self._instant

    def is_between(
        self,
        a: "DateLike | None",
        b: "DateLike | None",
        inclusive: bool = False,
    ) -> bool:
        """Check whether this date lies between two bounds given in either order.

        Bounds are excluded unless ``inclusive`` is True.
        """
        lower, upper = to_instant(a), to_instant(b)
        if upper < lower:
            lower, upper = upper, lower
        if inclusive:
            return lower <= self._instant <= upper
        return lower < self._instant < upper

    # Mutator

    def add(self, amount: float, unit: TimeUnits | str = TimeUnits.YEARS) -> Self:
        self._instant = change(self._instant, amount, unit, ChangeAction.ADD)
        return self

    def subtract(self, amount: float, unit: TimeUnits | str = TimeUnits.YEARS) -> Self:
        self._instant = change(self._instant, amount, unit, ChangeAction.SUBTRACT)
        return self

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RichDate):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: "RichDate") -> bool:
        if not isinstance(other, RichDate):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: "RichDate") -> bool:
        if not isinstance(other, RichDate):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: "RichDate") -> bool:
        if not isinstance(other, RichDate):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: "RichDate") -> bool:
        if not isinstance(other, RichDate):
            return NotImplemented
        return self._instant >= other._instant

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        if not self.is_valid:
            return "RichDate(invalid)"
        return f"RichDate({format_instant(self._instant, 'YYYY-MM-DD HH:mm:ss')})"

    @override
    def __str__(self) -> str:
        return self.format(DateFormats.DATE_TIME)


def richdate(value: "DateLike | None" = None) -> RichDate:
    """
    Create a RichDate from any date-like value.

    Args:
        value: None or "" for now, epoch milliseconds, a parseable string,
            a datetime/date, or another RichDate (copied, not shared)

    Returns:
        A new RichDate

    Example:
        >>> from richdate import TimeUnits, richdate
        >>>
        >>> start = richdate("2023-03-05 07:08:09")
        >>> start.format("DD.MM.YYYY HH:mm:ss")
        '05.03.2023 07:08:09'
        >>>
        >>> # Copies are independent
        >>> end = richdate(start).add(9, TimeUnits.DAYS)
        >>> end.diff(start, TimeUnits.DAYS)
        9
    """
    return RichDate(value)
