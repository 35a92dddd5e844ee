"""Calendar arithmetic on instants: unit differences and field shifts.

Fractional YEARS and MONTHS differences use fixed-length years (365 days)
and months (365/12 days). This is an approximation that ignores leap years,
so a decimal result does not always match true elapsed calendar time.
"""

import logging
import math
from datetime import datetime
from typing import Any

from dateutil.relativedelta import relativedelta

from richdate.calendar import (
    INVALID,
    clip,
    from_datetime,
    is_valid,
    start_of_month,
    start_of_year,
    to_local,
)
from richdate.errors import UnsupportedChangeUnit, UnsupportedDiffUnit
from richdate.units import CHANGE_UNITS, DIFF_UNITS, ChangeAction, TimeUnits
from richdate.util import DAY, MONTH, YEAR

logger = logging.getLogger(__name__)

# relativedelta keyword for each field a change can shift
_FIELDS: dict[TimeUnits, str] = {
    TimeUnits.YEARS: "years",
    TimeUnits.MONTHS: "months",
    TimeUnits.DAYS: "days",
    TimeUnits.HOURS: "hours",
    TimeUnits.MINUTES: "minutes",
    TimeUnits.SECONDS: "seconds",
}


def diff(
    instant: float,
    other: float,
    unit: TimeUnits | str = TimeUnits.YEARS,
    use_decimal: bool = False,
) -> float:
    """Signed difference ``instant - other`` in whole or fractional units.

    Args:
        instant: Epoch milliseconds of the later-is-positive side
        other: Epoch milliseconds to measure against
        unit: YEARS, MONTHS or DAYS
        use_decimal: Add the fractional part instead of returning whole units

    Returns:
        An int for whole-unit results, a float for decimal results, NaN if
        either instant is invalid

    Raises:
        UnsupportedDiffUnit: If unit is not YEARS, MONTHS or DAYS
    """
    if unit not in DIFF_UNITS:
        logger.debug("Rejected diff unit %r", unit)
        raise UnsupportedDiffUnit(unit, DIFF_UNITS)

    if not (is_valid(instant) and is_valid(other)):
        return INVALID

    if unit == TimeUnits.DAYS:
        days = (instant - other) / DAY
        # Truncate toward zero, not floor
        return days if use_decimal else math.trunc(days)

    this_dt = to_local(instant)
    other_dt = to_local(other)

    if unit == TimeUnits.YEARS:
        result: float = this_dt.year - other_dt.year
        if use_decimal:
            this_offset = instant - from_datetime(start_of_year(this_dt))
            other_offset = other - from_datetime(start_of_year(other_dt))
            result += (this_offset - other_offset) / YEAR
        return result

    result = (this_dt.year - other_dt.year) * 12 + (this_dt.month - other_dt.month)
    if use_decimal:
        this_offset = instant - from_datetime(start_of_month(this_dt))
        other_offset = other - from_datetime(start_of_month(other_dt))
        result += (this_offset - other_offset) / MONTH
    return result


def change(
    instant: float,
    amount: float,
    unit: TimeUnits | str,
    action: ChangeAction,
) -> float:
    """Shift one calendar field of an instant by a signed amount.

    The shift is applied to the naive local date-time. Years and months clamp
    the day to the end of the target month; smaller units roll over into the
    larger fields. The shifted field value is truncated toward zero, so a
    fractional amount moves 10:00 minus 1.5 hours to 08:00.

    Instants that leave the representable calendar become invalid.

    Raises:
        UnsupportedChangeUnit: If unit is not one of the six TimeUnits
    """
    if unit not in CHANGE_UNITS:
        logger.debug("Rejected %s unit %r", action.value, unit)
        raise UnsupportedChangeUnit(action.value, unit, CHANGE_UNITS)

    if not is_valid(instant):
        return instant
    if not math.isfinite(amount):
        return INVALID

    unit = TimeUnits(unit)
    local = to_local(instant)
    current = _field_value(local, unit)
    if action is ChangeAction.SUBTRACT:
        target = current - amount
    else:
        target = current + amount
    step = math.trunc(target) - current

    shift: dict[str, Any] = {_FIELDS[unit]: step}
    try:
        shifted = from_datetime(local + relativedelta(**shift))
    except (ValueError, OverflowError):
        logger.debug("%s(%r, %s) left the calendar range", action.value, amount, unit)
        return INVALID
    return clip(shifted)


def _field_value(dt: datetime, unit: TimeUnits) -> int:
    # Months are counted from 0 so negative sums truncate like the other fields
    if unit == TimeUnits.MONTHS:
        return dt.month - 1
    return getattr(dt, _FIELDS[unit][:-1])
