"""Token-pattern rendering of instants.

Tokens are substituted in a fixed order (YYYY, MM, DD, HH, mm, ss) and each
token replaces only its first remaining occurrence in the pattern. A pattern
that repeats a token keeps the later occurrences as literal text:

    >>> format_instant(instant, "DD/DD")  # doctest: +SKIP
    '05/DD'

There is no escaping; any token-shaped substring is substituted.
"""

from richdate.calendar import is_valid, to_local
from richdate.units import DateFormats

_INVALID_FIELD = "NaN"

# Substitution order matters: each token gets a single replace, in this order
_TOKENS = ("YYYY", "MM", "DD", "HH", "mm", "ss")


def _fields(instant: float) -> dict[str, str]:
    if not is_valid(instant):
        return {token: _INVALID_FIELD for token in _TOKENS}

    dt = to_local(instant)
    return {
        "YYYY": str(dt.year),
        "MM": f"{dt.month:02d}",
        "DD": f"{dt.day:02d}",
        "HH": f"{dt.hour:02d}",
        "mm": f"{dt.minute:02d}",
        "ss": f"{dt.second:02d}",
    }


def format_instant(instant: float, pattern: str = DateFormats.DEFAULT) -> str:
    """Render an instant in the local calendar using a token pattern.

    Args:
        instant: Epoch milliseconds (NaN renders every token as ``NaN``)
        pattern: A DateFormats member or any free-form pattern string

    Returns:
        The pattern with the first occurrence of each token replaced
    """
    fields = _fields(instant)
    result = str(pattern)
    for token in _TOKENS:
        result = result.replace(token, fields[token], 1)
    return result
