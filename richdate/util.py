"""Utility constants for richdate.

Time unit constants represent durations in milliseconds, the resolution of
a RichDate instant. YEAR and MONTH are fixed-length approximations used by
the fractional diff; they ignore leap years.
"""

# Time unit constants (all values in milliseconds)
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
YEAR = 365 * DAY
MONTH = YEAR / 12
