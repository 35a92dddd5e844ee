"""Exceptions raised by richdate."""

from collections.abc import Iterable
from typing import Any


class RichDateError(Exception):
    """Base exception for all richdate errors."""

    pass


class UnsupportedUnitError(RichDateError, ValueError):
    """A unit outside the set an operation accepts."""

    def __init__(self, message: str, unit: Any, allowed: Iterable[str]):
        super().__init__(message)
        self.unit: Any = unit
        self.allowed: tuple[str, ...] = tuple(str(u) for u in allowed)


class UnsupportedDiffUnit(UnsupportedUnitError):
    """Raised by diff() for anything but YEARS, MONTHS or DAYS."""

    def __init__(self, unit: Any, allowed: Iterable[str]):
        allowed = tuple(allowed)
        valid = ", ".join(str(u) for u in allowed)
        super().__init__(
            f"Unsupported diff unit: {unit!r}\n"
            f"Valid units: {valid}\n"
            f"Example: date.diff(other, TimeUnits.DAYS)",
            unit,
            allowed,
        )


class UnsupportedChangeUnit(UnsupportedUnitError):
    """Raised by add() and subtract() for an unknown unit."""

    def __init__(self, action: str, unit: Any, allowed: Iterable[str]):
        allowed = tuple(allowed)
        valid = ", ".join(str(u) for u in allowed)
        super().__init__(
            f"Unsupported unit for {action}(): {unit!r}\n"
            f"Valid units: {valid}\n"
            f"Example: date.{action}(1, TimeUnits.MONTHS)",
            unit,
            allowed,
        )
        self.action: str = action
