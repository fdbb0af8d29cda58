"""Validation utilities for Almanac.

This module provides the argument guards used by the public types and
the day-existence check used by month arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

import math
import numbers

from almanac._internal.calendar import is_leap_year
from almanac._internal.constants import FEBRUARY, THIRTY_DAY_MONTHS
from almanac.errors import DateDoesNotExistError, NotANumberError, NotAStringError


def require_number(value: object, name: str) -> int:
    """Validate that a value is a finite whole number and return it as int.

    Integral floats such as 7.0 are accepted and normalized. Booleans are
    rejected even though bool subclasses int.

    Args:
        value: The value to validate.
        name: Argument name used in the error message.

    Returns:
        The value as an int.

    Raises:
        NotANumberError: If value is not a finite whole number.

    Examples:
        >>> require_number(7, "month")
        7
        >>> require_number(7.0, "month")
        7
        >>> require_number("7", "month")
        Traceback (most recent call last):
        ...
        NotANumberError: month must be a number, got '7'
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NotANumberError(f"{name} must be a number, got {value!r}")

    if isinstance(value, numbers.Integral):
        return int(value)

    if not math.isfinite(value):
        raise NotANumberError(f"{name} must be a finite number, got {value!r}")
    if not float(value).is_integer():
        raise NotANumberError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def require_string(value: object, name: str) -> str:
    """Validate that a value is a str.

    Args:
        value: The value to validate.
        name: Argument name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        NotAStringError: If value is not a str.
    """
    if not isinstance(value, str):
        raise NotAStringError(
            f"{name} must be a string, got {type(value).__name__}"
        )
    return value


def check_day_exists(year: int, month: int, day: int) -> None:
    """Validate that a day exists in the given month.

    Only the thirty-day months and February are checked. Every other
    month value, including values outside 1-12, accepts any day.

    Args:
        year: The year (for February in leap years).
        month: The month being moved into.
        day: The day that must exist in that month.

    Raises:
        DateDoesNotExistError: If the month is too short for the day.
    """
    if month in THIRTY_DAY_MONTHS:
        max_day = 30
    elif month == FEBRUARY:
        max_day = 29 if is_leap_year(year) else 28
    else:
        return

    if day > max_day:
        raise DateDoesNotExistError(
            f"day {day} does not exist in {year}-{month:02d} "
            f"(month has {max_day} days)"
        )


__all__ = [
    "require_number",
    "require_string",
    "check_day_exists",
]
