"""Calendar utilities for Almanac.

This module provides internal functions for calendar calculations:
leap year logic, month lengths and month counters that carry into
the year.

Month counters follow counter semantics rather than modular arithmetic:
stepping forward from any month above 11 wraps to January of the next
year, and stepping back from any month below 2 wraps to December of the
previous year. This matters only for month values outside 1-12, which
CalendarDate.set_month accepts without complaint.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import DAYS_IN_MONTH, FEBRUARY, MONTHS_PER_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2003)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_month(month: int) -> bool:
    """Return True if month is within 1-12."""
    return 1 <= month <= MONTHS_PER_YEAR


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if not is_valid_month(month):
        raise ValueError(f"month must be 1-12, got {month}")

    if month == FEBRUARY and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) one month after the given one."""
    if month >= MONTHS_PER_YEAR:
        return (year + 1, 1)
    return (year, month + 1)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) one month before the given one."""
    if month <= 1:
        return (year - 1, MONTHS_PER_YEAR)
    return (year, month - 1)


def advance_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Step a month counter forward, carrying into the year.

    Equivalent to calling next_month() `months` times; whole years are
    skipped at once. Zero or negative counts leave the pair unchanged.

    Args:
        year: The starting year.
        month: The starting month.
        months: Number of single-month steps to take.

    Returns:
        Tuple of (year, month) after stepping.

    Examples:
        >>> advance_months(2003, 11, 2)
        (2004, 1)
        >>> advance_months(2003, 7, 24)
        (2005, 7)
    """
    remaining = months
    while remaining > 0:
        if month >= MONTHS_PER_YEAR or not is_valid_month(month):
            year, month = next_month(year, month)
            remaining -= 1
            continue
        # From a regular month, a full year of steps lands on the same month
        years, remaining = divmod(remaining, MONTHS_PER_YEAR)
        year += years
        step = min(remaining, MONTHS_PER_YEAR - month)
        month += step
        remaining -= step
    return (year, month)


def rewind_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Step a month counter backward, carrying into the year.

    Equivalent to calling previous_month() `months` times; whole years are
    skipped at once. Zero or negative counts leave the pair unchanged.

    Args:
        year: The starting year.
        month: The starting month.
        months: Number of single-month steps to take.

    Returns:
        Tuple of (year, month) after stepping.

    Examples:
        >>> rewind_months(2004, 1, 1)
        (2003, 12)
        >>> rewind_months(2003, 7, 13)
        (2002, 6)
    """
    remaining = months
    while remaining > 0:
        if month <= 1 or not is_valid_month(month):
            year, month = previous_month(year, month)
            remaining -= 1
            continue
        years, remaining = divmod(remaining, MONTHS_PER_YEAR)
        year -= years
        step = min(remaining, month - 1)
        month -= step
        remaining -= step
    return (year, month)


__all__ = [
    "is_leap_year",
    "is_valid_month",
    "days_in_month",
    "next_month",
    "previous_month",
    "advance_months",
    "rewind_months",
]
