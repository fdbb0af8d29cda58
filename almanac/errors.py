"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError. Each one also
derives from the closest built-in exception so callers may catch
TypeError or ValueError without importing this module.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class NotANumberError(AlmanacError, TypeError):
    """An argument that must be numeric is not a finite whole number.

    Examples:
        - A string such as "7" or "ten" passed as a day
        - None, True or False passed as a month
        - float("nan") or float("inf") passed as a year
        - 2.5 passed as a number of days
    """

    pass


class NotAStringError(AlmanacError, TypeError):
    """An argument that must be text is not a str.

    Examples:
        - None passed as a format key
        - 1345 passed as a time of day
    """

    pass


class InvalidFormatError(AlmanacError, ValueError):
    """Text argument with an unsupported value.

    Examples:
        - Format key "yyyy-mm-dd" (not one of the supported keys)
        - Time text "25:00" in 24-hour mode
        - Clock mode 13
    """

    pass


class DateDoesNotExistError(AlmanacError, ValueError):
    """Month arithmetic produced a day the target month does not have.

    Examples:
        - Adding one month to January 31 lands on February 31
        - Subtracting one month from May 31 lands on April 31
    """

    pass


__all__ = [
    "AlmanacError",
    "NotANumberError",
    "NotAStringError",
    "InvalidFormatError",
    "DateDoesNotExistError",
]
