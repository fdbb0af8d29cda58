"""Almanac: simple Gregorian date arithmetic and formatting.

Almanac provides a small mutable calendar-date type with calendar-aware
day, month and year arithmetic, plus a companion time-of-day type. No
platform date library is involved.

Core Types:
    CalendarDate: Calendar date (year, month, day) mutated in place
    Time: Time of day rendered in 12-hour or 24-hour notation

Units:
    ClockMode: 12-hour or 24-hour notation

Constants:
    SUPPORTED_FORMATS: Format keys accepted by CalendarDate.get_formatted_date

Exceptions:
    AlmanacError: Base exception
    NotANumberError: Numeric argument is not a finite whole number
    NotAStringError: Text argument is not a str
    InvalidFormatError: Unsupported format key, time text or clock mode
    DateDoesNotExistError: Month arithmetic landed on a missing day

Example:
    >>> from almanac import CalendarDate
    >>> d = CalendarDate(2004, 2, 11)
    >>> d.add_days(18)
    >>> d.get_formatted_date("dd/mm/yyyy")
    '29/02/2004'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from almanac.core.date import CalendarDate
from almanac.core.time import Time

# Units
from almanac.units.clock import ClockMode

# Constants
from almanac._internal.constants import SUPPORTED_FORMATS

# Exceptions
from almanac.errors import (
    AlmanacError,
    DateDoesNotExistError,
    InvalidFormatError,
    NotANumberError,
    NotAStringError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "Time",
    # Units
    "ClockMode",
    # Constants
    "SUPPORTED_FORMATS",
    # Exceptions
    "AlmanacError",
    "NotANumberError",
    "NotAStringError",
    "InvalidFormatError",
    "DateDoesNotExistError",
]
