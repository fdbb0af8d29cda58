"""Internal constants for Almanac.

These constants define the calendar tables and output templates used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

MONTHS_PER_YEAR: int = 12

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

FEBRUARY: int = 2

# April, June, September, November
THIRTY_DAY_MONTHS: frozenset[int] = frozenset({4, 6, 9, 11})

MONTH_NAMES: dict[int, str] = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}

# Format key -> str.format template. Available fields: day, month,
# year (full text), short_year (last two characters), month_name.
DATE_FORMATS: dict[str, str] = {
    "dd/mm/yyyy": "{day}/{month}/{year}",
    "dd/mm/yy": "{day}/{month}/{short_year}",
    "yyyy/mm/dd": "{year}/{month}/{day}",
    "yy/mm/dd": "{short_year}/{month}/{day}",
    "mm/dd/yy": "{month}/{day}/{short_year}",
    "mm/dd/yyyy": "{month}/{day}/{year}",
    "dd month yyyy": "{day} {month_name} {year}",
}

SUPPORTED_FORMATS: tuple[str, ...] = tuple(DATE_FORMATS)

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60


__all__ = [
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "FEBRUARY",
    "THIRTY_DAY_MONTHS",
    "MONTH_NAMES",
    "DATE_FORMATS",
    "SUPPORTED_FORMATS",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
]
