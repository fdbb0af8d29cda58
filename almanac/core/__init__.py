"""Core value types.

This module provides the two value types of the library:
    - CalendarDate: Mutable calendar date with day/month/year arithmetic
    - Time: Time of day in 12-hour or 24-hour notation
"""

from __future__ import annotations

from almanac.core.date import CalendarDate
from almanac.core.time import Time

__all__: list[str] = [
    "CalendarDate",
    "Time",
]
