"""Time class representing a time of day.

This module provides the Time class, a minute-precision time-of-day
value that renders in 12-hour or 24-hour notation. It is independent
of CalendarDate.
"""

from __future__ import annotations

import re

from almanac._internal.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from almanac._internal.validation import require_number, require_string
from almanac.errors import InvalidFormatError
from almanac.units.clock import ClockMode

_PATTERN_24H = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$")
_PATTERN_12H = re.compile(
    r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>[ap]m)$",
    re.IGNORECASE,
)


def _coerce_clock(clock: ClockMode | int) -> ClockMode:
    if isinstance(clock, ClockMode):
        return clock
    value = require_number(clock, "clock")
    try:
        return ClockMode(value)
    except ValueError:
        raise InvalidFormatError(f"clock must be 12 or 24, got {value}") from None


class Time:
    """A time of day with minute precision.

    Time is built from text in either 24-hour ("13:45") or 12-hour
    ("01:45pm") notation and can render itself in both.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        clock_mode: The notation the time was created from.

    Examples:
        >>> t = Time("13:45", 24)
        >>> t.get_12_hour_clock()
        '01:45pm'
        >>> t.get_24_hour_clock()
        '13:45'

        >>> Time("12:05am", 12).get_24_hour_clock()
        '00:05'
    """

    __slots__ = ("_hour", "_minute", "_clock_mode")

    def __init__(self, time: str, clock: ClockMode | int = 24) -> None:
        """Create a Time from text.

        Args:
            time: "HH:MM" for 24-hour notation, "hh:mm" followed by
                "am" or "pm" for 12-hour notation.
            clock: 12, 24 or a ClockMode member.

        Raises:
            NotAStringError: If time is not a str.
            NotANumberError: If clock is not a number or ClockMode.
            InvalidFormatError: If clock is not 12 or 24, or the text does
                not match the notation or is out of range.
        """
        require_string(time, "time")
        self._clock_mode = _coerce_clock(clock)

        if self._clock_mode.uses_meridiem:
            self._hour, self._minute = self._parse_12_hour(time)
        else:
            self._hour, self._minute = self._parse_24_hour(time)

    @staticmethod
    def _parse_24_hour(text: str) -> tuple[int, int]:
        match = _PATTERN_24H.match(text.strip())
        if not match:
            raise InvalidFormatError(
                f"invalid 24-hour time: {text!r}. Expected HH:MM"
            )
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        if hour >= HOURS_PER_DAY or minute >= MINUTES_PER_HOUR:
            raise InvalidFormatError(f"24-hour time out of range: {text!r}")
        return hour, minute

    @staticmethod
    def _parse_12_hour(text: str) -> tuple[int, int]:
        match = _PATTERN_12H.match(text.strip())
        if not match:
            raise InvalidFormatError(
                f"invalid 12-hour time: {text!r}. Expected hh:mm followed by am or pm"
            )
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        if not (1 <= hour <= 12) or minute >= MINUTES_PER_HOUR:
            raise InvalidFormatError(f"12-hour time out of range: {text!r}")

        # 12am is midnight, 12pm is noon
        hour %= 12
        if match.group("meridiem").lower() == "pm":
            hour += 12
        return hour, minute

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def clock_mode(self) -> ClockMode:
        """Return the notation this time was created from."""
        return self._clock_mode

    def get_12_hour_clock(self) -> str:
        """Return the time in 12-hour notation.

        Returns:
            String like '01:45pm'. Midnight is '12:00am', noon '12:00pm'.
        """
        meridiem = "pm" if self._hour >= 12 else "am"
        hour = self._hour % 12 or 12
        return f"{hour:02d}:{self._minute:02d}{meridiem}"

    def get_24_hour_clock(self) -> str:
        """Return the time in 24-hour notation, like '13:45'."""
        return f"{self._hour:02d}:{self._minute:02d}"

    def __eq__(self, other: object) -> bool:
        """Times are equal when they name the same minute of the day."""
        if not isinstance(other, Time):
            return NotImplemented
        return (self._hour, self._minute) == (other._hour, other._minute)

    def __hash__(self) -> int:
        return hash((self._hour, self._minute))

    def __repr__(self) -> str:
        if self._clock_mode.uses_meridiem:
            return f"Time({self.get_12_hour_clock()!r}, 12)"
        return f"Time({self.get_24_hour_clock()!r}, 24)"

    def __str__(self) -> str:
        """Return the time in the notation it was created from."""
        if self._clock_mode.uses_meridiem:
            return self.get_12_hour_clock()
        return self.get_24_hour_clock()


__all__ = ["Time"]
