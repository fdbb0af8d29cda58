"""CalendarDate class representing a mutable calendar date.

This module provides the CalendarDate class for simple Gregorian date
manipulation: field setters, day/month/year arithmetic with carry
propagation, and a fixed set of output formats.
"""

from __future__ import annotations

import logging

from almanac._internal.calendar import (
    advance_months,
    days_in_month,
    is_leap_year,
    is_valid_month,
    next_month,
    previous_month,
    rewind_months,
)
from almanac._internal.constants import DATE_FORMATS, MONTH_NAMES, SUPPORTED_FORMATS
from almanac._internal.decorators import deprecated
from almanac._internal.validation import (
    check_day_exists,
    require_number,
    require_string,
)
from almanac.errors import DateDoesNotExistError, InvalidFormatError

logger = logging.getLogger(__name__)


def _pad(value: int) -> str:
    return f"{value:02d}"


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate holds year, month and day fields and is mutated in place
    by its setters and arithmetic operations. The setters only check that
    their argument is numeric: ranges are never enforced on direct
    assignment, so CalendarDate(2003, 2, 31) is accepted as-is.

    Month arithmetic refuses to land on a day the target month lacks
    and raises DateDoesNotExistError instead of clamping. Only the
    thirty-day months and February are checked. Year arithmetic performs
    no check at all, so February 29 can be carried into a common year.

    Attributes:
        year: The year (any sign or magnitude).
        month: The month, nominally 1-12.
        day: The day of the month.

    Examples:
        >>> d = CalendarDate(2003, 7, 11)
        >>> d.get_formatted_date("dd/mm/yyyy")
        '11/07/2003'

        >>> d.add_days(30)
        >>> d.get_formatted_date("dd month yyyy")
        '10 August 2003'

        >>> CalendarDate(2003, 3, 31).add_months(1)
        Traceback (most recent call last):
        ...
        DateDoesNotExistError: day 31 does not exist in 2003-04 (month has 30 days)
    """

    __slots__ = ("_year", "_month", "_day")

    # Mutable, so not usable as a dict key
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Args:
            year: The year.
            month: The month.
            day: The day of the month.

        Raises:
            NotANumberError: If any component is not a finite whole number.
        """
        self.set_year(year)
        self.set_month(month)
        self.set_day(day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> CalendarDate(2004, 1, 1).is_leap_year
            True
            >>> CalendarDate(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    def set_year(self, year: int) -> None:
        """Set the year.

        Raises:
            NotANumberError: If year is not a finite whole number.
        """
        self._year = require_number(year, "year")

    def set_month(self, month: int) -> None:
        """Set the month without checking it against 1-12.

        Raises:
            NotANumberError: If month is not a finite whole number.
        """
        self._month = require_number(month, "month")

    def set_day(self, day: int) -> None:
        """Set the day without checking it against the month length.

        Raises:
            NotANumberError: If day is not a finite whole number.
        """
        self._day = require_number(day, "day")

    def add_days(self, days: int) -> None:
        """Move the date forward by a number of days.

        The result is the same as incrementing the day `days` times,
        rolling over to the first of the next month whenever the day
        passes the end of the current one. Zero or negative counts
        leave the date unchanged.

        Args:
            days: Number of days to add.

        Raises:
            NotANumberError: If days is not a finite whole number.

        Examples:
            >>> d = CalendarDate(2003, 12, 20)
            >>> d.add_days(12)
            >>> d
            CalendarDate(2004, 1, 1)
        """
        remaining = require_number(days, "days")
        year, month, day = self._year, self._month, self._day

        while remaining > 0:
            if not is_valid_month(month):
                # No month length to roll over
                day += remaining
                break
            month_length = days_in_month(year, month)
            if day + remaining <= month_length:
                day += remaining
                break
            remaining -= max(month_length - day, 0) + 1
            year, month = next_month(year, month)
            day = 1
            logger.debug("add_days carried into %d-%02d", year, month)

        self._year, self._month, self._day = year, month, day

    def subtract_days(self, days: int) -> None:
        """Move the date back by a number of days.

        The result is the same as decrementing the day `days` times,
        rolling back to the last day of the previous month whenever the
        day drops below 1. Zero or negative counts leave the date
        unchanged.

        Args:
            days: Number of days to subtract.

        Raises:
            NotANumberError: If days is not a finite whole number.

        Examples:
            >>> d = CalendarDate(2004, 3, 1)
            >>> d.subtract_days(1)
            >>> d
            CalendarDate(2004, 2, 29)
        """
        remaining = require_number(days, "days")
        year, month, day = self._year, self._month, self._day

        while remaining > 0:
            if not is_valid_month(month):
                day -= remaining
                break
            if day - remaining >= 1:
                day -= remaining
                break
            remaining -= max(day - 1, 0) + 1
            year, month = previous_month(year, month)
            day = days_in_month(year, month)
            logger.debug("subtract_days carried into %d-%02d", year, month)

        self._year, self._month, self._day = year, month, day

    def add_months(self, months: int) -> None:
        """Move the date forward by a number of months.

        Args:
            months: Number of months to add.

        Raises:
            NotANumberError: If months is not a finite whole number.
            DateDoesNotExistError: If the current day does not exist in
                the target month. The date is left unchanged.

        Examples:
            >>> d = CalendarDate(2003, 11, 30)
            >>> d.add_months(2)
            >>> d
            CalendarDate(2004, 1, 30)
        """
        months = require_number(months, "months")
        self._move_to(*advance_months(self._year, self._month, months))

    def subtract_months(self, months: int) -> None:
        """Move the date back by a number of months.

        Args:
            months: Number of months to subtract.

        Raises:
            NotANumberError: If months is not a finite whole number.
            DateDoesNotExistError: If the current day does not exist in
                the target month. The date is left unchanged.
        """
        months = require_number(months, "months")
        self._move_to(*rewind_months(self._year, self._month, months))

    def _move_to(self, year: int, month: int) -> None:
        try:
            check_day_exists(year, month, self._day)
        except DateDoesNotExistError:
            logger.debug("rejected month move of %r to %d-%02d", self, year, month)
            raise
        self.set_year(year)
        self.set_month(month)

    def add_years(self, years: int) -> None:
        """Move the date forward by a number of years.

        The day is not re-checked: February 29 stays February 29 even
        when the target year is not a leap year.

        Raises:
            NotANumberError: If years is not a finite whole number.
        """
        years = require_number(years, "years")
        self.set_year(self._year + years)

    def subtract_years(self, years: int) -> None:
        """Move the date back by a number of years.

        Like add_years, the day is not re-checked.

        Raises:
            NotANumberError: If years is not a finite whole number.
        """
        years = require_number(years, "years")
        self.set_year(self._year - years)

    def get_formatted_date(self, fmt: str) -> str:
        """Return the date rendered in one of the supported formats.

        Day and month are zero-padded to two characters. The two-digit
        year is the last two characters of the year's text, not the
        year modulo 100.

        Args:
            fmt: One of "dd/mm/yyyy", "dd/mm/yy", "yyyy/mm/dd", "yy/mm/dd",
                "mm/dd/yy", "mm/dd/yyyy" or "dd month yyyy".

        Returns:
            The formatted date.

        Raises:
            NotAStringError: If fmt is not a str.
            InvalidFormatError: If fmt is not a supported format key.

        Examples:
            >>> d = CalendarDate(2003, 7, 11)
            >>> d.get_formatted_date("yy/mm/dd")
            '03/07/11'
            >>> d.get_formatted_date("dd month yyyy")
            '11 July 2003'
        """
        require_string(fmt, "fmt")

        template = DATE_FORMATS.get(fmt)
        if template is None:
            raise InvalidFormatError(
                f"unsupported date format {fmt!r}, "
                f"expected one of: {', '.join(SUPPORTED_FORMATS)}"
            )

        year_text = str(self._year)
        return template.format(
            day=_pad(self._day),
            month=_pad(self._month),
            year=year_text,
            short_year=year_text[-2:],
            month_name=MONTH_NAMES.get(self._month, ""),
        )

    @deprecated("get_formatted_date")
    def get_formated_date(self, fmt: str) -> str:
        """Return the date in a supported format (misspelt legacy name)."""
        return self.get_formatted_date(fmt)

    def copy(self) -> CalendarDate:
        """Return an independent copy of this date."""
        return CalendarDate(self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> CalendarDate(2003, 7, 11) == CalendarDate(2003, 7, 11)
            True
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._month, self._day) == (
            other._year,
            other._month,
            other._day,
        )

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'CalendarDate(2003, 7, 11)'.
        """
        return f"CalendarDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the dd/mm/yyyy representation."""
        return self.get_formatted_date("dd/mm/yyyy")


__all__ = ["CalendarDate"]
