"""Clock mode enumeration for 12/24-hour notation.

This module provides the ClockMode enum used by Time to describe the
notation its text was written in.
"""

from __future__ import annotations

from enum import Enum


class ClockMode(Enum):
    """Hour notation of a time of day.

    Examples:
        >>> ClockMode(24)
        <ClockMode.H24: 24>

        >>> ClockMode.H12.uses_meridiem
        True
    """

    H12 = 12  # 01:45pm
    H24 = 24  # 13:45

    @property
    def uses_meridiem(self) -> bool:
        """Return True if this notation carries an am/pm suffix."""
        return self == ClockMode.H12


__all__ = ["ClockMode"]
