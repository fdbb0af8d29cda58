"""Unit types for Almanac.

This module provides unit enumerations:
    - ClockMode: 12-hour or 24-hour notation
"""

from __future__ import annotations

from almanac.units.clock import ClockMode

__all__: list[str] = [
    "ClockMode",
]
