"""Internal utilities for Almanac.

This module contains private implementation details:
    - Argument guards and the day-existence check
    - Calendar tables and output templates
    - Calendar helpers (leap years, month lengths, month carries)
    - Custom decorators (@deprecated)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.decorators import deprecated
from almanac._internal.validation import (
    check_day_exists,
    require_number,
    require_string,
)

__all__: list[str] = [
    "deprecated",
    "check_day_exists",
    "require_number",
    "require_string",
]
