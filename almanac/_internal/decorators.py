"""Custom decorators for Almanac.

This module provides decorator utilities for the library:
    - @deprecated(replacement): Keep a legacy name working while it warns

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import warnings
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(replacement: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a function as a deprecated spelling of another one.

    Calling the decorated function emits a DeprecationWarning naming
    the replacement, then runs the function unchanged.

    Args:
        replacement: Name of the function callers should use instead.

    Returns:
        A decorator function.

    Examples:
        >>> class Report:
        ...     def render(self) -> str:
        ...         return "ok"
        ...
        ...     @deprecated("render")
        ...     def rendr(self) -> str:
        ...         return self.render()

        >>> Report().rendr()  # Emits DeprecationWarning
        'ok'
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(
                f"{func.__name__}() is deprecated, use {replacement}() instead",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        wrapper.__deprecated_by__ = replacement  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = [
    "deprecated",
]
