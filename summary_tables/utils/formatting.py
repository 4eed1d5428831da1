"""
Display formatters for report table columns

This module provides functions for:
- Formatting p-values for display (`style_pvalue`)
- Turning a format string into a formatter (`as_formatter`)
- Resolving a formatter from an ordered list of candidates (`resolve_formatter`)
"""

from typing import Any, Callable, Iterable, Optional

import numpy as np
import pandas as pd

Formatter = Callable[[Any], Optional[str]]


def _is_missing(value) -> bool:
    return value is None or bool(pd.isna(value))


def _round2(value: float, digits: int) -> float:
    """Round half away from zero (``round`` rounds half to even)."""
    scale = 10**digits
    return float(np.sign(value) * np.floor(abs(value) * scale + 0.5 + 1e-9) / scale)


def _style_number(value: float, digits: int) -> str:
    return f"{_round2(value, digits):.{digits}f}"


def style_pvalue(x, digits: int = 1) -> Optional[str]:
    """
    Format a p-value for display.

    With the default ``digits=1``: values above 0.9 show as ``>0.9``, values
    rounding to 0.2 or more get one decimal place, values rounding to 0.1 or
    more get two, values down to 0.001 get three, and smaller values show as
    ``<0.001``.

    :param x: The p-value.
    :param digits: Number of significant digits, 1, 2 or 3.
    :return: The formatted p-value, or None if ``x`` is missing or outside [0, 1].
    """
    if digits not in (1, 2, 3):
        raise ValueError(f"Invalid digits: {digits!r}. Valid options are 1, 2 or 3.")
    if _is_missing(x):
        return None

    x = float(x)
    if x > 1 + 1e-15 or x < -1e-15:
        return None

    if digits == 1:
        if x > 0.9:
            return ">0.9"
        if _round2(x, 1) >= 0.2:
            return _style_number(x, 1)
        if _round2(x, 2) >= 0.1:
            return _style_number(x, 2)
    elif digits == 2:
        if x > 0.99:
            return ">0.99"
        if _round2(x, 2) >= 0.1:
            return _style_number(x, 2)
    elif x > 0.999:
        return ">0.999"

    if x >= 0.001:
        return _style_number(x, 3)
    return "<0.001"


def as_formatter(fmt):
    """
    Turn a format string (e.g. ``"{:.3f}"``) into a formatter. Callables and
    anything else are returned unchanged.

    :param fmt: Formatter or format string.
    :return: The formatter.
    """
    if isinstance(fmt, str):
        format_str = fmt

        def _format(value) -> Optional[str]:
            if _is_missing(value):
                return None
            return format_str.format(value)

        return _format
    return fmt


def resolve_formatter(
    providers: Iterable[Callable[[], Optional[Any]]], arg_name: str = "pvalue_fun"
) -> Formatter:
    """
    Pick the first formatter that is not None.

    Providers are called in order and only until one returns a value, so a
    lookup further down the list never runs when an earlier one succeeds.

    :param providers: Zero-argument callables returning a formatter or None,
        in order of precedence.
    :param arg_name: Argument name used in the error message.
    :return: The resolved formatter.
    """
    resolved = next(
        (candidate for candidate in (provider() for provider in providers) if candidate is not None),
        None,
    )
    resolved = as_formatter(resolved)
    if not callable(resolved):
        raise TypeError(f"Input '{arg_name}' must be a function.")
    return resolved
