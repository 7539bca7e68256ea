"""Lenient numeric parsing and validity checks for form text."""

from __future__ import annotations

import math
import re

# Longest leading decimal literal, optionally signed, optionally with exponent.
# Trailing text is ignored, so "12abc" parses as 12.
_NUMERIC_PREFIX = re.compile(
    r'[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
)


def parse_numeric_input(text: str | None) -> float:
    """
    Parse the numeric prefix of a text field.

    Leading whitespace is skipped and anything after the longest valid
    decimal prefix is ignored. Text with no numeric prefix yields NaN
    rather than raising.

    Args:
        text: Raw field text (None is treated as blank)

    Returns:
        Parsed value, or NaN if the text has no numeric prefix
    """
    if not text:
        return math.nan

    match = _NUMERIC_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0).replace('Infinity', 'inf'))


def is_valid_number(value: float) -> bool:
    """Check that a parsed value is finite (not NaN or infinity)."""
    return math.isfinite(value)


def is_in_range(value: float, low: float, high: float) -> bool:
    """Check that a value is finite and within [low, high]."""
    return math.isfinite(value) and low <= value <= high


def is_blank(text: str | None) -> bool:
    """Check whether a field holds no text at all."""
    return not text
