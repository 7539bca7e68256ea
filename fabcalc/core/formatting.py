"""Formatting utilities for calculator results and field text."""

from __future__ import annotations

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP

from ..models.types import UnitSystem
from ..models.units import get_unit_config
from .limits import DEFAULT_DIGITS

_WIDE = Context(prec=1000)


def format_number(value: float, digits: int = DEFAULT_DIGITS) -> str:
    """
    Format a value as fixed-point text.

    Rounds half away from zero on the exact binary value, so 0.125 with
    two digits gives "0.13" and 1.005 gives "1.00".

    Args:
        value: Value to format
        digits: Number of fractional digits

    Returns:
        Formatted string like "1.2346", or "" if value is NaN or infinity.
        Magnitudes of 1e21 and above are written in exponent form.
    """
    if not math.isfinite(value):
        return ""
    if abs(value) >= 1e21:
        return number_to_text(value)
    if value == 0:
        value = 0.0  # Drop the sign of negative zero

    quantum = Decimal(1).scaleb(-digits)
    # Wide context so very large values do not overflow the default precision
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE)
    return format(rounded, 'f')


def round_by_unit(value: float, unit: UnitSystem) -> str:
    """
    Format a sheet-metal result with the precision of its unit system.

    Millimeters show 3 fractional digits and inches show 4.

    Returns:
        Formatted string, or "" if value is NaN or infinity
    """
    return format_number(value, get_unit_config(unit).display_digits)


def number_to_text(value: float) -> str:
    """
    Render a value as the plain text a numeric field would hold.

    Whole numbers drop the decimal point ("1" rather than "1.0") and
    values between 1e-6 and 1e21 are written without an exponent.
    """
    if not math.isfinite(value):
        return ""
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if 'e' not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    # Keep the exponent but without zero padding ("1e-7", not "1e-07")
    return re.sub(r'e([+-])0*(\d)', r'e\1\2', text)
