"""Unit conversion tables and converters.

Each table maps a unit tag to its size in a base unit: meters for
lengths, square meters for areas. Tables are read-only.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from ..models.types import AreaUnit, LengthUnit, UnitSystem
from ..models.units import UNIT_CONFIGS


class UnknownUnitError(ValueError):
    """Raised when a unit tag has no entry in the conversion table."""

    pass


LENGTH_TO_METERS: Mapping[LengthUnit, float] = MappingProxyType({
    'mm': 0.001,
    'cm': 0.01,
    'm': 1.0,
    'in': 0.0254,
    'ft': 0.3048,
    'km': 1000.0,
    'mi': 1609.34,
})

AREA_TO_SQ_METERS: Mapping[AreaUnit, float] = MappingProxyType({
    'mm²': 1e-6,
    'cm²': 1e-4,
    'm²': 1.0,
    'in²': 0.00064516,
    'ft²': 0.09290304,
})

# Sheet-metal unit systems, in millimeters
UNIT_SYSTEM_TO_MM: Mapping[UnitSystem, float] = MappingProxyType({
    name: unit.mm_per_unit for name, unit in UNIT_CONFIGS.items()
})


def _factor(table: Mapping[str, float], unit: str) -> float:
    try:
        return table[unit]
    except KeyError:
        raise UnknownUnitError(
            f"Unknown unit {unit!r}, expected one of: {', '.join(table)}"
        ) from None


def convert(value: float, from_unit: str, to_unit: str, table: Mapping[str, float]) -> float:
    """
    Convert a value between two units of the same table.

    Args:
        value: Value expressed in from_unit
        from_unit: Source unit tag
        to_unit: Target unit tag
        table: Unit tag to base-unit factor mapping

    Returns:
        Value expressed in to_unit. Same-unit conversions return the
        input unchanged; non-finite input returns NaN.

    Raises:
        UnknownUnitError: If either tag is missing from the table
    """
    from_factor = _factor(table, from_unit)
    to_factor = _factor(table, to_unit)

    if not math.isfinite(value):
        return math.nan
    if from_unit == to_unit:
        return value

    return value * from_factor / to_factor


def convert_length(value: float, from_unit: LengthUnit, to_unit: LengthUnit) -> float:
    """Convert a length between any two units of LENGTH_TO_METERS."""
    return convert(value, from_unit, to_unit, LENGTH_TO_METERS)


def convert_area(value: float, from_unit: AreaUnit, to_unit: AreaUnit) -> float:
    """Convert an area between any two units of AREA_TO_SQ_METERS."""
    return convert(value, from_unit, to_unit, AREA_TO_SQ_METERS)


def convert_dimension(value: float, from_unit: UnitSystem, to_unit: UnitSystem) -> float:
    """Convert a sheet-metal dimension between millimeters and inches."""
    return convert(value, from_unit, to_unit, UNIT_SYSTEM_TO_MM)


def to_base(value: float, unit: str, table: Mapping[str, float]) -> float:
    """Express a value in the table's base unit (meters, square meters, mm)."""
    return value * _factor(table, unit)


def from_base(value: float, unit: str, table: Mapping[str, float]) -> float:
    """Express a base-unit value in the given unit."""
    return value / _factor(table, unit)
