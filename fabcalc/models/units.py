"""Unit system configuration for the sheet-metal calculators."""

from __future__ import annotations

from dataclasses import dataclass

from .types import UnitSystem


@dataclass(frozen=True, slots=True)
class UnitConfig:
    """
    Display settings for one sheet-metal unit system.

    Attributes:
        unit_name: Unit tag ('mm' or 'in')
        unit_symbol: Symbol appended to formatted values
        mm_per_unit: Millimeters in one unit
        display_digits: Fractional digits shown for results
    """

    unit_name: UnitSystem
    unit_symbol: str
    mm_per_unit: float
    display_digits: int

    @property
    def is_metric(self) -> bool:
        return self.unit_name == 'mm'


# 25.4 mm per inch is exact by definition of the international inch
METRIC = UnitConfig(unit_name='mm', unit_symbol='mm', mm_per_unit=1.0, display_digits=3)
IMPERIAL = UnitConfig(unit_name='in', unit_symbol='in', mm_per_unit=25.4, display_digits=4)

UNIT_CONFIGS: dict[UnitSystem, UnitConfig] = {
    'mm': METRIC,
    'in': IMPERIAL,
}


def get_unit_config(unit: UnitSystem) -> UnitConfig:
    """
    Look up the configuration for a unit system.

    Raises:
        ValueError: If the unit is not 'mm' or 'in'
    """
    try:
        return UNIT_CONFIGS[unit]
    except KeyError:
        raise ValueError(f"Unknown unit system: {unit!r}") from None
