"""Type aliases for unit tags and calculator options."""

from typing import Literal

LengthUnit = Literal['mm', 'cm', 'm', 'in', 'ft', 'km', 'mi']
AreaUnit = Literal['mm²', 'cm²', 'm²', 'in²', 'ft²']

# Sheet-metal calculators only switch between these two
UnitSystem = Literal['mm', 'in']

MeasureType = Literal['radius', 'diameter']
KFactorPresetKey = Literal['none', 'mildSteel', 'aluminum', 'stainless']

# 'live' recomputes on every edit, 'explicit' waits for calculate()
TriggerMode = Literal['live', 'explicit']
