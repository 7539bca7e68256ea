"""Data models for calculator inputs and results."""

from .types import (
    LengthUnit,
    AreaUnit,
    UnitSystem,
    MeasureType,
    KFactorPresetKey,
    TriggerMode,
)
from .units import UnitConfig, METRIC, IMPERIAL, UNIT_CONFIGS, get_unit_config
from .bend_data import BendParameters, Segment, BendBreakdown, FlatPatternResult
from .results import CalculationResult

__all__ = [
    # Types
    'LengthUnit',
    'AreaUnit',
    'UnitSystem',
    'MeasureType',
    'KFactorPresetKey',
    'TriggerMode',
    # Units
    'UnitConfig',
    'METRIC',
    'IMPERIAL',
    'UNIT_CONFIGS',
    'get_unit_config',
    # Bend data
    'BendParameters',
    'Segment',
    'BendBreakdown',
    'FlatPatternResult',
    # Results
    'CalculationResult',
]
