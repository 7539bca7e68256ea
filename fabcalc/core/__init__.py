"""Core conversion, geometry and sheet-metal calculations."""

from .parsing import (
    parse_numeric_input,
    is_valid_number,
    is_in_range,
    is_blank,
)
from .formatting import (
    format_number,
    round_by_unit,
    number_to_text,
)
from .conversion import (
    UnknownUnitError,
    LENGTH_TO_METERS,
    AREA_TO_SQ_METERS,
    UNIT_SYSTEM_TO_MM,
    convert,
    convert_length,
    convert_area,
    convert_dimension,
)
from .geometry import (
    clamp,
    circle_area,
    circumference,
    radius_from_measurement,
)
from .sheet_metal import (
    K_FACTOR_PRESETS,
    bend_allowance,
    setback,
    bend_deduction,
    bend_parameter_errors,
    validate_bend_parameters,
    resolve_segment_radius,
    validate_flat_pattern,
    flat_pattern_length,
)
from .limits import (
    ANGLE_MIN_DEG,
    ANGLE_MAX_DEG,
    K_FACTOR_MIN,
    K_FACTOR_MAX,
)

__all__ = [
    # Parsing
    'parse_numeric_input',
    'is_valid_number',
    'is_in_range',
    'is_blank',
    # Formatting
    'format_number',
    'round_by_unit',
    'number_to_text',
    # Conversion
    'UnknownUnitError',
    'LENGTH_TO_METERS',
    'AREA_TO_SQ_METERS',
    'UNIT_SYSTEM_TO_MM',
    'convert',
    'convert_length',
    'convert_area',
    'convert_dimension',
    # Geometry
    'clamp',
    'circle_area',
    'circumference',
    'radius_from_measurement',
    # Sheet metal
    'K_FACTOR_PRESETS',
    'bend_allowance',
    'setback',
    'bend_deduction',
    'bend_parameter_errors',
    'validate_bend_parameters',
    'resolve_segment_radius',
    'validate_flat_pattern',
    'flat_pattern_length',
    # Limits
    'ANGLE_MIN_DEG',
    'ANGLE_MAX_DEG',
    'K_FACTOR_MIN',
    'K_FACTOR_MAX',
]
