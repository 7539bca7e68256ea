"""Calculator forms built on the core formulas."""

from .base import (
    UnknownFieldError,
    FormCalculator,
    SheetMetalCalculator,
    convert_field_text,
)
from .length_converter import LengthConverter
from .circle_area import CircleArea
from .circumference import Circumference
from .bend_allowance import BendAllowance
from .bend_deduction import BendDeduction
from .flat_pattern import FlatPattern, SegmentFields

__all__ = [
    # Base
    'UnknownFieldError',
    'FormCalculator',
    'SheetMetalCalculator',
    'convert_field_text',
    # Live calculators
    'LengthConverter',
    'CircleArea',
    'Circumference',
    # Explicit calculators
    'BendAllowance',
    'BendDeduction',
    'FlatPattern',
    'SegmentFields',
]
