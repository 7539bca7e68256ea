"""Area of a circle calculator."""

from __future__ import annotations

from typing import ClassVar

from .. import config
from ..core.conversion import (
    AREA_TO_SQ_METERS,
    LENGTH_TO_METERS,
    UnknownUnitError,
    from_base,
    to_base,
)
from ..core.formatting import format_number
from ..core.geometry import circle_area, radius_from_measurement
from ..core.parsing import is_valid_number
from ..models.results import CalculationResult
from ..models.types import AreaUnit, LengthUnit, MeasureType
from .base import FormCalculator

MEASURE_TYPES: tuple[MeasureType, ...] = ('radius', 'diameter')


def check_measure_type(measure_type: str) -> None:
    if measure_type not in MEASURE_TYPES:
        raise ValueError(f"Unknown measure type: {measure_type!r}")


class CircleArea(FormCalculator):
    """Area of a circle from its radius or diameter, in any area unit.

    The radius actually used is echoed back in the input unit under
    details['radius'], which shows the halving when a diameter was given.
    """

    calculator_id: ClassVar[str] = 'circle-area'
    title: ClassVar[str] = 'Area of a Circle'
    FIELDS: ClassVar[tuple[str, ...]] = ('value',)
    INVALID_MESSAGE: ClassVar[str] = config.MSG_NON_NEGATIVE

    def __init__(
        self,
        measure_type: MeasureType = 'radius',
        input_unit: LengthUnit = config.DEFAULT_CIRCLE_INPUT_UNIT,
        output_unit: AreaUnit = config.DEFAULT_CIRCLE_OUTPUT_UNIT,
    ) -> None:
        check_measure_type(measure_type)
        self._check_units(input_unit, output_unit)
        super().__init__()
        self._measure_type = measure_type
        self._input_unit = input_unit
        self._output_unit = output_unit

    @staticmethod
    def _check_units(input_unit: str, output_unit: str) -> None:
        if input_unit not in LENGTH_TO_METERS:
            raise UnknownUnitError(f"Unknown length unit: {input_unit!r}")
        if output_unit not in AREA_TO_SQ_METERS:
            raise UnknownUnitError(f"Unknown area unit: {output_unit!r}")

    @property
    def measure_type(self) -> MeasureType:
        return self._measure_type

    @property
    def input_unit(self) -> LengthUnit:
        return self._input_unit

    @property
    def output_unit(self) -> AreaUnit:
        return self._output_unit

    def set_measure_type(self, measure_type: MeasureType) -> None:
        check_measure_type(measure_type)
        self._measure_type = measure_type
        self._on_change()

    def set_input_unit(self, unit: LengthUnit) -> None:
        self._check_units(unit, self._output_unit)
        self._input_unit = unit
        self._on_change()

    def set_output_unit(self, unit: AreaUnit) -> None:
        self._check_units(self._input_unit, unit)
        self._output_unit = unit
        self._on_change()

    def _area_and_radius(self) -> tuple[float, float]:
        """Area in the output unit and radius in the input unit."""
        length_m = to_base(self.value('value'), self._input_unit, LENGTH_TO_METERS)
        radius_m = radius_from_measurement(length_m, self._measure_type)
        area = from_base(circle_area(radius_m), self._output_unit, AREA_TO_SQ_METERS)
        return area, from_base(radius_m, self._input_unit, LENGTH_TO_METERS)

    def is_valid(self) -> bool:
        measured = self.value('value')
        if not (is_valid_number(measured) and measured >= 0):
            return False
        # The square of a large radius can overflow
        return all(is_valid_number(x) for x in self._area_and_radius())

    def _compute(self) -> CalculationResult:
        area, radius = self._area_and_radius()
        return CalculationResult(
            value=format_number(area, config.CONVERSION_DIGITS),
            unit=self._output_unit,
            details={'radius': f"{format_number(radius, config.CONVERSION_DIGITS)} {self._input_unit}"},
        )
