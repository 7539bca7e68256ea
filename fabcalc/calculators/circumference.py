"""Circumference calculator."""

from __future__ import annotations

from typing import ClassVar

from .. import config
from ..core.conversion import LENGTH_TO_METERS, UnknownUnitError
from ..core.formatting import format_number
from ..core.geometry import circumference, radius_from_measurement
from ..core.parsing import is_valid_number
from ..models.results import CalculationResult
from ..models.types import LengthUnit, MeasureType
from .base import FormCalculator
from .circle_area import check_measure_type


class Circumference(FormCalculator):
    """Circumference of a circle, in the same unit as the measurement."""

    calculator_id: ClassVar[str] = 'circumference'
    title: ClassVar[str] = 'Circumference'
    FIELDS: ClassVar[tuple[str, ...]] = ('value',)
    INVALID_MESSAGE: ClassVar[str] = config.MSG_NON_NEGATIVE

    def __init__(
        self,
        measure_type: MeasureType = 'radius',
        unit: LengthUnit = config.DEFAULT_CIRCUMFERENCE_UNIT,
    ) -> None:
        check_measure_type(measure_type)
        if unit not in LENGTH_TO_METERS:
            raise UnknownUnitError(f"Unknown length unit: {unit!r}")
        super().__init__()
        self._measure_type = measure_type
        self._unit = unit

    @property
    def measure_type(self) -> MeasureType:
        return self._measure_type

    @property
    def unit(self) -> LengthUnit:
        return self._unit

    def set_measure_type(self, measure_type: MeasureType) -> None:
        check_measure_type(measure_type)
        self._measure_type = measure_type
        self._on_change()

    def set_unit(self, unit: LengthUnit) -> None:
        """Change the unit label; the entered number is kept as is."""
        if unit not in LENGTH_TO_METERS:
            raise UnknownUnitError(f"Unknown length unit: {unit!r}")
        self._unit = unit
        self._on_change()

    def is_valid(self) -> bool:
        measured = self.value('value')
        if not (is_valid_number(measured) and measured >= 0):
            return False
        radius = radius_from_measurement(measured, self._measure_type)
        return is_valid_number(circumference(radius))

    def _compute(self) -> CalculationResult:
        radius = radius_from_measurement(self.value('value'), self._measure_type)
        digits = config.CIRCUMFERENCE_DIGITS
        return CalculationResult(
            value=format_number(circumference(radius), digits),
            unit=self._unit,
            details={'radius': f"{format_number(radius, digits)} {self._unit}"},
        )
