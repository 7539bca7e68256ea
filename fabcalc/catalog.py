"""Static registry of calculator categories and calculators."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .calculators import (
    BendAllowance,
    BendDeduction,
    CircleArea,
    Circumference,
    FlatPattern,
    FormCalculator,
    LengthConverter,
)

logger = logging.getLogger(__name__)


class UnknownCalculatorError(KeyError):
    """Raised when a calculator or category id is not in the catalog."""

    pass


@dataclass(frozen=True, slots=True)
class Category:
    """A group of related calculators."""
    id: str
    name: str
    description: str
    icon: str


@dataclass(frozen=True, slots=True)
class CalculatorInfo:
    """Catalog entry for one calculator."""
    id: str
    name: str
    description: str
    category: str
    factory: type[FormCalculator]

    def create(self) -> FormCalculator:
        """Build a fresh calculator with default selections."""
        return self.factory()


CATEGORIES: tuple[Category, ...] = (
    Category(
        id='unit-conversion',
        name='Unit Conversion',
        description='Convert between different units of measurement',
        icon='SwapHoriz',
    ),
    Category(
        id='measurements',
        name='Measurements',
        description='Calculate areas, volumes, and other measurements',
        icon='Straighten',
    ),
    Category(
        id='math',
        name='Mathematical',
        description='Perform mathematical calculations and operations',
        icon='Calculate',
    ),
    Category(
        id='fabrication',
        name='Fabrication',
        description='Sheet-metal bending and flat patterns',
        icon='Build',
    ),
)

CALCULATORS: tuple[CalculatorInfo, ...] = (
    CalculatorInfo(
        id=LengthConverter.calculator_id,
        name=LengthConverter.title,
        description='Convert between different units of length',
        category='unit-conversion',
        factory=LengthConverter,
    ),
    CalculatorInfo(
        id=CircleArea.calculator_id,
        name=CircleArea.title,
        description='Area of a circle from its radius or diameter',
        category='measurements',
        factory=CircleArea,
    ),
    CalculatorInfo(
        id=Circumference.calculator_id,
        name=Circumference.title,
        description='Circumference of a circle from its radius',
        category='measurements',
        factory=Circumference,
    ),
    CalculatorInfo(
        id=BendAllowance.calculator_id,
        name=BendAllowance.title,
        description='Neutral-axis arc length of a sheet-metal bend',
        category='fabrication',
        factory=BendAllowance,
    ),
    CalculatorInfo(
        id=BendDeduction.calculator_id,
        name=BendDeduction.title,
        description='Setback and bend deduction for a sheet-metal bend',
        category='fabrication',
        factory=BendDeduction,
    ),
    CalculatorInfo(
        id=FlatPattern.calculator_id,
        name=FlatPattern.title,
        description='Developed length of a multi-bend sheet-metal part',
        category='fabrication',
        factory=FlatPattern,
    ),
)

_CALCULATORS_BY_ID: dict[str, CalculatorInfo] = {info.id: info for info in CALCULATORS}
_CATEGORIES_BY_ID: dict[str, Category] = {category.id: category for category in CATEGORIES}


def get_category(category_id: str) -> Category:
    """
    Look up a category by id.

    Raises:
        UnknownCalculatorError: If the id is not in the catalog
    """
    try:
        return _CATEGORIES_BY_ID[category_id]
    except KeyError:
        logger.warning(f"Unknown category id: {category_id!r}")
        raise UnknownCalculatorError(category_id) from None


def get_calculator_info(calculator_id: str) -> CalculatorInfo:
    """
    Look up a calculator entry by id.

    Raises:
        UnknownCalculatorError: If the id is not in the catalog
    """
    try:
        return _CALCULATORS_BY_ID[calculator_id]
    except KeyError:
        logger.warning(f"Unknown calculator id: {calculator_id!r}")
        raise UnknownCalculatorError(calculator_id) from None


def create_calculator(calculator_id: str) -> FormCalculator:
    """Build a fresh calculator for a catalog id."""
    return get_calculator_info(calculator_id).create()


def calculators_in_category(category_id: str) -> list[CalculatorInfo]:
    """
    List the calculators of a category, in catalog order.

    An existing category with no calculators (e.g. 'math') gives an
    empty list.
    """
    get_category(category_id)
    return [info for info in CALCULATORS if info.category == category_id]
