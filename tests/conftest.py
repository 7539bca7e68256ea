"""
Pytest configuration for FabCalc tests.

Provides shared fixtures for bend parameters and calculator forms.
"""
import pytest

from fabcalc.calculators import BendAllowance, BendDeduction, FlatPattern
from fabcalc.models import BendParameters


@pytest.fixture
def right_angle_bend() -> BendParameters:
    """90 degree bend, R=1, T=1, mild steel K-factor."""
    return BendParameters(angle_deg=90.0, inside_radius=1.0, thickness=1.0, k_factor=0.4)


@pytest.fixture
def filled_bend_allowance() -> BendAllowance:
    """Bend allowance form populated with the right-angle bend in mm."""
    calc = BendAllowance()
    calc.set_field('angle_deg', '90')
    calc.set_field('inside_radius', '1')
    calc.set_field('thickness', '1')
    return calc


@pytest.fixture
def filled_bend_deduction() -> BendDeduction:
    """Bend deduction form populated with the right-angle bend in mm."""
    calc = BendDeduction()
    calc.set_field('angle_deg', '90')
    calc.set_field('inside_radius', '1')
    calc.set_field('thickness', '1')
    return calc


@pytest.fixture
def two_segment_pattern() -> FlatPattern:
    """Flat pattern with a straight run followed by a 90 degree bend on R=2."""
    calc = FlatPattern()
    calc.set_field('thickness', '1')
    calc.set_field('default_inside_radius', '1')
    calc.update_segment(0, 'length', '10')
    calc.update_segment(0, 'angle_deg', '0')
    calc.add_segment()
    calc.update_segment(1, 'length', '20')
    calc.update_segment(1, 'angle_deg', '90')
    calc.update_segment(1, 'inside_radius', '2')
    return calc
