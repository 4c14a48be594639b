"""
Unit registry and helpers for pressure, mass and temperature conversions.

Uses pint for the dimensional conversions. The PSI/BAR and kPa/PSI factors
are fixed constants so displayed values stay stable across pint releases.
"""

import math

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Fixed conversion constants
PSI_PER_BAR = 14.5037738
KPA_TO_PSI = 0.1450377377


def kg_to_lbs(mass_kg: float) -> float:
    """Convert a mass in kilograms to pounds."""
    return Q_(mass_kg, "kg").to("lb").magnitude


def lbs_to_kg(mass_lbs: float) -> float:
    """Convert a mass in pounds to kilograms."""
    return Q_(mass_lbs, "lb").to("kg").magnitude


def celsius_to_kelvin(temp_c: float) -> float:
    """Convert a temperature in Celsius to Kelvin (additive 273.15 offset)."""
    return Q_(temp_c, ureg.degC).to(ureg.kelvin).magnitude


def to_bar(pressure_psi: float) -> float:
    """Convert PSI to BAR."""
    return pressure_psi / PSI_PER_BAR


def kpa_to_psi(pressure_kpa: float) -> float:
    """Convert kPa to PSI with the fixed factor."""
    return pressure_kpa * KPA_TO_PSI


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round to a number of decimal places, with halves rounding up.

    Python's round() uses banker's rounding; recommendations displayed to
    riders round .5 upward instead.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
