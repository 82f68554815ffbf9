"""
Physical unit conversion with measurement uncertainty.

Organization:
    - constants.py: CODATA constants and atomic-unit values
    - config.py: display and statistics defaults
    - errors.py: exception hierarchy
    - registry.py: conversion factors, unit/category metadata, unit systems
    - formatting.py: number formatting
    - conversion.py: plain conversions (unit, system, target-system)
    - measurement.py: Measurement value type
    - uncertainty_engine.py: conversions with uncertainty, formula propagation
    - stats.py: weighted average, chi-squared test, significant figures
    - report.py: plain-text reports

Usage:
    from unit_system import convert, convert_with_uncertainty, Measurement
    convert(1, "atm", "Pa", "pressure")                 # 101325.0
    convert_with_uncertainty(10, 1, "m", "cm", "length")  # 1000 ± 100
"""

from .errors import (
    UnitSystemError,
    UnsupportedConversion,
    UnknownCategory,
    UnknownUnit,
    UnsupportedComplexConversion,
    UnsupportedTemperatureUnit,
    LengthMismatch,
    DivisionByZero,
)

from .registry import (
    UnitSystem,
    Scalar,
    Affine,
    Unit,
    Category,
    CATEGORIES,
    CONVERSION_FACTORS,
    UNIT_CATEGORIES,
    get_categories,
    get_category,
    get_units_for_category,
    get_unit,
    factor_of,
    units_in_system,
)

from .formatting import format_number, round_half_up
from .measurement import Measurement

from .uncertainty_engine import (
    convert_with_uncertainty,
    DerivedQuantity,
    propagate,
)

from .conversion import (
    convert,
    convert_between_systems,
    convert_to_system,
    system_unit,
    ConversionResult,
    SYSTEM_REFERENCE_UNITS,
)

from .stats import (
    weighted_average,
    chi_squared_test,
    round_to_significant_figures,
    ChiSquaredResult,
)

from .report import ConversionReport

__all__ = [
    # Errors
    "UnitSystemError",
    "UnsupportedConversion",
    "UnknownCategory",
    "UnknownUnit",
    "UnsupportedComplexConversion",
    "UnsupportedTemperatureUnit",
    "LengthMismatch",
    "DivisionByZero",
    # Registry
    "UnitSystem",
    "Scalar",
    "Affine",
    "Unit",
    "Category",
    "CATEGORIES",
    "CONVERSION_FACTORS",
    "UNIT_CATEGORIES",
    "get_categories",
    "get_category",
    "get_units_for_category",
    "get_unit",
    "factor_of",
    "units_in_system",
    # Conversion
    "format_number",
    "round_half_up",
    "convert",
    "convert_between_systems",
    "convert_to_system",
    "system_unit",
    "ConversionResult",
    "SYSTEM_REFERENCE_UNITS",
    # Uncertainty
    "Measurement",
    "convert_with_uncertainty",
    "DerivedQuantity",
    "propagate",
    # Statistics
    "weighted_average",
    "chi_squared_test",
    "round_to_significant_figures",
    "ChiSquaredResult",
    # Reports
    "ConversionReport",
]
