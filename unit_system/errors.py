"""Exceptions raised by the conversion and statistics routines."""

from typing import Optional


class UnitSystemError(ValueError):
    """Base class for every error raised by this package."""


class UnsupportedConversion(UnitSystemError):
    """The (from_unit, to_unit) pair cannot be resolved within a category."""

    def __init__(self, from_unit: Optional[str] = None,
                 to_unit: Optional[str] = None,
                 category: Optional[str] = None,
                 message: str = ""):
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.category = category
        super().__init__(
            message or f"Conversion not supported: {from_unit} to {to_unit} in {category}"
        )


class UnknownUnit(UnsupportedConversion):
    def __init__(self, unit: Optional[str], category: str,
                 from_unit: Optional[str] = None, to_unit: Optional[str] = None,
                 message: str = ""):
        self.unit = unit
        super().__init__(from_unit, to_unit, category,
                         message or f"Unknown unit '{unit}' in category '{category}'")


class UnknownCategory(UnknownUnit):
    """No unit can be resolved because the category itself is missing."""

    def __init__(self, category: str, from_unit: Optional[str] = None,
                 to_unit: Optional[str] = None):
        super().__init__(None, category, from_unit, to_unit,
                         f"Unknown category '{category}'")


class UnsupportedComplexConversion(UnsupportedConversion):
    """An affine (offset) factor reached the linear conversion path."""

    def __init__(self, from_unit: str, to_unit: str, category: str):
        super().__init__(from_unit, to_unit, category,
                         f"Complex conversion {from_unit} to {to_unit} in "
                         f"{category} must be handled separately")


class UnsupportedTemperatureUnit(UnsupportedConversion):
    def __init__(self, unit: str, from_unit: Optional[str] = None,
                 to_unit: Optional[str] = None):
        self.unit = unit
        super().__init__(from_unit, to_unit, "temperature",
                         f"Unsupported temperature unit: {unit}")


class LengthMismatch(UnitSystemError):
    """Value and uncertainty sequences differ in length (or are empty)."""


class DivisionByZero(UnitSystemError, ZeroDivisionError):
    """A zero uncertainty was used as a statistical weight."""
