"""
Plain (no uncertainty) conversion between units of one category, between
the reference units of whole unit systems, and from one unit into every
unit of a target system.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from . import constants as C
from .errors import (
    UnknownCategory,
    UnknownUnit,
    UnsupportedComplexConversion,
    UnsupportedConversion,
    UnsupportedTemperatureUnit,
)
from .formatting import format_number
from .registry import CATEGORIES, Affine, UnitSystem, units_in_system
from .uncertainty_engine import convert_with_uncertainty

_log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════
# §1  TEMPERATURE
# ═══════════════════════════════════════════════════════════════════════

_TO_KELVIN = {
    "K": lambda x: x,
    "°C": lambda x: x + C.CELSIUS_OFFSET,
    "°F": lambda x: (x + C.FAHRENHEIT_OFFSET) * (5 / 9),
    "°R": lambda x: x * (5 / 9),
}

_FROM_KELVIN = {
    "K": lambda k: k,
    "°C": lambda k: k - C.CELSIUS_OFFSET,
    "°F": lambda k: k * (9 / 5) - C.FAHRENHEIT_OFFSET,
    "°R": lambda k: k * (9 / 5),
}


def _convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    try:
        to_kelvin = _TO_KELVIN[from_unit]
    except KeyError:
        raise UnsupportedTemperatureUnit(from_unit, from_unit, to_unit) from None
    try:
        from_kelvin = _FROM_KELVIN[to_unit]
    except KeyError:
        raise UnsupportedTemperatureUnit(to_unit, from_unit, to_unit) from None
    return from_kelvin(to_kelvin(value))


# ═══════════════════════════════════════════════════════════════════════
# §2  UNIT → UNIT
# ═══════════════════════════════════════════════════════════════════════

def convert(value: float, from_unit: str, to_unit: str, category: str) -> float:
    """
    Convert ``value`` from ``from_unit`` to ``to_unit`` within ``category``.

    Identical unit keys return ``value`` untouched without consulting the
    registry. Linear categories use ``value * (from_factor / to_factor)``;
    temperature goes through Kelvin. No rounding is applied and non-finite
    values propagate.

    Raises
    ------
    UnknownCategory, UnknownUnit
        Both are ``UnsupportedConversion`` subclasses.
    """
    if from_unit == to_unit:
        return value

    cat = CATEGORIES.get(category)
    if cat is None:
        _log.debug("Rejected conversion %s -> %s: no category %r", from_unit, to_unit, category)
        raise UnknownCategory(category, from_unit, to_unit)
    for unit in (from_unit, to_unit):
        if unit not in cat.units:
            _log.debug("Rejected conversion %s -> %s: no unit %r in %s",
                       from_unit, to_unit, unit, category)
            raise UnknownUnit(unit, category, from_unit, to_unit)

    if category == "temperature":
        return _convert_temperature(value, from_unit, to_unit)

    from_factor = cat.units[from_unit].factor
    to_factor = cat.units[to_unit].factor
    if isinstance(from_factor, Affine) or isinstance(to_factor, Affine):
        raise UnsupportedComplexConversion(from_unit, to_unit, category)
    return value * (from_factor.factor / to_factor.factor)


# ═══════════════════════════════════════════════════════════════════════
# §3  SYSTEM → SYSTEM
# ═══════════════════════════════════════════════════════════════════════

# The unit each system measures a category in.
SYSTEM_REFERENCE_UNITS = {
    UnitSystem.SI: {
        "length": "m", "mass": "kg", "time": "s", "energy": "J",
        "power": "W", "force": "N", "pressure": "Pa", "velocity": "m/s",
        "electricField": "V/m", "magneticField": "T", "frequency": "Hz",
        "temperature": "K",
    },
    UnitSystem.CGS: {
        "length": "cm", "mass": "g", "time": "s", "energy": "erg",
        "power": "erg/s", "force": "dyn", "pressure": "dyn/cm²",
        "velocity": "cm/s", "electricField": "statV/cm",
        "magneticField": "G", "frequency": "Hz", "temperature": "K",
    },
    UnitSystem.ATOMIC: {
        "length": "a₀", "mass": "mₑ", "time": "ℏ/Eh", "energy": "Eh",
        "force": "Eh/a₀", "pressure": "Eh/a₀³", "velocity": "a₀Eh/ℏ",
        "electricField": "Eh/(e·a₀)", "magneticField": "ℏ/(e·a₀²)",
        "frequency": "Eh/ℏ",
    },
}


def system_unit(category: str, system: UnitSystem) -> str:
    """Reference unit key of ``system`` for ``category``."""
    if category not in CATEGORIES:
        raise UnknownCategory(category)
    try:
        return SYSTEM_REFERENCE_UNITS[system][category]
    except KeyError:
        raise UnsupportedConversion(
            category=category,
            message=f"No {system.value} unit defined for {category}",
        ) from None


def convert_between_systems(value: float, category: str,
                            from_system: UnitSystem, to_system: UnitSystem) -> float:
    """
    Convert a value expressed in one system's unit for ``category`` into
    another system's, e.g. centimeters → Bohr radii for (length, CGS, ATOMIC).
    """
    return convert(value, system_unit(category, from_system),
                   system_unit(category, to_system), category)


# ═══════════════════════════════════════════════════════════════════════
# §4  UNIT → EVERY UNIT OF A SYSTEM
# ═══════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ConversionResult:
    unit: str
    symbol: str
    name: str
    value: float
    uncertainty: float = 0.0
    formatted: str = ""


def convert_to_system(value: float, from_unit: str, category: str,
                      system: UnitSystem,
                      uncertainty: Optional[float] = None) -> list:
    """
    Convert one input into every unit of ``category`` tagged with ``system``.

    With ``uncertainty`` given, each result goes through the uncertainty
    engine and is formatted as ``"value ± uncertainty"``; otherwise the plain
    converter and ``format_number`` are used.
    """
    results = []
    for unit in units_in_system(category, system):
        if uncertainty is not None:
            m = convert_with_uncertainty(value, uncertainty, from_unit, unit.key, category)
            results.append(ConversionResult(
                unit.key, unit.symbol, unit.name, m.value, m.uncertainty, str(m)
            ))
        else:
            converted = convert(value, from_unit, unit.key, category)
            results.append(ConversionResult(
                unit.key, unit.symbol, unit.name, converted,
                formatted=format_number(converted),
            ))
    return results
