"""
Conversion factor registry and category metadata.

Every linear category stores, for each unit, how many reference units
(the SI base unit of that quantity) make up one of that unit. Temperature
stores an offset/scale descriptor per unit that is kept for introspection
only; the actual temperature arithmetic lives in ``conversion.py``.

The tables are built once at import time and exposed through read-only
mappings.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from . import constants as C
from .errors import UnknownCategory, UnknownUnit

_log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════
# §1  DATA STRUCTURES
# ═══════════════════════════════════════════════════════════════════════

class UnitSystem(Enum):
    SI = "si"
    CGS = "cgs"
    ATOMIC = "atomic"
    OTHER = "other"


@dataclass(frozen=True)
class Scalar:
    """Linear factor: 1 unit = ``factor`` reference units."""
    factor: float


@dataclass(frozen=True)
class Affine:
    """Offset + scale descriptor (temperature only, informational)."""
    offset: float
    factor: float


Factor = Union[Scalar, Affine]


@dataclass(frozen=True)
class Unit:
    key: str
    symbol: str
    name: str
    factor: Factor
    system: UnitSystem = UnitSystem.OTHER

    @property
    def is_linear(self) -> bool:
        return isinstance(self.factor, Scalar)


@dataclass(frozen=True)
class Category:
    """A physical quantity with its ordered unit table."""
    key: str
    name: str
    units: Mapping[str, Unit]
    reference_unit: str

    def factors(self) -> Mapping[str, Factor]:
        return MappingProxyType(
            OrderedDict((k, u.factor) for k, u in self.units.items())
        )


# ═══════════════════════════════════════════════════════════════════════
# §2  UNIT TABLES
#     (key, symbol, name, factor, system) — factor in the reference unit
# ═══════════════════════════════════════════════════════════════════════

SI, CGS, AU, OTHER = UnitSystem.SI, UnitSystem.CGS, UnitSystem.ATOMIC, UnitSystem.OTHER

_LINEAR_TABLES = OrderedDict([
    ("length", ("Length", "m", [
        ("m", "m", "meters", 1, SI),
        ("km", "km", "kilometers", 1000, SI),
        ("cm", "cm", "centimeters", 0.01, CGS),
        ("mm", "mm", "millimeters", 0.001, SI),
        ("μm", "μm", "micrometers", 1e-6, SI),
        ("nm", "nm", "nanometers", 1e-9, SI),
        ("pm", "pm", "picometers", 1e-12, SI),
        ("fm", "fm", "femtometers", 1e-15, SI),
        ("ft", "ft", "feet", 0.3048, OTHER),
        ("in", "in", "inches", 0.0254, OTHER),
        ("yd", "yd", "yards", 0.9144, OTHER),
        ("mi", "mi", "miles", 1609.344, OTHER),
        ("ly", "ly", "light years", 9.461e15, OTHER),
        ("au", "AU", "astronomical units", 1.496e11, OTHER),
        ("pc", "pc", "parsecs", 3.086e16, OTHER),
        ("a₀", "a₀", "Bohr radii", C.BOHR_RADIUS, AU),
        ("Å", "Å", "Angstroms", 1e-10, OTHER),
    ])),
    ("mass", ("Mass", "kg", [
        ("kg", "kg", "kilograms", 1, SI),
        ("g", "g", "grams", 0.001, CGS),
        ("mg", "mg", "milligrams", 1e-6, SI),
        ("μg", "μg", "micrograms", 1e-9, SI),
        ("t", "t", "metric tons", 1000, OTHER),
        ("lb", "lb", "pounds", 0.453592, OTHER),
        ("oz", "oz", "ounces", 0.0283495, OTHER),
        ("u", "u", "atomic mass units", 1.66054e-27, OTHER),
        ("mₑ", "mₑ", "electron masses", C.ELECTRON_MASS, AU),
        ("mₚ", "mₚ", "proton masses", 1.67262e-27, OTHER),
        ("M☉", "M☉", "solar masses", 1.989e30, OTHER),
    ])),
    ("time", ("Time", "s", [
        ("s", "s", "seconds", 1, SI),
        ("ms", "ms", "milliseconds", 0.001, SI),
        ("μs", "μs", "microseconds", 1e-6, SI),
        ("ns", "ns", "nanoseconds", 1e-9, SI),
        ("ps", "ps", "picoseconds", 1e-12, SI),
        ("fs", "fs", "femtoseconds", 1e-15, SI),
        ("min", "min", "minutes", 60, OTHER),
        ("h", "h", "hours", 3600, OTHER),
        ("d", "d", "days", 86400, OTHER),
        ("yr", "yr", "years", 31557600, OTHER),  # Julian year
        ("ℏ/Eh", "ℏ/Eh", "atomic time units", C.ATOMIC_TIME, AU),
    ])),
    ("energy", ("Energy", "J", [
        ("J", "J", "Joules", 1, SI),
        ("kJ", "kJ", "kilojoules", 1000, SI),
        ("MJ", "MJ", "megajoules", 1e6, SI),
        ("GJ", "GJ", "gigajoules", 1e9, SI),
        ("eV", "eV", "electron volts", C.ELEMENTARY_CHARGE, OTHER),
        ("keV", "keV", "kilo electron volts", C.ELEMENTARY_CHARGE * 1e3, OTHER),
        ("MeV", "MeV", "mega electron volts", C.ELEMENTARY_CHARGE * 1e6, OTHER),
        ("GeV", "GeV", "giga electron volts", C.ELEMENTARY_CHARGE * 1e9, OTHER),
        ("cal", "cal", "calories", 4.184, OTHER),
        ("kcal", "kcal", "kilocalories", 4184, OTHER),
        ("Wh", "Wh", "watt hours", 3600, OTHER),
        ("kWh", "kWh", "kilowatt hours", 3.6e6, OTHER),
        ("erg", "erg", "ergs", 1e-7, CGS),
        ("Eh", "Eh", "Hartree", C.HARTREE_ENERGY, AU),
        ("Ry", "Ry", "Rydberg", C.HARTREE_ENERGY / 2, OTHER),
    ])),
    ("power", ("Power", "W", [
        ("W", "W", "Watts", 1, SI),
        ("kW", "kW", "kilowatts", 1000, SI),
        ("MW", "MW", "megawatts", 1e6, SI),
        ("GW", "GW", "gigawatts", 1e9, SI),
        ("hp", "hp", "horsepower", 745.7, OTHER),
        ("cal/s", "cal/s", "calories per second", 4.184, OTHER),
        ("erg/s", "erg/s", "ergs per second", 1e-7, CGS),
    ])),
    ("force", ("Force", "N", [
        ("N", "N", "Newtons", 1, SI),
        ("kN", "kN", "kilonewtons", 1000, SI),
        ("MN", "MN", "meganewtons", 1e6, SI),
        ("dyn", "dyn", "dynes", 1e-5, CGS),
        ("lbf", "lbf", "pound-force", 4.44822, OTHER),
        ("kgf", "kgf", "kilogram-force", 9.80665, OTHER),
        ("Eh/a₀", "Eh/a₀", "atomic force units", C.ATOMIC_FORCE, AU),
    ])),
    ("pressure", ("Pressure", "Pa", [
        ("Pa", "Pa", "Pascals", 1, SI),
        ("kPa", "kPa", "kilopascals", 1000, SI),
        ("MPa", "MPa", "megapascals", 1e6, SI),
        ("GPa", "GPa", "gigapascals", 1e9, SI),
        ("bar", "bar", "bars", 1e5, OTHER),
        ("mbar", "mbar", "millibars", 100, OTHER),
        ("atm", "atm", "atmospheres", 101325, OTHER),
        ("mmHg", "mmHg", "mmHg", 133.322, OTHER),
        ("Torr", "Torr", "Torr", 133.322, OTHER),
        ("psi", "psi", "psi", 6894.76, OTHER),
        ("dyn/cm²", "dyn/cm²", "dyne/cm²", 0.1, CGS),
        ("Eh/a₀³", "Eh/a₀³", "atomic pressure units", C.ATOMIC_PRESSURE, AU),
    ])),
    ("velocity", ("Velocity", "m/s", [
        ("m/s", "m/s", "meters per second", 1, SI),
        ("km/s", "km/s", "kilometers per second", 1000, SI),
        ("km/h", "km/h", "kilometers per hour", 1 / 3.6, OTHER),
        ("mph", "mph", "miles per hour", 0.44704, OTHER),
        ("ft/s", "ft/s", "feet per second", 0.3048, OTHER),
        ("cm/s", "cm/s", "centimeters per second", 0.01, CGS),
        ("c", "c", "speed of light", C.SPEED_OF_LIGHT, OTHER),
        ("a₀Eh/ℏ", "a₀Eh/ℏ", "atomic velocity units", C.ATOMIC_VELOCITY, AU),
    ])),
    ("electricField", ("Electric Field", "V/m", [
        ("V/m", "V/m", "volts per meter", 1, SI),
        ("kV/m", "kV/m", "kilovolts per meter", 1000, SI),
        ("MV/m", "MV/m", "megavolts per meter", 1e6, SI),
        ("V/cm", "V/cm", "volts per centimeter", 100, OTHER),
        ("kV/cm", "kV/cm", "kilovolts per centimeter", 1e5, OTHER),
        ("statV/cm", "statV/cm", "statvolts per centimeter", C.STATVOLT_PER_CM, CGS),
        ("Eh/(e·a₀)", "Eh/(e·a₀)", "atomic electric field units",
         C.ATOMIC_ELECTRIC_FIELD, AU),
    ])),
    ("magneticField", ("Magnetic Field", "T", [
        ("T", "T", "Tesla", 1, SI),
        ("mT", "mT", "millitesla", 0.001, SI),
        ("μT", "μT", "microtesla", 1e-6, SI),
        ("nT", "nT", "nanotesla", 1e-9, SI),
        ("G", "G", "Gauss", 1e-4, CGS),
        ("kG", "kG", "kilogauss", 0.1, OTHER),
        ("Oe", "Oe", "Oersted", 7.95775e-5, OTHER),  # H-field, in vacuum
        ("ℏ/(e·a₀²)", "ℏ/(e·a₀²)", "atomic magnetic field units",
         C.ATOMIC_MAGNETIC_FIELD, AU),
    ])),
    ("frequency", ("Frequency", "Hz", [
        ("Hz", "Hz", "Hertz", 1, SI),
        ("kHz", "kHz", "kilohertz", 1000, SI),
        ("MHz", "MHz", "megahertz", 1e6, SI),
        ("GHz", "GHz", "gigahertz", 1e9, SI),
        ("THz", "THz", "terahertz", 1e12, SI),
        ("rad/s", "rad/s", "radians per second", 0.159155, OTHER),
        ("rpm", "rpm", "revolutions per minute", 1 / 60, OTHER),
        ("Eh/ℏ", "Eh/ℏ", "atomic frequency units", C.ATOMIC_FREQUENCY, AU),
    ])),
])

# kelvin = (raw + offset) * factor holds for K, °C and °R only.
_TEMPERATURE_TABLE = ("Temperature", "K", [
    ("K", "K", "Kelvin", Affine(0.0, 1.0), SI),
    ("°C", "°C", "Celsius", Affine(C.CELSIUS_OFFSET, 1.0), OTHER),
    ("°F", "°F", "Fahrenheit", Affine(255.372, 5 / 9), OTHER),
    ("°R", "°R", "Rankine", Affine(0.0, 5 / 9), OTHER),
])


# ═══════════════════════════════════════════════════════════════════════
# §3  REGISTRY CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════════

def _build_category(key: str, name: str, reference: str, rows: list) -> Category:
    units = OrderedDict()
    for unit_key, symbol, unit_name, factor, system in rows:
        if not isinstance(factor, Affine):
            factor = Scalar(float(factor))
        units[unit_key] = Unit(unit_key, symbol, unit_name, factor, system)

    ref = units[reference].factor
    if ref.factor != 1 or (isinstance(ref, Affine) and ref.offset != 0):
        raise ValueError(f"Reference unit '{reference}' of '{key}' must have factor 1")
    return Category(key, name, MappingProxyType(units), reference)


def _build_registry() -> Mapping[str, Category]:
    categories = OrderedDict()
    for key, (name, reference, rows) in _LINEAR_TABLES.items():
        categories[key] = _build_category(key, name, reference, rows)
    name, reference, rows = _TEMPERATURE_TABLE
    categories["temperature"] = _build_category("temperature", name, reference, rows)
    _log.debug("Built unit registry with %d categories", len(categories))
    return MappingProxyType(categories)


CATEGORIES: Mapping[str, Category] = _build_registry()

# category → unit key → Scalar | Affine
CONVERSION_FACTORS: Mapping[str, Mapping[str, Factor]] = MappingProxyType(
    OrderedDict((k, c.factors()) for k, c in CATEGORIES.items())
)

# category → {"name": ..., "units": unit key → Unit}
UNIT_CATEGORIES: Mapping[str, Mapping] = MappingProxyType(OrderedDict(
    (k, MappingProxyType({"name": c.name, "units": c.units}))
    for k, c in CATEGORIES.items()
))


# ═══════════════════════════════════════════════════════════════════════
# §4  ACCESSORS
# ═══════════════════════════════════════════════════════════════════════

def get_categories() -> list:
    return list(CATEGORIES)


def get_category(category: str) -> Category:
    try:
        return CATEGORIES[category]
    except KeyError:
        raise UnknownCategory(category) from None


def get_units_for_category(category: str) -> Mapping[str, Unit]:
    """Ordered unit key → Unit mapping; empty for an unknown category."""
    if category not in CATEGORIES:
        return MappingProxyType({})
    return CATEGORIES[category].units


def get_unit(category: str, unit: str) -> Unit:
    units = get_category(category).units
    try:
        return units[unit]
    except KeyError:
        raise UnknownUnit(unit, category) from None


def factor_of(category: str, unit: str) -> Factor:
    """
    Look up the conversion factor of ``unit`` within ``category``.

    Raises
    ------
    UnknownCategory
        If the category is not registered.
    UnknownUnit
        If the category has no such unit.
    """
    return get_unit(category, unit).factor


def units_in_system(category: str, system: UnitSystem) -> list:
    """Units of ``category`` tagged with ``system``, in table order."""
    return [u for u in get_category(category).units.values() if u.system is system]
