"""
╔══════════════════════════════════════════════════════════════════════╗
║  UncertaintyEngine — unit conversion with error propagation          ║
║                                                                      ║
║  Supports:                                                           ║
║    • Linear conversions within a category (σ scales with |factor|)   ║
║    • Temperature scales via Kelvin, incl. eV and Eh/kB equivalents   ║
║    • Propagation through arbitrary formulas of independent inputs    ║
║    • Uncertainty budgets and expanded uncertainty                    ║
╚══════════════════════════════════════════════════════════════════════╝
"""

import logging
from collections import OrderedDict

import numpy as np
import sympy as sp

from . import constants as C
from .errors import (
    UnsupportedComplexConversion,
    UnsupportedConversion,
    UnsupportedTemperatureUnit,
)
from .measurement import Measurement
from .registry import Affine, factor_of

_log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════
# §1  UNIT CONVERSION WITH UNCERTAINTY
# ═══════════════════════════════════════════════════════════════════════

# eV and Eh/kB are accepted here but not by the plain converter.
_TO_KELVIN = {
    "K": lambda m: m,
    "°C": lambda m: m.translate(C.CELSIUS_OFFSET),
    "°F": lambda m: m.translate(C.FAHRENHEIT_OFFSET).scale(5 / 9),
    "°R": lambda m: m.scale(5 / 9),
    "eV": lambda m: m.scale(C.KELVIN_PER_EV),
    "Eh/kB": lambda m: m.scale(C.KELVIN_PER_HARTREE),
}

_FROM_KELVIN = {
    "K": lambda m: m,
    "°C": lambda m: m.translate(-C.CELSIUS_OFFSET),
    "°F": lambda m: m.scale(9 / 5).translate(-C.FAHRENHEIT_OFFSET),
    "°R": lambda m: m.scale(9 / 5),
    "eV": lambda m: m.scale(1 / C.KELVIN_PER_EV),
    "Eh/kB": lambda m: m.scale(1 / C.KELVIN_PER_HARTREE),
}


def convert_temperature_with_uncertainty(measurement: Measurement,
                                         from_unit: str, to_unit: str) -> Measurement:
    """Convert through Kelvin; offsets leave σ alone, scale factors multiply it."""
    if from_unit not in _TO_KELVIN:
        raise UnsupportedTemperatureUnit(from_unit, from_unit, to_unit)
    if to_unit not in _FROM_KELVIN:
        raise UnsupportedTemperatureUnit(to_unit, from_unit, to_unit)
    return _FROM_KELVIN[to_unit](_TO_KELVIN[from_unit](measurement))


def convert_with_uncertainty(value: float, uncertainty: float, from_unit: str,
                             to_unit: str, category: str) -> Measurement:
    """
    Convert a measurement between two units of ``category``.

    Parameters
    ----------
    value, uncertainty : float
        Best estimate and standard uncertainty in ``from_unit``. Negative
        uncertainties are taken by absolute value.
    from_unit, to_unit : str
        Unit keys from the registry (for temperature: K, °C, °F, °R, eV, Eh/kB).
    category : str
        Category key, e.g. ``"length"``.

    Raises
    ------
    UnknownCategory, UnknownUnit
        Category or unit missing from the registry.
    UnsupportedTemperatureUnit
        Temperature unit outside the supported set.
    UnsupportedComplexConversion
        An offset descriptor reached the linear path.
    """
    measurement = Measurement(value, uncertainty)
    if from_unit == to_unit:
        return measurement

    if category == "temperature":
        return convert_temperature_with_uncertainty(measurement, from_unit, to_unit)

    try:
        from_factor = factor_of(category, from_unit)
        to_factor = factor_of(category, to_unit)
    except UnsupportedConversion:
        _log.debug("Rejected conversion %s -> %s in %s", from_unit, to_unit, category)
        raise

    if isinstance(from_factor, Affine) or isinstance(to_factor, Affine):
        raise UnsupportedComplexConversion(from_unit, to_unit, category)

    return measurement.scale(from_factor.factor / to_factor.factor)


# ═══════════════════════════════════════════════════════════════════════
# §2  PROPAGATION THROUGH A FORMULA
# ═══════════════════════════════════════════════════════════════════════

class DerivedQuantity:
    """
    A quantity computed from independent measurements via a formula.
    Uses symbolic differentiation for exact partial derivatives (GUM linear method).
    """

    def __init__(self, name: str, symbol: str, unit: str,
                 formula_str: str, variables: dict):
        """
        Parameters
        ----------
        name : str
            Human-readable name (e.g., "Kinetic energy").
        symbol : str
            Symbol for reports (e.g., "E").
        unit : str
            Unit key of the result (e.g., "J").
        formula_str : str
            Sympy-parseable formula string, e.g. "m * v**2 / 2"
        variables : dict
            Mapping of symbol string → Measurement, or → (value, uncertainty).
        """
        self.name = name
        self.symbol = symbol
        self.unit = unit
        self.formula_str = formula_str
        self.variables = OrderedDict(
            (k, v if isinstance(v, Measurement) else Measurement(*v))
            for k, v in variables.items()
        )

        self.sym_vars = {k: sp.Symbol(k) for k in self.variables}
        self.expr = sp.sympify(formula_str, locals=self.sym_vars)

        unknown = self.expr.free_symbols - set(self.sym_vars.values())
        if unknown:
            names = ", ".join(sorted(str(s) for s in unknown))
            raise ValueError(f"Formula '{formula_str}' uses undefined variables: {names}")

        self.partials = OrderedDict(
            (k, sp.diff(self.expr, s)) for k, s in self.sym_vars.items()
        )

    def _subs(self) -> dict:
        return {self.sym_vars[k]: m.value for k, m in self.variables.items()}

    @property
    def best_value(self) -> float:
        return float(self.expr.evalf(subs=self._subs()))

    def sensitivity_coefficients(self) -> dict:
        """Evaluate ∂f/∂xᵢ at the best-estimate values."""
        subs = self._subs()
        return OrderedDict(
            (k, float(partial.evalf(subs=subs))) for k, partial in self.partials.items()
        )

    @property
    def combined_uncertainty(self) -> float:
        """
        u_c² = Σᵢ (∂f/∂xᵢ)² · u(xᵢ)², inputs assumed uncorrelated.
        """
        coeffs = self.sensitivity_coefficients()
        contributions = np.array([
            coeffs[k] * m.uncertainty for k, m in self.variables.items()
        ])
        return float(np.sqrt(np.sum(contributions**2)))

    @property
    def relative_uncertainty(self) -> float:
        return self.to_measurement().relative_uncertainty()

    def uncertainty_budget(self) -> list:
        """
        Each input's share of the combined variance.
        """
        coeffs = self.sensitivity_coefficients()
        u_c_sq = self.combined_uncertainty**2
        budget = []
        for var_name, m in self.variables.items():
            c_i = coeffs[var_name]
            contribution = (c_i * m.uncertainty)**2
            budget.append({
                "variable": var_name,
                "best_value": m.value,
                "u_input": m.uncertainty,
                "sensitivity_coeff": c_i,
                "|c·u|": abs(c_i * m.uncertainty),
                "variance_contribution": contribution,
                "pct_contribution": (contribution / u_c_sq * 100) if u_c_sq > 0 else 0.0,
            })
        return budget

    def expanded_uncertainty(self, coverage_p: float = 0.95) -> tuple:
        """
        U = k · u_c, with k the two-sided normal quantile for ``coverage_p``.

        Returns
        -------
        (U, k)
        """
        from scipy.stats import norm

        if not 0 < coverage_p < 1:
            raise ValueError(f"Coverage probability must be in (0, 1), got {coverage_p}")
        k = float(norm.ppf((1 + coverage_p) / 2))
        return k * self.combined_uncertainty, k

    def to_measurement(self) -> Measurement:
        return Measurement(self.best_value, self.combined_uncertainty)


def propagate(formula_str: str, **variables) -> Measurement:
    """Shorthand: ``propagate("x / y", x=Measurement(1, 0.1), y=(2, 0.1))``."""
    return DerivedQuantity("", "", "", formula_str, variables).to_measurement()
