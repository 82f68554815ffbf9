"""
Measurement — an immutable (value, uncertainty) pair.

Single-input operations propagate uncertainty linearly: for f(x) = a·x + b,
σ_f = |a|·σ_x. Quadrature (√(σ₁² + σ₂²)) only enters when two independent
measurements are compared, or when several independent inputs feed one
formula (see ``DerivedQuantity`` in ``uncertainty_engine``).
"""

import math
from dataclasses import dataclass

from . import config
from .formatting import format_number, round_half_up


def _coerce(x) -> float:
    """Numeric view of ``x``; anything non-numeric (or NaN) becomes 0."""
    try:
        x = float(x)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(x) else x


@dataclass(frozen=True)
class Measurement:
    value: float = 0.0
    uncertainty: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", _coerce(self.value))
        object.__setattr__(self, "uncertainty", abs(_coerce(self.uncertainty)))

    # ── Propagation ──

    def scale(self, factor: float) -> "Measurement":
        """f(x) = a·x  →  σ_f = |a|·σ_x"""
        return Measurement(self.value * factor, self.uncertainty * abs(factor))

    def translate(self, constant: float) -> "Measurement":
        """f(x) = x + c  →  σ_f = σ_x"""
        return Measurement(self.value + constant, self.uncertainty)

    def subtract_from(self, constant: float) -> "Measurement":
        """f(x) = c − x  →  σ_f = σ_x"""
        return Measurement(constant - self.value, self.uncertainty)

    def affine(self, slope: float, intercept: float) -> "Measurement":
        """f(x) = a·x + b  →  σ_f = |a|·σ_x"""
        return Measurement(slope * self.value + intercept, abs(slope) * self.uncertainty)

    def __mul__(self, factor):
        if isinstance(factor, Measurement):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Measurement):
            return NotImplemented
        return self.scale(1.0 / divisor)

    def __add__(self, constant):
        if isinstance(constant, Measurement):
            return NotImplemented
        return self.translate(constant)

    __radd__ = __add__

    def __sub__(self, constant):
        if isinstance(constant, Measurement):
            return NotImplemented
        return self.translate(-constant)

    def __rsub__(self, constant):
        return self.subtract_from(constant)

    # ── Queries ──

    def relative_uncertainty(self) -> float:
        """|σ / x|, or 0 for a zero value."""
        if self.value == 0:
            return 0.0
        return abs(self.uncertainty / self.value)

    def agrees_with(self, other: "Measurement",
                    n_sigma: float = config.DEFAULT_N_SIGMA) -> bool:
        """
        True if the two values lie within ``n_sigma`` combined standard
        uncertainties of each other, the uncertainties being combined in
        quadrature as independent measurements.
        """
        difference = abs(self.value - other.value)
        combined = math.sqrt(self.uncertainty**2 + other.uncertainty**2)
        return difference <= n_sigma * combined

    # ── Display ──

    @staticmethod
    def format_value(num: float, max_digits: int = config.DEFAULT_MAX_DIGITS) -> str:
        return format_number(
            num,
            precision=max_digits,
            exponent_digits=min(max_digits - 1, config.DEFAULT_EXPONENT_DIGITS),
            small_threshold=config.MEASUREMENT_SCIENTIFIC_LOWER,
        )

    def to_string(self, max_digits: int = config.DEFAULT_MAX_DIGITS) -> str:
        """
        Render as ``"value ± uncertainty"``, rounding both (halves up) to the decimal
        place set by the uncertainty's order of magnitude. An exact value
        (zero uncertainty) renders alone.
        """
        if self.uncertainty == 0:
            return self.format_value(self.value, max_digits)
        if not math.isfinite(self.uncertainty):
            return (f"{self.format_value(self.value, max_digits)} ± "
                    f"{self.format_value(self.uncertainty, max_digits)}")

        order = math.floor(math.log10(self.uncertainty))
        places = max(0, 2 - order)
        value = round_half_up(self.value, places)
        uncertainty = round_half_up(self.uncertainty, places)
        return (f"{self.format_value(value, max_digits)} ± "
                f"{self.format_value(uncertainty, max_digits)}")

    def __str__(self):
        return self.to_string()
