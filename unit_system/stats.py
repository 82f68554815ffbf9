"""
Statistics over collections of (value, uncertainty) pairs: weighted mean,
chi-squared consistency, and uncertainty-driven rounding.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from scipy.stats import chi2

from . import config
from .errors import DivisionByZero, LengthMismatch
from .formatting import round_half_up
from .measurement import Measurement

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChiSquaredResult:
    chi_squared: float
    degrees_of_freedom: int
    reduced_chi_squared: float
    is_consistent: bool
    p_value: float


def _as_arrays(values: Sequence[float], uncertainties: Sequence[float]) -> tuple:
    values = np.asarray(values, dtype=float)
    uncertainties = np.asarray(uncertainties, dtype=float)
    if values.shape != uncertainties.shape or values.ndim != 1:
        raise LengthMismatch(
            "Values and uncertainties arrays must have the same length "
            f"(got {values.size} and {uncertainties.size})"
        )
    if values.size == 0:
        raise LengthMismatch("Values and uncertainties arrays must not be empty")
    return values, uncertainties


def weighted_average(values: Sequence[float], uncertainties: Sequence[float]) -> Measurement:
    """
    Inverse-variance weighted mean.

    wᵢ = 1/σᵢ², x̄ = Σ wᵢxᵢ / Σ wᵢ, σ_x̄ = √(1 / Σ wᵢ)

    Raises
    ------
    LengthMismatch
        Inputs differ in length or are empty.
    DivisionByZero
        Any uncertainty is zero (its weight would be infinite).
    """
    values, uncertainties = _as_arrays(values, uncertainties)
    if np.any(uncertainties == 0):
        raise DivisionByZero("Weighted average needs non-zero uncertainties")

    weights = 1.0 / uncertainties**2
    weight_sum = np.sum(weights)
    mean = np.sum(values * weights) / weight_sum
    return Measurement(float(mean), float(np.sqrt(1.0 / weight_sum)))


def chi_squared_test(values: Sequence[float], uncertainties: Sequence[float],
                     expected_value: Optional[float] = None,
                     threshold: float = config.CHI_SQUARED_CONSISTENCY_THRESHOLD
                     ) -> ChiSquaredResult:
    """
    Test whether measurements scatter consistently around a common value.

    Parameters
    ----------
    values, uncertainties : sequence of float
        Measurements and their standard uncertainties (all non-zero).
    expected_value : float, optional
        Reference value. When omitted the arithmetic mean is used and one
        degree of freedom is spent on it.
    threshold : float
        ``is_consistent`` is ``reduced_chi_squared < threshold``. This is a
        rule of thumb, not a significance test; ``p_value`` (the chi-squared
        survival function) is reported alongside for callers who want one.

    Notes
    -----
    With zero degrees of freedom (a single value and no ``expected_value``)
    the reduced statistic and p-value are NaN and the result is reported as
    not consistent.
    """
    values, uncertainties = _as_arrays(values, uncertainties)
    if np.any(uncertainties == 0):
        raise DivisionByZero("Chi-squared test needs non-zero uncertainties")

    mean = float(np.mean(values)) if expected_value is None else float(expected_value)
    chi_squared = float(np.sum(((values - mean) / uncertainties)**2))
    dof = values.size - (0 if expected_value is not None else 1)

    if dof == 0:
        _log.debug("Chi-squared test with zero degrees of freedom")
        return ChiSquaredResult(chi_squared, 0, math.nan, False, math.nan)

    reduced = chi_squared / dof
    return ChiSquaredResult(
        chi_squared=chi_squared,
        degrees_of_freedom=dof,
        reduced_chi_squared=reduced,
        is_consistent=reduced < threshold,
        p_value=float(chi2.sf(chi_squared, dof)),
    )


def _round_sig(value: float, sig_figs: int) -> float:
    return round_half_up(value, sig_figs - math.floor(math.log10(abs(value))) - 1)


def round_to_significant_figures(value: float, uncertainty: float,
                                 max_sig_figs: int = config.DEFAULT_MAX_SIG_FIGS) -> float:
    """
    Round ``value`` to the significant figures its uncertainty supports.

    For σ = 0 the value keeps ``max_sig_figs`` figures. Otherwise
    sig_figs = clamp(1 − ⌊log₁₀|σ|⌋, 1, max_sig_figs). Exact halves round up.
    A NaN or infinite uncertainty leaves the value unchanged.

    >>> round_to_significant_figures(3.14159, 0.01)
    3.14
    >>> round_to_significant_figures(3.14159, 0)
    3.14159
    """
    if value == 0 or not math.isfinite(value):
        _log.debug("Not rounding degenerate value %r", value)
        return float(value)
    if not math.isfinite(uncertainty):
        _log.debug("Not rounding %r with non-finite uncertainty %r", value, uncertainty)
        return float(value)
    if uncertainty == 0:
        return _round_sig(value, max_sig_figs)

    order = math.floor(math.log10(abs(uncertainty)))
    sig_figs = max(1, min(max_sig_figs, 1 - order))
    return _round_sig(value, sig_figs)
