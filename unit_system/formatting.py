"""Number formatting and rounding shared by the converters and measurements."""

import math

import numpy as np

from . import config


def round_half_up(x: float, places: int = 0) -> float:
    """
    Round ``x`` to ``places`` decimals, exact halves going up (towards +∞).

    Negative ``places`` round to tens, hundreds, ... Non-finite input is
    returned unchanged.

    >>> round_half_up(2.5)
    3.0
    >>> round_half_up(25, -1)
    30.0
    """
    if not math.isfinite(x):
        return x
    if places >= 0:
        scale = 10 ** places
        return math.floor(x * scale + 0.5) / scale
    scale = 10 ** -places
    return float(math.floor(x / scale + 0.5) * scale)


def format_number(num: float, precision: int = config.DEFAULT_PRECISION,
                  exponent_digits: int = config.DEFAULT_EXPONENT_DIGITS,
                  small_threshold: float = config.SCIENTIFIC_LOWER,
                  strip_zeros: bool = True) -> str:
    """
    Render ``num`` for display.

    Parameters
    ----------
    num : float
        Value to render.
    precision : int
        Significant digits in fixed notation.
    exponent_digits : int
        Digits after the decimal point of the mantissa in scientific notation.
    small_threshold : float
        Magnitudes below this (but above the zero threshold) are rendered in
        scientific notation. The plain converter uses 1e-3, measurements 1e-6.
    strip_zeros : bool
        If True, the fixed form is a plain decimal with trailing zeros dropped
        and never an exponent (``"1200"``, ``"123.456"``). If False, exactly
        ``precision`` significant digits are kept (``"123.4560000"``).

    Returns
    -------
    str
        ``"0"`` for ``|num| < 1e-15``; scientific notation for
        ``|num| >= 1e6`` or ``|num| < small_threshold``; otherwise ``num``
        rounded to ``precision`` significant digits.
    """
    magnitude = abs(num)
    if magnitude < config.ZERO_THRESHOLD:
        return "0"
    if magnitude >= config.SCIENTIFIC_UPPER or magnitude < small_threshold:
        return f"{num:.{exponent_digits}e}"
    if not strip_zeros:
        return f"{num:#.{precision}g}"
    return np.format_float_positional(float(f"{num:.{precision}g}"), trim="-")
