"""
Display and statistics defaults.

Every function that reads one of these takes it as a keyword argument, so a
caller can override a single call without touching module state.
"""

# ── Number formatting ──
DEFAULT_PRECISION = 10          # significant digits in fixed notation
DEFAULT_EXPONENT_DIGITS = 6     # mantissa digits in scientific notation
SCIENTIFIC_UPPER = 1e6          # |x| at or above this → scientific
SCIENTIFIC_LOWER = 1e-3         # |x| below this → scientific
ZERO_THRESHOLD = 1e-15          # |x| below this renders as "0"

# ── Measurement display ──
DEFAULT_MAX_DIGITS = 6
MEASUREMENT_SCIENTIFIC_LOWER = 1e-6

# ── Statistics ──
DEFAULT_N_SIGMA = 2.0
# Rule of thumb, not a significance level.
CHI_SQUARED_CONSISTENCY_THRESHOLD = 2.0
DEFAULT_MAX_SIG_FIGS = 6
