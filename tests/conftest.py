"""
Pytest configuration and shared fixtures.
"""

import pytest

from unit_system import CATEGORIES, Measurement


LINEAR_CATEGORIES = [k for k in CATEGORIES if k != "temperature"]


@pytest.fixture
def linear_categories():
    """Every category converted by a plain ratio of factors."""
    return list(LINEAR_CATEGORIES)


@pytest.fixture
def unit_pairs():
    """(category, from_unit, to_unit) for every ordered pair in every linear category."""
    pairs = []
    for key in LINEAR_CATEGORIES:
        units = list(CATEGORIES[key].units)
        pairs.extend((key, a, b) for a in units for b in units if a != b)
    return pairs


@pytest.fixture
def sample_measurements():
    return {
        "length_m": Measurement(10, 1),
        "close": Measurement(11, 1),
        "far": Measurement(15, 1),
        "exact": Measurement(5, 0),
    }


@pytest.fixture
def tolerance_values():
    """Relative tolerances for float comparisons."""
    return {
        "strict": 1e-12,
        "standard": 1e-9,
        "relaxed": 1e-6,
    }
