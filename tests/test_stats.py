"""
Tests for the statistics helpers.
"""

import math

import pytest

from unit_system import (
    ChiSquaredResult,
    DivisionByZero,
    LengthMismatch,
    Measurement,
    chi_squared_test,
    round_to_significant_figures,
    weighted_average,
)


class TestWeightedAverage:
    """Tests for the inverse-variance weighted mean."""

    def test_equal_weights(self):
        m = weighted_average([10, 10], [1, 1])
        assert isinstance(m, Measurement)
        assert m.value == pytest.approx(10)
        assert m.uncertainty == pytest.approx(1 / math.sqrt(2))

    def test_midpoint(self):
        assert weighted_average([1, 3], [1, 1]).value == pytest.approx(2)

    def test_precise_point_dominates(self):
        m = weighted_average([10, 20], [0.1, 10])
        assert m.value == pytest.approx(10.001, abs=1e-3)
        assert m.uncertainty < 0.1

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch):
            weighted_average([1, 2, 3], [1, 1])

    def test_empty(self):
        with pytest.raises(LengthMismatch):
            weighted_average([], [])

    def test_zero_uncertainty(self):
        with pytest.raises(DivisionByZero):
            weighted_average([1, 2], [0, 1])

    def test_zero_uncertainty_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            weighted_average([1, 2], [1, 0])


class TestChiSquared:
    """Tests for the chi-squared consistency check."""

    def test_consistent_set(self):
        result = chi_squared_test([1, 2, 3], [1, 1, 1])
        assert isinstance(result, ChiSquaredResult)
        assert result.chi_squared == pytest.approx(2)
        assert result.degrees_of_freedom == 2
        assert result.reduced_chi_squared == pytest.approx(1)
        assert result.is_consistent
        assert result.p_value == pytest.approx(math.exp(-1))

    def test_inconsistent_set(self):
        result = chi_squared_test([1, 10], [0.1, 0.1])
        assert not result.is_consistent
        assert result.p_value < 1e-6

    def test_expected_value_keeps_all_dof(self):
        result = chi_squared_test([9, 11], [1, 1], expected_value=10)
        assert result.degrees_of_freedom == 2
        assert result.chi_squared == pytest.approx(2)

    def test_expected_value_zero_is_honored(self):
        result = chi_squared_test([1, 1], [1, 1], expected_value=0.0)
        assert result.degrees_of_freedom == 2
        assert result.chi_squared == pytest.approx(2)

    def test_threshold_parameter(self):
        result = chi_squared_test([1, 2, 3], [1, 1, 1], threshold=0.5)
        assert not result.is_consistent

    def test_single_value_has_no_dof(self):
        result = chi_squared_test([5], [1])
        assert result.degrees_of_freedom == 0
        assert math.isnan(result.reduced_chi_squared)
        assert not result.is_consistent

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch):
            chi_squared_test([1, 2], [1])


class TestSignificantFigures:
    """Tests for uncertainty-driven rounding."""

    def test_uncertainty_sets_figures(self):
        assert round_to_significant_figures(3.14159, 0.01) == 3.14

    def test_exact_value_uses_max(self):
        assert round_to_significant_figures(3.14159265, 0) == 3.14159
        assert round_to_significant_figures(3.14159265, 0, max_sig_figs=3) == 3.14

    def test_large_uncertainty_keeps_one_figure(self):
        assert round_to_significant_figures(1234.5, 10) == 1000.0

    def test_max_sig_figs_caps(self):
        assert round_to_significant_figures(1.23456789, 1e-9, max_sig_figs=4) == 1.235

    def test_zero_value(self):
        assert round_to_significant_figures(0, 0.1) == 0.0
        assert round_to_significant_figures(0, 0) == 0.0

    def test_negative_value(self):
        assert round_to_significant_figures(-2.71828, 0.01) == -2.72

    def test_half_rounds_up(self):
        assert round_to_significant_figures(25, 10) == 30.0
        assert round_to_significant_figures(0.125, 0.1) == 0.13

    def test_non_finite_uncertainty_leaves_value(self):
        assert round_to_significant_figures(1.0, math.nan) == 1.0
        assert round_to_significant_figures(1.0, math.inf) == 1.0
        assert round_to_significant_figures(-3.7, -math.inf) == -3.7
