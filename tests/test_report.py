"""
Tests for the plain-text reports.
"""

import pytest

from unit_system import ConversionReport, DerivedQuantity, Measurement, UnitSystem


class TestConversionTable:
    """Tests for target-system conversion tables."""

    def test_atomic_table(self):
        text = ConversionReport.conversion_table(1, "m", "length", UnitSystem.ATOMIC)
        assert "LENGTH → ATOMIC UNITS" in text
        assert "Input: 1 m" in text
        assert "a₀" in text
        assert "Bohr radii" in text
        assert "1.889726e+10" in text

    def test_table_with_uncertainty(self):
        text = ConversionReport.conversion_table(
            10, "m", "length", UnitSystem.CGS, uncertainty=1, title="Rod length"
        )
        assert text.splitlines()[1].strip() == "Rod length"
        assert "10 ± 1 m" in text
        assert "1000 ± 100" in text

    def test_empty_table(self):
        text = ConversionReport.conversion_table(300, "K", "temperature", UnitSystem.ATOMIC)
        assert "No ATOMIC units available for Temperature" in text


class TestBudgetReport:
    """Tests for the uncertainty budget report."""

    @pytest.fixture
    def derived(self):
        return DerivedQuantity(
            "Kinetic energy", "E", "J", "m * v**2 / 2",
            {"m": Measurement(2, 0.02), "v": Measurement(3, 0.1)},
        )

    def test_budget_lists_every_input(self, derived):
        text = ConversionReport.budget(derived)
        assert "UNCERTAINTY BUDGET: Kinetic energy" in text
        assert "E = m * v**2 / 2" in text
        rows = [line.split()[0] for line in text.splitlines() if line.startswith("  m ")
                or line.startswith("  v ")]
        assert rows == ["m", "v"]

    def test_budget_results(self, derived):
        text = ConversionReport.budget(derived, coverage_p=0.95)
        assert "k = 1.960" in text
        assert "E = 9" in text
