"""
Tests for the conversion factor registry and category metadata.
"""

import pytest

from unit_system import (
    CATEGORIES,
    CONVERSION_FACTORS,
    UNIT_CATEGORIES,
    Affine,
    Scalar,
    UnitSystem,
    UnknownCategory,
    UnknownUnit,
    UnsupportedConversion,
    factor_of,
    get_categories,
    get_category,
    get_unit,
    get_units_for_category,
    units_in_system,
)
from unit_system import constants as C


EXPECTED_CATEGORIES = [
    "length", "mass", "time", "energy", "power", "force", "pressure",
    "velocity", "electricField", "magneticField", "frequency", "temperature",
]


class TestCategories:
    """Tests for category enumeration and lookup."""

    def test_all_categories_present_in_order(self):
        assert get_categories() == EXPECTED_CATEGORIES

    def test_reference_unit_has_unit_factor(self):
        for key, cat in CATEGORIES.items():
            ref = cat.units[cat.reference_unit].factor
            assert ref.factor == 1.0, key
            if isinstance(ref, Affine):
                assert ref.offset == 0.0

    def test_linear_factors_are_positive_scalars(self, linear_categories):
        for key in linear_categories:
            for unit_key, factor in CONVERSION_FACTORS[key].items():
                assert isinstance(factor, Scalar), (key, unit_key)
                assert factor.factor > 0

    def test_temperature_factors_are_affine(self):
        assert set(CONVERSION_FACTORS["temperature"]) == {"K", "°C", "°F", "°R"}
        for factor in CONVERSION_FACTORS["temperature"].values():
            assert isinstance(factor, Affine)

    def test_get_category_unknown(self):
        with pytest.raises(UnknownCategory):
            get_category("nosuchcategory")


class TestFactorLookup:
    """Tests for factor_of and unit lookup."""

    def test_known_factors(self):
        assert factor_of("length", "km") == Scalar(1000.0)
        assert factor_of("length", "a₀") == Scalar(C.BOHR_RADIUS)
        assert factor_of("temperature", "°C") == Affine(273.15, 1.0)

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnit) as exc:
            factor_of("length", "xyz")
        assert exc.value.unit == "xyz"
        assert exc.value.category == "length"

    def test_unknown_category(self):
        with pytest.raises(UnknownCategory):
            factor_of("nosuchcategory", "m")

    def test_unknown_category_is_an_unknown_unit(self):
        with pytest.raises(UnknownUnit):
            factor_of("nosuchcategory", "m")

    def test_lookup_errors_are_unsupported_conversions(self):
        with pytest.raises(UnsupportedConversion):
            factor_of("length", "xyz")

    def test_atomic_factors_derived_from_constants(self):
        assert factor_of("force", "Eh/a₀").factor == pytest.approx(8.2387234983e-8, rel=1e-9)
        assert factor_of("pressure", "Eh/a₀³").factor == pytest.approx(2.9421e13, rel=1e-4)
        assert factor_of("frequency", "Eh/ℏ").factor == pytest.approx(4.13413e16, rel=1e-5)


class TestMetadata:
    """Tests for the display metadata consumed by presentation code."""

    def test_unit_categories_shape(self):
        length = UNIT_CATEGORIES["length"]
        assert length["name"] == "Length"
        assert length["units"]["au"].symbol == "AU"
        assert length["units"]["au"].name == "astronomical units"

    def test_units_keep_table_order(self):
        assert list(get_units_for_category("time"))[:3] == ["s", "ms", "μs"]

    def test_units_for_unknown_category_is_empty(self):
        assert len(get_units_for_category("nosuchcategory")) == 0

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CONVERSION_FACTORS["length"]["furlong"] = Scalar(201.168)
        with pytest.raises(TypeError):
            UNIT_CATEGORIES["length"] = {}

    def test_get_unit(self):
        unit = get_unit("energy", "Eh")
        assert unit.name == "Hartree"
        assert unit.system is UnitSystem.ATOMIC
        assert unit.is_linear


class TestUnitSystems:
    """Tests for the explicit SI / CGS / atomic tags."""

    def test_atomic_units(self):
        keys = {u.key for key in CATEGORIES for u in units_in_system(key, UnitSystem.ATOMIC)}
        assert keys == {
            "a₀", "mₑ", "ℏ/Eh", "Eh", "Eh/a₀", "Eh/a₀³", "a₀Eh/ℏ",
            "Eh/(e·a₀)", "ℏ/(e·a₀²)", "Eh/ℏ",
        }

    def test_cgs_units(self):
        keys = {u.key for key in CATEGORIES for u in units_in_system(key, UnitSystem.CGS)}
        assert keys == {
            "cm", "g", "erg", "erg/s", "dyn", "dyn/cm²", "cm/s", "statV/cm", "G",
        }

    def test_electron_volt_is_not_atomic(self):
        assert get_unit("energy", "eV").system is UnitSystem.OTHER

    def test_si_length_units(self):
        keys = [u.key for u in units_in_system("length", UnitSystem.SI)]
        assert keys == ["m", "km", "mm", "μm", "nm", "pm", "fm"]

    def test_no_atomic_temperature(self):
        assert units_in_system("temperature", UnitSystem.ATOMIC) == []
